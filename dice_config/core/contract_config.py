"""
contract_config.py — DiceGame Contract Configuration
======================================================
Network parameters, deployed contract addresses, UI constants and gas
limits for the DiceGame front-end on Monad Testnet.

``CONTRACT_CONFIG`` is built once when this module is imported and is never
mutated afterwards.
"""

from dice_config.core.schema import ContractConfig


def build_contract_config() -> ContractConfig:
    """
    Construct the configuration record from its literal values.

    Returns:
        A new frozen ContractConfig. Repeated calls return equal records.
    """
    return ContractConfig(
        NETWORK={
            "CHAIN_ID": 41,
            "NAME": "Monad Testnet",
            "RPC_URL": "https://testnet-rpc.monad.xyz",
            "BLOCK_EXPLORER": "https://testnet-explorer.monad.xyz",
            "CURRENCY": {
                "NAME": "MON",
                "SYMBOL": "MON",
                "DECIMALS": 18,
            },
        },
        CONTRACTS={
            "DICE_GAME_V1": "0x5Cf84Ad10D2ecb4BD0303BA1d3715a4A13BFeB3c",  # original release
            "DICE_GAME_V2": "0xAa3e0954f3b665e84c3baE5e159A27FF70edf955",  # enhanced release (deployed)
        },
        UI={
            "AUTO_REFRESH_INTERVAL": 30000,  # 30 s
            "MAX_PLAYERS_DISPLAY": 10,
            "SOUND_ENABLED": True,
            "ANIMATION_ENABLED": True,
        },
        GAS={
            "CREATE_ROOM": 200000,
            "JOIN_ROOM": 100000,
            "START_GAME": 500000,
            "DELETE_ROOM": 150000,
        },
    )


CONTRACT_CONFIG = build_contract_config()


def active_contract_address(config: ContractConfig = CONTRACT_CONFIG) -> str:
    """Address of the deployment the front-end talks to."""
    return config.CONTRACTS.DICE_GAME_V2


def legacy_contract_address(config: ContractConfig = CONTRACT_CONFIG) -> str:
    # Still read by older front-end builds.
    return config.CONTRACTS.DICE_GAME_V1
