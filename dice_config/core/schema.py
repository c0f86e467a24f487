"""
schema.py — Contract Configuration Schema
===========================================
Immutable record types for the DiceGame front-end configuration.

Field names are upper-case so consumers read the record the same way the
browser script does: ``CONTRACT_CONFIG.NETWORK.CHAIN_ID``. Every model is
frozen; assigning to an attribute raises ``pydantic.ValidationError``.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# 0x-prefixed, 20-byte hex contract address
ADDRESS_PATTERN = r"^0x[0-9a-fA-F]{40}$"

Address = Annotated[str, Field(strict=True, pattern=ADDRESS_PATTERN)]
NonNegativeInt = Annotated[int, Field(strict=True, ge=0)]
Text = Annotated[str, Field(strict=True)]
Flag = Annotated[bool, Field(strict=True)]


class _FrozenRecord(BaseModel):
    """Base for every configuration group."""

    model_config = ConfigDict(frozen=True, extra="forbid")


class CurrencyConfig(_FrozenRecord):
    """Native currency descriptor."""

    NAME: Text
    SYMBOL: Text
    DECIMALS: NonNegativeInt


class NetworkConfig(_FrozenRecord):
    """Network the game contracts are deployed to."""

    CHAIN_ID: NonNegativeInt
    NAME: Text
    RPC_URL: Text
    BLOCK_EXPLORER: Text
    CURRENCY: CurrencyConfig


class ContractsConfig(_FrozenRecord):
    """Deployed DiceGame contract addresses."""

    DICE_GAME_V1: Address        # Legacy deployment
    DICE_GAME_V2: Address        # Active deployment


class UIConfig(_FrozenRecord):
    """Front-end display constants."""

    AUTO_REFRESH_INTERVAL: NonNegativeInt    # milliseconds
    MAX_PLAYERS_DISPLAY: NonNegativeInt
    SOUND_ENABLED: Flag
    ANIMATION_ENABLED: Flag


class GasConfig(_FrozenRecord):
    """Gas limit per game operation."""

    CREATE_ROOM: NonNegativeInt
    JOIN_ROOM: NonNegativeInt
    START_GAME: NonNegativeInt
    DELETE_ROOM: NonNegativeInt


class ContractConfig(_FrozenRecord):
    """The complete front-end configuration record."""

    NETWORK: NetworkConfig
    CONTRACTS: ContractsConfig
    UI: UIConfig
    GAS: GasConfig
