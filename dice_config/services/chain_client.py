"""
chain_client.py — Monad Chain Client
======================================
Web3.py client built from the contract configuration record. Turns the
record into the values a DiceGame transaction needs: the RPC provider,
checksummed contract addresses, per-operation gas limits and explorer
links.
"""

import logging
from typing import Dict, Optional

from web3 import Web3

from dice_config.core.contract_config import CONTRACT_CONFIG
from dice_config.core.schema import ContractConfig

logger = logging.getLogger(__name__)

# Game operations with a configured gas limit
GAS_OPERATIONS = ("create_room", "join_room", "start_game", "delete_room")

CONTRACT_VERSIONS = ("v1", "v2")

EXPLORER_KINDS = ("tx", "address")


class ChainClient:
    """
    Read-only helper around the Monad Testnet RPC endpoint and the
    deployed DiceGame contracts.
    """

    def __init__(
        self,
        config: ContractConfig = CONTRACT_CONFIG,
        rpc_url: Optional[str] = None,
    ):
        """
        Initialize the chain client.

        Args:
            config: Configuration record to read from.
            rpc_url: Override for the RPC endpoint.
                     Defaults to NETWORK.RPC_URL.
        """
        self.config = config
        self.rpc_url = rpc_url or config.NETWORK.RPC_URL
        self.w3 = Web3(Web3.HTTPProvider(self.rpc_url))

        logger.info(
            "ChainClient initialized (rpc=%s, chain_id=%d)",
            self.rpc_url,
            config.NETWORK.CHAIN_ID,
        )

    def contract_address(self, version: str = "v2") -> str:
        """
        Checksummed address of a DiceGame deployment.

        Args:
            version: ``"v1"`` (legacy) or ``"v2"`` (active).

        Returns:
            EIP-55 checksummed address.

        Raises:
            ValueError: If the version is unknown.
        """
        version = version.lower()
        if version not in CONTRACT_VERSIONS:
            raise ValueError(
                f"Unknown contract version {version!r}; "
                f"expected one of {', '.join(CONTRACT_VERSIONS)}"
            )
        address = getattr(self.config.CONTRACTS, f"DICE_GAME_{version.upper()}")
        return Web3.to_checksum_address(address)

    def tx_params(self, operation: str) -> Dict[str, int]:
        """
        Base transaction parameters for a game operation.

        Args:
            operation: One of ``GAS_OPERATIONS`` (case-insensitive).

        Returns:
            Dict with ``chainId`` and ``gas``.

        Raises:
            ValueError: If the operation has no configured gas limit.
        """
        op = operation.lower()
        if op not in GAS_OPERATIONS:
            raise ValueError(
                f"No gas limit configured for {operation!r}; "
                f"expected one of {', '.join(GAS_OPERATIONS)}"
            )
        return {
            "chainId": self.config.NETWORK.CHAIN_ID,
            "gas": getattr(self.config.GAS, op.upper()),
        }

    def explorer_url(self, kind: str, value: str) -> str:
        """Block explorer link for a transaction or an address."""
        if kind not in EXPLORER_KINDS:
            raise ValueError(f"Unknown explorer link kind: {kind!r}")
        base = self.config.NETWORK.BLOCK_EXPLORER.rstrip("/")
        return f"{base}/{kind}/{value}"

    def format_native(self, wei: int) -> str:
        """Render a base-unit amount in the native currency, e.g. ``1.5 MON``."""
        currency = self.config.NETWORK.CURRENCY
        unit = 10 ** currency.DECIMALS
        sign = "-" if wei < 0 else ""
        whole, frac = divmod(abs(wei), unit)
        if frac == 0:
            return f"{sign}{whole} {currency.SYMBOL}"
        digits = f"{frac:0{currency.DECIMALS}d}".rstrip("0")
        return f"{sign}{whole}.{digits} {currency.SYMBOL}"

    def is_connected(self) -> bool:
        """Check if the RPC endpoint is reachable."""
        try:
            return self.w3.is_connected()
        except Exception as e:
            logger.warning("RPC connectivity check failed (%s): %s", self.rpc_url, e)
            return False
