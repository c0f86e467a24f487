"""
test_chain_client.py — Unit Tests for the Chain Client
========================================================
No network access: only provider construction and pure helpers are used.
"""

import pytest
from web3 import Web3

from dice_config.core.contract_config import CONTRACT_CONFIG
from dice_config.services.chain_client import GAS_OPERATIONS, ChainClient


@pytest.fixture
def client():
    return ChainClient(CONTRACT_CONFIG)


class TestProvider:
    """Tests for RPC endpoint selection."""

    def test_defaults_to_configured_rpc(self, client):
        """Without an override the record's RPC_URL is used."""
        assert client.rpc_url == "https://testnet-rpc.monad.xyz"

    def test_rpc_override(self):
        """An explicit rpc_url wins over the record."""
        client = ChainClient(CONTRACT_CONFIG, rpc_url="http://localhost:8545")
        assert client.rpc_url == "http://localhost:8545"


class TestContractAddress:
    """Checksummed deployment addresses."""

    @pytest.mark.parametrize("version,field", [("v1", "DICE_GAME_V1"), ("V2", "DICE_GAME_V2")])
    def test_checksummed(self, client, version, field):
        """Addresses come back EIP-55 checksummed."""
        address = client.contract_address(version)
        assert Web3.is_checksum_address(address)
        assert address.lower() == getattr(CONTRACT_CONFIG.CONTRACTS, field).lower()

    def test_default_is_active_contract(self, client):
        """The default version is the active V2 deployment."""
        assert client.contract_address() == client.contract_address("v2")

    def test_unknown_version(self, client):
        """Unknown versions raise ValueError."""
        with pytest.raises(ValueError, match="Unknown contract version"):
            client.contract_address("v3")


class TestTxParams:
    """Per-operation gas limits."""

    def test_all_operations(self, client):
        """Each game operation maps to its configured gas limit."""
        gas = {op: client.tx_params(op)["gas"] for op in GAS_OPERATIONS}
        assert gas == {
            "create_room": 200000,
            "join_room": 100000,
            "start_game": 500000,
            "delete_room": 150000,
        }

    def test_chain_id_included(self, client):
        """Parameters carry the chain id; operation names are case-insensitive."""
        assert client.tx_params("START_GAME") == {"chainId": 41, "gas": 500000}

    def test_unknown_operation(self, client):
        """Operations without a gas limit raise ValueError."""
        with pytest.raises(ValueError, match="No gas limit configured"):
            client.tx_params("roll_dice")


class TestHelpers:
    """Tests for explorer links and currency formatting."""

    def test_explorer_tx_url(self, client):
        """Transaction links point at /tx/."""
        assert client.explorer_url("tx", "0xabc") == "https://testnet-explorer.monad.xyz/tx/0xabc"

    def test_explorer_address_url(self, client):
        """Address links point at /address/."""
        address = CONTRACT_CONFIG.CONTRACTS.DICE_GAME_V2
        assert client.explorer_url("address", address) == (
            f"https://testnet-explorer.monad.xyz/address/{address}"
        )

    @pytest.mark.parametrize("kind", ["block", "token"])
    def test_explorer_url_unknown_kind(self, client, kind):
        """Only tx and address links are supported."""
        with pytest.raises(ValueError):
            client.explorer_url(kind, "0xabc")

    def test_format_native_whole(self, client):
        """Whole amounts have no fractional part."""
        assert client.format_native(2 * 10**18) == "2 MON"

    def test_format_native_fraction(self, client):
        """Fractions drop trailing zeros."""
        assert client.format_native(15 * 10**17) == "1.5 MON"
        assert client.format_native(1) == "0.000000000000000001 MON"

    def test_format_native_negative(self, client):
        """Negative amounts keep their sign."""
        assert client.format_native(-25 * 10**16) == "-0.25 MON"


class TestConnectivity:
    """Tests for the RPC connectivity check."""

    def test_reports_provider_result(self, client, monkeypatch):
        """The provider's answer is passed through."""
        monkeypatch.setattr(client.w3, "is_connected", lambda: True)
        assert client.is_connected() is True

    def test_errors_report_disconnected(self, client, monkeypatch):
        """Connection errors are reported as disconnected."""
        def boom():
            raise ConnectionError("refused")

        monkeypatch.setattr(client.w3, "is_connected", boom)
        assert client.is_connected() is False
