"""Shared test fixtures and sample data."""
from __future__ import annotations

import base64
from typing import Any
from unittest.mock import AsyncMock

import pytest

from fluxrpc_quickstart.config import AppConfig, DemoConfig, FluxRpcConfig, RpcConfig
from fluxrpc_quickstart.services import QuickstartService

WALLET = "DLRPZSrex3dk58mbJxfKEaxPMazchNogvZDSh26BhgRi"
SYSTEM_PROGRAM = "11111111111111111111111111111111"
BLOCKHASH = "Zb6cPmjqh9UmdG4TP4QRVDsjFEinDzze8CY2mrgXgEv"
UNKNOWN_SIGNATURE = "1" * 64
KNOWN_SIGNATURE = "1" * 63 + "2"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's .env and shell variables out of the tests."""
    monkeypatch.setattr("fluxrpc_quickstart.config.load_dotenv", lambda *a, **k: False)
    monkeypatch.delenv("FLUXRPC_API_KEY", raising=False)
    monkeypatch.delenv("FLUXRPC_REGION", raising=False)


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def rpc_config() -> RpcConfig:
    return RpcConfig(
        url="https://eu.fluxrpc.com/?key=test-key", timeout=5, commitment="confirmed"
    )


@pytest.fixture()
def app_config(rpc_config: RpcConfig) -> AppConfig:
    return AppConfig(
        fluxrpc=FluxRpcConfig(api_key="test-key", region="eu"),
        rpc=rpc_config,
        demo=DemoConfig(wallet=WALLET),
    )


# ---------------------------------------------------------------------------
# RPC fakes
# ---------------------------------------------------------------------------


def account_payload(data: bytes = b"", executable: bool = False) -> dict[str, Any]:
    return {
        "owner": SYSTEM_PROGRAM,
        "lamports": 35737443,
        "executable": executable,
        "data": [base64.b64encode(data).decode(), "base64"],
        "rentEpoch": 18446744073709551615,
        "space": len(data),
    }


def transaction_payload(err: Any = None) -> dict[str, Any]:
    return {
        "slot": 375270000,
        "blockTime": 1760000000,
        "meta": {"err": err, "fee": 5000},
        "transaction": {"signatures": [KNOWN_SIGNATURE]},
    }


class FakeRpc:
    """In-memory SolanaRpc with canned provider replies."""

    def __init__(
        self,
        balance: int = 35737443,
        account: dict[str, Any] | None = None,
        transaction: dict[str, Any] | None = None,
        slot: int = 375270000,
        block_time: int | None = 1760000000,
    ) -> None:
        self.balance = balance
        self.account = account
        self.transaction = transaction
        self.slot = slot
        self.block_time = block_time
        self.calls: list[str] = []
        self.closed = False

    async def __aenter__(self) -> FakeRpc:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        self.closed = True

    async def get_balance(self, address: str) -> int:
        self.calls.append("getBalance")
        return self.balance

    async def get_latest_blockhash(self) -> dict[str, Any]:
        self.calls.append("getLatestBlockhash")
        return {"blockhash": BLOCKHASH, "lastValidBlockHeight": 375270398}

    async def get_account_info(self, address: str) -> dict[str, Any] | None:
        self.calls.append("getAccountInfo")
        return self.account

    async def get_transaction(self, signature: str) -> dict[str, Any] | None:
        self.calls.append("getTransaction")
        return self.transaction

    async def get_slot(self) -> int:
        self.calls.append("getSlot")
        return self.slot

    async def get_block_time(self, slot: int) -> int | None:
        self.calls.append("getBlockTime")
        return self.block_time


@pytest.fixture()
def mock_rpc() -> AsyncMock:
    return AsyncMock()


@pytest.fixture()
def service(mock_rpc: AsyncMock) -> QuickstartService:
    return QuickstartService(mock_rpc, clock=lambda: 1700000000.5)
