"""Integration tests for the demo runner against an in-memory RPC."""
from __future__ import annotations

import pytest

from fluxrpc_quickstart.errors import InvalidInputError
from fluxrpc_quickstart.services import QuickstartService, run_demo

from ..conftest import BLOCKHASH, WALLET, FakeRpc, account_payload, transaction_payload


async def _run(rpc: FakeRpc, **kwargs) -> list[str]:
    lines: list[str] = []
    await run_demo(QuickstartService(rpc), WALLET, out=lines.append, **kwargs)
    return lines


class TestRunDemo:
    @pytest.mark.asyncio
    async def test_account_variant(self) -> None:
        rpc = FakeRpc(account=account_payload(b"\x00" * 10))

        lines = await _run(rpc)
        text = "\n".join(lines)

        assert rpc.calls == ["getBalance", "getLatestBlockhash", "getAccountInfo"]
        assert f"Wallet:  {WALLET}" in text
        assert "Balance: 0.035737443 SOL" in text
        assert f"Blockhash: {BLOCKHASH}" in text
        assert "Valid until: 375,270,398" in text
        assert "Lamports: 35,737,443" in text
        assert "Data size: 10 bytes" in text
        assert lines[-1].strip() == "✅ Done!"

    @pytest.mark.asyncio
    async def test_account_not_found(self) -> None:
        lines = await _run(FakeRpc(account=None))
        assert "   Account not found" in lines

    @pytest.mark.asyncio
    async def test_transaction_variant_not_found(self) -> None:
        rpc = FakeRpc()
        lines = await _run(rpc, variant="transaction")
        assert rpc.calls[-1] == "getTransaction"
        assert "   Transaction not found" in lines

    @pytest.mark.asyncio
    async def test_transaction_variant_found(self) -> None:
        lines = await _run(FakeRpc(transaction=transaction_payload()), variant="transaction")
        assert "   Status: Success" in lines
        assert "   Slot: 375,270,000" in lines

    @pytest.mark.asyncio
    async def test_slot_variant(self) -> None:
        rpc = FakeRpc(slot=375270000, block_time=1760000000)
        lines = await _run(rpc, variant="slot")
        assert rpc.calls[-2:] == ["getSlot", "getBlockTime"]
        assert "   Slot: 375,270,000" in lines
        assert "   Time: 2025-10-09 08:53:20 UTC" in lines

    @pytest.mark.asyncio
    async def test_unknown_variant_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unknown demo variant"):
            await _run(FakeRpc(), variant="blocks")

    @pytest.mark.asyncio
    async def test_stops_at_first_failure(self) -> None:
        rpc = FakeRpc()
        with pytest.raises(InvalidInputError):
            await run_demo(QuickstartService(rpc), "bogus", out=lambda _: None)
        assert rpc.calls == []
