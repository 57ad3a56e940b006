"""Demo runner: one pass over the quickstart queries."""
from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Callable

from .quickstart import QuickstartService

VARIANTS = ("account", "transaction", "slot")
DEMO_SIGNATURE = "1" * 64


async def run_demo(
    service: QuickstartService,
    wallet: str,
    variant: str = "account",
    signature: str = DEMO_SIGNATURE,
    out: Callable[[str], None] = print,
) -> None:
    """Run getBalance, getLatestBlockhash and one lookup, printing each result.

    Calls are awaited one after another; the first failure propagates.
    """
    if variant not in VARIANTS:
        raise ValueError(f"Unknown demo variant '{variant}', expected one of {VARIANTS}")

    out("\n🚀 FluxRPC Quickstart\n")

    out("1️⃣  getBalance")
    start = time.perf_counter()
    balance = await service.get_balance(wallet)
    latency_ms = (time.perf_counter() - start) * 1000
    out(f"   Wallet:  {balance.address}")
    out(f"   Balance: {balance.sol} SOL")
    out(f"   Latency: {latency_ms:.0f}ms\n")

    out("2️⃣  getLatestBlockhash")
    block = await service.get_blockhash()
    out(f"   Blockhash: {block.blockhash}")
    out(f"   Valid until: {block.last_valid_block_height:,}\n")

    if variant == "account":
        out("3️⃣  getAccountInfo")
        account = await service.get_account_info(wallet)
        if account.exists:
            out(f"   Owner: {account.owner}")
            out(f"   Lamports: {account.lamports:,}")
            out(f"   Executable: {account.executable}")
            out(f"   Data size: {account.data_length} bytes")
        else:
            out("   Account not found")
    elif variant == "transaction":
        out("3️⃣  getTransaction")
        tx = await service.get_transaction(signature)
        if tx.found:
            out(f"   Status: {'Success' if tx.success else 'Failed'}")
            out(f"   Fee: {tx.fee} SOL")
            out(f"   Slot: {tx.slot:,}")
        else:
            out("   Transaction not found")
    else:
        out("3️⃣  getSlot")
        slot = await service.get_slot()
        when = datetime.fromtimestamp(slot.timestamp, tz=timezone.utc)
        out(f"   Slot: {slot.slot:,}")
        out(f"   Time: {when.strftime('%Y-%m-%d %H:%M:%S')} UTC")

    out("\n✅ Done!\n")
