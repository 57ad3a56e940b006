"""Read-only Solana queries reshaped into flat result records."""
from __future__ import annotations

import base64
import logging
import time
from typing import Any, Callable

from ..chains.solana.keys import is_valid_address, is_valid_signature, lamports_to_sol
from ..errors import InvalidInputError
from ..interfaces.rpc import SolanaRpc
from ..models import (
    AccountInfoResult,
    BalanceResult,
    BlockhashResult,
    SlotResult,
    TransactionResult,
)

logger = logging.getLogger(__name__)


def _require_address(address: str) -> None:
    if not is_valid_address(address):
        raise InvalidInputError(f"Invalid address: {address}")


def _data_length(data: Any) -> int:
    """Byte length of account data as returned by ``getAccountInfo``.

    The provider sends ``[payload, encoding]``; base64 payloads are decoded,
    anything else is measured as-is.
    """
    if isinstance(data, (list, tuple)) and data:
        payload = data[0]
        encoding = data[1] if len(data) > 1 else "base64"
        if encoding == "base64":
            return len(base64.b64decode(payload))
        return len(payload)
    if isinstance(data, (bytes, str)):
        return len(data)
    return 0


class QuickstartService:
    """Stateless query layer over a :class:`SolanaRpc` implementation.

    Every method issues its own request(s); nothing is cached or retried.
    """

    def __init__(self, rpc: SolanaRpc, clock: Callable[[], float] = time.time) -> None:
        self._rpc = rpc
        self._clock = clock

    async def get_balance(self, address: str) -> BalanceResult:
        """Get the SOL balance of a wallet.

        A nonexistent account reports a balance of zero, same as an empty one.
        """
        _require_address(address)
        lamports = await self._rpc.get_balance(address)
        return BalanceResult(
            address=address, lamports=lamports, sol=lamports_to_sol(lamports)
        )

    async def get_blockhash(self) -> BlockhashResult:
        """Get the latest blockhash (needed when building a transaction)."""
        result = await self._rpc.get_latest_blockhash()
        return BlockhashResult(
            blockhash=result["blockhash"],
            last_valid_block_height=int(result["lastValidBlockHeight"]),
        )

    async def get_account_info(self, address: str) -> AccountInfoResult:
        """Get owner, balance, executable flag and data size of an account."""
        _require_address(address)
        account = await self._rpc.get_account_info(address)
        if account is None:
            logger.debug("Account %s not found", address)
            return AccountInfoResult.not_found(address)

        return AccountInfoResult(
            address=address,
            exists=True,
            owner=account["owner"],
            lamports=int(account["lamports"]),
            executable=bool(account["executable"]),
            data_length=_data_length(account.get("data")),
        )

    async def get_transaction(self, signature: str) -> TransactionResult:
        """Get status, fee and slot of a confirmed transaction."""
        if not is_valid_signature(signature):
            raise InvalidInputError(f"Invalid signature: {signature}")

        tx = await self._rpc.get_transaction(signature)
        if tx is None:
            logger.debug("Transaction %s not found", signature)
            return TransactionResult.not_found(signature)

        meta = tx.get("meta") or {}
        return TransactionResult(
            signature=signature,
            found=True,
            success=meta.get("err") is None,
            fee=lamports_to_sol(int(meta.get("fee", 0))),
            slot=int(tx["slot"]),
        )

    async def get_slot(self) -> SlotResult:
        """Get the current slot and its block time."""
        slot = await self._rpc.get_slot()
        block_time = await self._rpc.get_block_time(slot)
        if block_time is None:
            logger.debug("No block time for slot %s, using wall clock", slot)
            block_time = int(self._clock())
        return SlotResult(slot=slot, timestamp=block_time)
