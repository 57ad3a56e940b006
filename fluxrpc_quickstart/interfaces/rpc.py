"""Solana RPC protocol — the narrow capability the query layer depends on."""
from typing import Any, Protocol


class SolanaRpc(Protocol):
    """Abstract interface for the read-only Solana RPC calls used here."""

    async def get_balance(self, address: str) -> int: ...

    async def get_latest_blockhash(self) -> dict[str, Any]: ...

    async def get_account_info(self, address: str) -> dict[str, Any] | None: ...

    async def get_transaction(self, signature: str) -> dict[str, Any] | None: ...

    async def get_slot(self) -> int: ...

    async def get_block_time(self, slot: int) -> int | None: ...
