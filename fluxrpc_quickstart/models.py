"""Query result records — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


def _check_optional(flag_name: str, flag: bool, values: dict[str, Any]) -> None:
    """Optional fields must be all set when the flag is true, all unset otherwise."""
    missing = [name for name, value in values.items() if value is None]
    if flag and missing:
        raise ValueError(f"{flag_name}=True but missing: {', '.join(missing)}")
    if not flag and len(missing) != len(values):
        raise ValueError(f"{flag_name}=False but optional fields are set")


@dataclass(frozen=True)
class BalanceResult:
    """Native balance of one address."""

    address: str
    lamports: int
    sol: float

    def to_dict(self) -> dict[str, Any]:
        return {"address": self.address, "lamports": self.lamports, "sol": self.sol}


@dataclass(frozen=True)
class BlockhashResult:
    """Latest blockhash and the block height it stays valid below."""

    blockhash: str
    last_valid_block_height: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "blockhash": self.blockhash,
            "lastValidBlockHeight": self.last_valid_block_height,
        }


@dataclass(frozen=True)
class AccountInfoResult:
    """Account details; the optional fields are set only when ``exists``."""

    address: str
    exists: bool
    owner: str | None = None
    lamports: int | None = None
    executable: bool | None = None
    data_length: int | None = None

    def __post_init__(self) -> None:
        _check_optional(
            "exists",
            self.exists,
            {
                "owner": self.owner,
                "lamports": self.lamports,
                "executable": self.executable,
                "data_length": self.data_length,
            },
        )

    @classmethod
    def not_found(cls, address: str) -> AccountInfoResult:
        return cls(address=address, exists=False)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"address": self.address, "exists": self.exists}
        if self.exists:
            result.update(
                owner=self.owner,
                lamports=self.lamports,
                executable=self.executable,
                dataLength=self.data_length,
            )
        return result


@dataclass(frozen=True)
class TransactionResult:
    """Transaction status; the optional fields are set only when ``found``."""

    signature: str
    found: bool
    success: bool | None = None
    fee: float | None = None
    slot: int | None = None

    def __post_init__(self) -> None:
        _check_optional(
            "found",
            self.found,
            {"success": self.success, "fee": self.fee, "slot": self.slot},
        )

    @classmethod
    def not_found(cls, signature: str) -> TransactionResult:
        return cls(signature=signature, found=False)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"signature": self.signature, "found": self.found}
        if self.found:
            result.update(success=self.success, fee=self.fee, slot=self.slot)
        return result


@dataclass(frozen=True)
class SlotResult:
    """Current slot and its block time in Unix seconds."""

    slot: int
    timestamp: int

    def to_dict(self) -> dict[str, Any]:
        return {"slot": self.slot, "timestamp": self.timestamp}
