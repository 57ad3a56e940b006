"""Solana key validation and unit conversion."""
from __future__ import annotations

from solders.pubkey import Pubkey
from solders.signature import Signature

LAMPORTS_PER_SOL = 1_000_000_000


def is_valid_address(address: str) -> bool:
    """Return True if ``address`` decodes to a 32-byte base58 public key."""
    if not isinstance(address, str):
        return False
    try:
        Pubkey.from_string(address)
        return True
    except (ValueError, TypeError):
        return False


def is_valid_signature(signature: str) -> bool:
    """Return True if ``signature`` decodes to a 64-byte base58 signature."""
    if not isinstance(signature, str):
        return False
    try:
        Signature.from_string(signature)
        return True
    except (ValueError, TypeError):
        return False


def lamports_to_sol(lamports: int) -> float:
    return lamports / LAMPORTS_PER_SOL
