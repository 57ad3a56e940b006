"""Solana chain support."""
from .client import SolanaClient
from .keys import LAMPORTS_PER_SOL, is_valid_address, is_valid_signature, lamports_to_sol

__all__ = [
    "LAMPORTS_PER_SOL",
    "SolanaClient",
    "is_valid_address",
    "is_valid_signature",
    "lamports_to_sol",
]
