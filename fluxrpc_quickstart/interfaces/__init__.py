"""Protocol interfaces for the quickstart."""
from .rpc import SolanaRpc

__all__ = ["SolanaRpc"]
