"""FluxRPC quickstart: essential Solana RPC queries."""
from .chains.solana import SolanaClient, is_valid_address, is_valid_signature, lamports_to_sol
from .config import AppConfig, build_rpc_url, load_config
from .errors import ConfigurationError, InvalidInputError, QuickstartError, RpcError
from .models import (
    AccountInfoResult,
    BalanceResult,
    BlockhashResult,
    SlotResult,
    TransactionResult,
)
from .services import QuickstartService, run_demo

__version__ = "0.1.0"

__all__ = [
    "AccountInfoResult",
    "AppConfig",
    "BalanceResult",
    "BlockhashResult",
    "ConfigurationError",
    "InvalidInputError",
    "QuickstartError",
    "QuickstartService",
    "RpcError",
    "SlotResult",
    "SolanaClient",
    "TransactionResult",
    "build_rpc_url",
    "is_valid_address",
    "is_valid_signature",
    "lamports_to_sol",
    "load_config",
    "run_demo",
]
