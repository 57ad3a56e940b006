"""Command-line interface for the FluxRPC quickstart."""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from .chains.solana import SolanaClient
from .config import AppConfig, load_config
from .errors import ConfigurationError
from .logging_setup import configure_logging
from .services import QuickstartService, run_demo
from .services.demo import DEMO_SIGNATURE, VARIANTS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse CLI parser."""
    parser = argparse.ArgumentParser(
        prog="fluxrpc-quickstart",
        description="Essential Solana RPC methods against FluxRPC",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to config.yaml (default: config.yaml in project root, if any)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING keeps demo output clean)",
    )

    sub = parser.add_subparsers(dest="command")

    demo_parser = sub.add_parser("demo", help="Run the quickstart demo (default)")
    demo_parser.add_argument(
        "--variant",
        default="account",
        choices=VARIANTS,
        help="Third query to run after balance and blockhash (default: account)",
    )
    demo_parser.add_argument(
        "--wallet", default=None, help="Wallet address (overrides config)"
    )
    demo_parser.add_argument(
        "--signature",
        default=DEMO_SIGNATURE,
        help="Signature for the transaction variant",
    )

    balance_parser = sub.add_parser("balance", help="Get SOL balance of an address")
    balance_parser.add_argument("address")

    sub.add_parser("blockhash", help="Get the latest blockhash")

    account_parser = sub.add_parser("account", help="Get account info")
    account_parser.add_argument("address")

    tx_parser = sub.add_parser("transaction", help="Get transaction status")
    tx_parser.add_argument("signature")

    sub.add_parser("slot", help="Get the current slot and block time")

    return parser


async def _run(args: argparse.Namespace, config: AppConfig) -> None:
    """Execute the selected command."""
    async with SolanaClient(config.rpc) as client:
        service = QuickstartService(client)

        if args.command in (None, "demo"):
            await run_demo(
                service,
                wallet=getattr(args, "wallet", None) or config.demo.wallet,
                variant=getattr(args, "variant", "account"),
                signature=getattr(args, "signature", DEMO_SIGNATURE),
            )
            return

        if args.command == "balance":
            result = await service.get_balance(args.address)
        elif args.command == "blockhash":
            result = await service.get_blockhash()
        elif args.command == "account":
            result = await service.get_account_info(args.address)
        elif args.command == "transaction":
            result = await service.get_transaction(args.signature)
        else:
            result = await service.get_slot()

        print(json.dumps(result.to_dict(), indent=2))


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = load_config(args.config)
    except (ConfigurationError, FileNotFoundError) as e:
        print(f"\n❌ {e}\n", file=sys.stderr)
        sys.exit(1)

    try:
        asyncio.run(_run(args, config))
    except Exception as e:
        logger.debug("Command failed", exc_info=True)
        print(f"\n❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
