"""Solana JSON-RPC client over a single FluxRPC endpoint."""
from __future__ import annotations

import logging
import ssl
from itertools import count
from typing import Any

import aiohttp
import certifi

from ...config import RpcConfig
from ...errors import RpcError

logger = logging.getLogger(__name__)


class SolanaClient:
    """Solana RPC client holding one long-lived HTTP session.

    Errors are never retried: a JSON-RPC error becomes :class:`RpcError` and
    aiohttp exceptions propagate to the caller unchanged.
    """

    def __init__(self, config: RpcConfig) -> None:
        self.url = config.url
        self.timeout = config.timeout
        self.commitment = config.commitment
        self._session: aiohttp.ClientSession | None = None
        self._ids = count(1)

    async def __aenter__(self) -> SolanaClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None:
            ssl_context = ssl.create_default_context(cafile=certifi.where())
            connector = aiohttp.TCPConnector(ssl=ssl_context)
            self._session = aiohttp.ClientSession(
                connector=connector,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
        return self._session

    async def close(self) -> None:
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def rpc_call(self, method: str, params: list[Any] | None = None) -> Any:
        """Make one JSON-RPC call and return its ``result`` member."""
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params or [],
        }
        logger.debug("RPC request %s %s", method, payload["params"])

        session = self._get_session()
        async with session.post(self.url, json=payload) as response:
            if response.status != 200:
                raise RpcError(f"HTTP {response.status} from RPC endpoint for {method}")
            result = await response.json()

        if "error" in result:
            error = result["error"] or {}
            raise RpcError(
                error.get("message", "unknown error"),
                code=error.get("code"),
                data=error.get("data"),
            )
        return result.get("result")

    def _commitment(self, **extra: Any) -> dict[str, Any]:
        return {"commitment": self.commitment, **extra}

    async def get_balance(self, address: str) -> int:
        """Get the balance of ``address`` in lamports."""
        result = await self.rpc_call("getBalance", [address, self._commitment()])
        return int(result["value"])

    async def get_latest_blockhash(self) -> dict[str, Any]:
        """Get the latest blockhash and its last valid block height."""
        result = await self.rpc_call("getLatestBlockhash", [self._commitment()])
        return result["value"]

    async def get_account_info(self, address: str) -> dict[str, Any] | None:
        """Get raw account info, or None if the account does not exist."""
        result = await self.rpc_call(
            "getAccountInfo", [address, self._commitment(encoding="base64")]
        )
        return result["value"]

    async def get_transaction(self, signature: str) -> dict[str, Any] | None:
        """Get a confirmed transaction, or None if it is unknown."""
        return await self.rpc_call(
            "getTransaction",
            [
                signature,
                self._commitment(encoding="json", maxSupportedTransactionVersion=0),
            ],
        )

    async def get_slot(self) -> int:
        result = await self.rpc_call("getSlot", [self._commitment()])
        return int(result)

    async def get_block_time(self, slot: int) -> int | None:
        """Get the Unix timestamp of ``slot``, or None if the provider has none."""
        result = await self.rpc_call("getBlockTime", [slot])
        return None if result is None else int(result)
