"""Error taxonomy for the quickstart library."""
from __future__ import annotations

from typing import Any


class QuickstartError(Exception):
    """Base class for all errors raised by this package."""


class ConfigurationError(QuickstartError):
    """Required configuration is missing or invalid."""


class InvalidInputError(QuickstartError, ValueError):
    """A malformed address or signature was passed to a query."""


class RpcError(QuickstartError, RuntimeError):
    """The provider answered with a JSON-RPC error or a bad HTTP status."""

    def __init__(self, message: str, code: int | None = None, data: Any = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.data = data

    def __str__(self) -> str:
        if self.code is None:
            return self.message
        return f"RPC Error {self.code}: {self.message}"
