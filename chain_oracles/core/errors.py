"""
Shared exception types for chain_oracles.
Catch ChainOraclesError for any package-raised error.
"""

from __future__ import annotations

from typing import Optional


class ChainOraclesError(Exception):
    """Base exception for chain_oracles; catch this for any package-raised error."""

    pass


class TransportError(ChainOraclesError):
    """Oracle answered with an unexpected response code or could not be reached."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class FormatError(ChainOraclesError, ValueError):
    """Oracle payload could not be decoded or lacks an expected field."""

    def __init__(self, message: str, provider: Optional[str] = None) -> None:
        super().__init__(message)
        self.provider = provider


class ConfigError(ChainOraclesError, KeyError):
    """Unknown provider name or missing provider setting."""

    def __str__(self) -> str:
        # KeyError would repr() the message
        return str(self.args[0]) if self.args else ""


class RpcError(ChainOraclesError):
    """JSON-RPC error object returned by a node."""

    def __init__(self, code: int, message: str) -> None:
        super().__init__(f"RPC error {code}: {message}")
        self.code = code
        self.message = message


__all__ = ["ChainOraclesError", "ConfigError", "FormatError", "RpcError", "TransportError"]
