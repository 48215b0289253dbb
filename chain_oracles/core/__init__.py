"""
Stable facade: shared error types only. Do not add exports without updating __all__.
"""

from __future__ import annotations

from .errors import ChainOraclesError, ConfigError, FormatError, RpcError, TransportError

__all__ = ["ChainOraclesError", "ConfigError", "FormatError", "RpcError", "TransportError"]
