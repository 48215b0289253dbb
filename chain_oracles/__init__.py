"""
Top-level public API surface. Stable facades only.
Canonical entrypoint: import chain_oracles; use chain_oracles.instance(...).get_addresses_info(...).
Does not import cli.
"""

from __future__ import annotations

from . import core, providers, units
from ._version import __version__
from .core.errors import ChainOraclesError, ConfigError, FormatError, RpcError, TransportError
from .providers import (
    AddressOracle,
    AddressRecord,
    OracleParams,
    ProviderRegistry,
    create_default_registry,
    instance,
    instance_all,
    instance_all_multiaddr,
)

# Do not add exports without updating __all__.
__all__ = [
    "__version__",
    "core",
    "providers",
    "units",
    "AddressOracle",
    "AddressRecord",
    "OracleParams",
    "ProviderRegistry",
    "create_default_registry",
    "instance",
    "instance_all",
    "instance_all_multiaddr",
    "ChainOraclesError",
    "ConfigError",
    "FormatError",
    "RpcError",
    "TransportError",
]
