"""
Address oracle architecture.

One capability contract (AddressOracle) implemented by an adapter per
blockchain explorer. Single-address oracles are called once per address;
multi-address oracles batch, then restore the caller's address order.
"""

from __future__ import annotations

from .base import (
    AddressOracle,
    AddressRecord,
    Lookup,
    LookupStatus,
    OracleParams,
)
from .defaults import (
    create_default_registry,
    instance,
    instance_all,
    instance_all_multiaddr,
)
from .http import HttpResponse, http_get_retry
from .multi import BlockchainDotInfoOracle, BlockrOracle, BtcDotComOracle
from .ordering import batched, ensure_same_order, fill_missing, index_by_address
from .registry import ProviderRegistry
from .resilience import RetryConfig, resilient_call
from .single import BtcdOracle, InsightOracle, ToshiOracle

__all__ = [
    "AddressOracle",
    "AddressRecord",
    "Lookup",
    "LookupStatus",
    "OracleParams",
    "ProviderRegistry",
    "HttpResponse",
    "RetryConfig",
    "http_get_retry",
    "resilient_call",
    "batched",
    "ensure_same_order",
    "fill_missing",
    "index_by_address",
    "create_default_registry",
    "instance",
    "instance_all",
    "instance_all_multiaddr",
    "ToshiOracle",
    "InsightOracle",
    "BtcdOracle",
    "BlockchainDotInfoOracle",
    "BlockrOracle",
    "BtcDotComOracle",
]
