"""
Default oracle registry and curated oracle sets.

Registers the built-in oracles. The curated lists come from config.yaml
(providers.all / providers.multiaddr) and default to:
  all       - every oracle with a public server and balance figures
              (toshi.io is gone; btcd has no public server and no figures)
  multiaddr - fast oracles that answer many addresses in one request
"""
from __future__ import annotations

import logging
from typing import List, Optional

from .base import AddressOracle, OracleParams
from .multi.blockchaindotinfo import BlockchainDotInfoOracle
from .multi.blockr import BlockrOracle
from .multi.btcdotcom import BtcDotComOracle
from .registry import ProviderRegistry
from .single.btcd import BtcdOracle
from .single.insight import InsightOracle
from .single.toshi import ToshiOracle

logger = logging.getLogger(__name__)


def create_default_registry() -> ProviderRegistry:
    """Create a registry with all built-in oracles."""
    registry = ProviderRegistry()
    registry.register("toshi", ToshiOracle)
    registry.register("insight", InsightOracle)
    registry.register("btcd", BtcdOracle)
    registry.register("blockchaindotinfo", BlockchainDotInfoOracle)
    registry.register("blockr", BlockrOracle)
    registry.register("btcdotcom", BtcDotComOracle)
    return registry


def instance(
    name: str,
    params: Optional[OracleParams] = None,
    registry: Optional[ProviderRegistry] = None,
    log: Optional[logging.Logger] = None,
) -> AddressOracle:
    """Oracle registered as `name`. Unknown names raise ConfigError."""
    reg = registry or create_default_registry()
    return reg.create(name, params=params, log=log)


def instance_all(
    params: Optional[OracleParams] = None,
    registry: Optional[ProviderRegistry] = None,
    log: Optional[logging.Logger] = None,
) -> List[AddressOracle]:
    """Every oracle in the curated "all" set, in configured order."""
    from chain_oracles.config import all_providers

    reg = registry or create_default_registry()
    return [instance(n, params, reg, log) for n in all_providers()]


def instance_all_multiaddr(
    params: Optional[OracleParams] = None,
    registry: Optional[ProviderRegistry] = None,
    log: Optional[logging.Logger] = None,
) -> List[AddressOracle]:
    """Only the fast oracles that support multi-address lookups."""
    from chain_oracles.config import multiaddr_providers

    reg = registry or create_default_registry()
    return [instance(n, params, reg, log) for n in multiaddr_providers()]
