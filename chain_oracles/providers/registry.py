"""
Oracle registry: central catalog of available address oracles.

Oracles are registered by name. Lookups of unknown names fail with ConfigError
before any network activity.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from ..core.errors import ConfigError
from .base import AddressOracle

logger = logging.getLogger(__name__)

OracleFactory = Callable[..., AddressOracle]


class ProviderRegistry:
    """
    Registry mapping oracle names to classes (or factories).

    Usage:
        registry = ProviderRegistry()
        registry.register("insight", InsightOracle)
        registry.register("btcdotcom", BtcDotComOracle)

        oracles = registry.build(["insight", "btcdotcom"], params=params)
    """

    def __init__(self) -> None:
        self._factories: Dict[str, OracleFactory] = {}

    def register(self, name: str, factory: OracleFactory) -> None:
        """Register an oracle class by name."""
        self._factories[name.strip()] = factory
        logger.debug("Registered oracle: %s", name)

    def _factory(self, name: str) -> OracleFactory:
        key = name.strip()
        factory = self._factories.get(key)
        if factory is None:
            raise ConfigError(
                f"Invalid api provider '{key}'. Available: {self.names}"
            )
        return factory

    def create(self, name: str, **kwargs: Any) -> AddressOracle:
        """Instantiate the oracle registered as `name`; kwargs go to its constructor."""
        return self._factory(name)(**kwargs)

    def supports_multiaddr(self, name: str) -> bool:
        """Read the class-level `multiaddr` flag; plain factories without one are instantiated."""
        factory = self._factory(name)
        flag = getattr(factory, "multiaddr", None)
        if isinstance(flag, bool):
            return flag
        return factory().supports_multiaddr()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.strip() in self._factories

    @property
    def names(self) -> List[str]:
        return list(self._factories)

    def build(self, names: Optional[List[str]] = None, **kwargs: Any) -> List[AddressOracle]:
        """Instantiate oracles in the given order (all registered if None)."""
        return [self.create(n, **kwargs) for n in (names or self.names)]
