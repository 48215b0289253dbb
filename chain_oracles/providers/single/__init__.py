"""Oracles that answer one address per request."""
from __future__ import annotations

from .btcd import BtcdOracle
from .insight import InsightOracle
from .toshi import ToshiOracle

__all__ = ["BtcdOracle", "InsightOracle", "ToshiOracle"]
