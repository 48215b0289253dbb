"""Oracles that answer many addresses per request."""
from __future__ import annotations

from .blockchaindotinfo import BlockchainDotInfoOracle
from .blockr import BlockrOracle
from .btcdotcom import BtcDotComOracle

__all__ = ["BlockchainDotInfoOracle", "BlockrOracle", "BtcDotComOracle"]
