"""Fake transports for oracle tests (no live network)."""

from .oracles import FakeHttp, FakeRpcClient, json_response

__all__ = ["FakeHttp", "FakeRpcClient", "json_response"]
