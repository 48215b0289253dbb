"""
Oracle interfaces and data contracts.

Every oracle implements the AddressOracle protocol:
- supports_multiaddr(): whether one request can cover many addresses.
- get_addresses_info(): one AddressRecord per requested address, in request order.

Records and query parameters are frozen dataclasses; nothing outlives a call.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Optional, Protocol, Sequence, Union, runtime_checkable

from ..core.errors import ConfigError
from ..units import btc_display

_ZERO = btc_display(0)


@dataclass(frozen=True)
class AddressRecord:
    """Normalized address figures. Amounts are BTC strings with 8 decimals, or None if unknown."""

    address: str
    balance: Optional[str]
    total_received: Optional[str]
    total_sent: Optional[str]
    used: bool

    @classmethod
    def unused(cls, address: str) -> "AddressRecord":
        """Zero-valued record for an address the oracle has never seen."""
        return cls(
            address=address,
            balance=_ZERO,
            total_received=_ZERO,
            total_sent=_ZERO,
            used=False,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "address": self.address,
            "balance": self.balance,
            "total_received": self.total_received,
            "total_sent": self.total_sent,
            "used": self.used,
        }


# Mapping keys accepted by OracleParams.from_mapping that differ from field names.
_LEGACY_KEYS = {"oracle-raw": "oracle_raw", "oracle-json": "oracle_json"}


@dataclass(frozen=True)
class OracleParams:
    """Per-call settings: one base URL (or RPC URL) per oracle plus optional dump paths."""

    toshi: Optional[str] = None
    insight: Optional[str] = None
    btcd: Optional[str] = None
    blockchaindotinfo: Optional[str] = None
    blockr: Optional[str] = None
    btcdotcom: Optional[str] = None
    oracle_raw: Optional[str] = None
    oracle_json: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "OracleParams":
        """Build from a settings dict, accepting 'oracle-raw' / 'oracle-json' spellings."""
        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = _LEGACY_KEYS.get(key, key)
            if name in known and value not in (None, ""):
                kwargs[name] = str(value)
        return cls(**kwargs)

    @classmethod
    def from_config(cls, **overrides: Any) -> "OracleParams":
        """Base URLs from config.yaml / env, with keyword overrides on top."""
        from chain_oracles.config import oracle_urls

        data: Dict[str, Any] = dict(oracle_urls())
        data.update({k: v for k, v in overrides.items() if v is not None})
        return cls.from_mapping(data)

    def base_url_for(self, key: str) -> str:
        """Return the configured URL for oracle `key` without trailing slash."""
        value = getattr(self, key, None)
        if not value:
            raise ConfigError(f"No base URL configured for oracle '{key}'")
        return value.rstrip("/")


ParamsLike = Union[OracleParams, Mapping[str, Any], None]


def resolve_params(params: ParamsLike, fallback: Optional[OracleParams] = None) -> OracleParams:
    """Call-time params win, then constructor params, then config."""
    if isinstance(params, OracleParams):
        return params
    if params is not None:
        return OracleParams.from_mapping(params)
    if fallback is not None:
        return fallback
    return OracleParams.from_config()


class LookupStatus(enum.Enum):
    """Outcome of one oracle fetch that did not raise."""

    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class Lookup:
    """Decoded oracle payload, or the oracle's documented "no such address" answer."""

    status: LookupStatus
    payload: Any = None

    @classmethod
    def found(cls, payload: Any) -> "Lookup":
        return cls(LookupStatus.FOUND, payload)

    @classmethod
    def not_found(cls) -> "Lookup":
        return cls(LookupStatus.NOT_FOUND)

    @property
    def is_found(self) -> bool:
        return self.status is LookupStatus.FOUND


@runtime_checkable
class AddressOracle(Protocol):
    """Protocol for address balance oracles."""

    @property
    def provider_name(self) -> str: ...

    def supports_multiaddr(self) -> bool: ...

    def get_addresses_info(
        self, addresses: Sequence[str], params: ParamsLike = None
    ) -> List[AddressRecord]:
        """Fetch normalized info; result[i] corresponds to addresses[i]."""
        ...
