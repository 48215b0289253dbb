"""
btc.com address oracle (multi-address).

  GET {btcdotcom}/v3/address/addr1,addr2,...
Returns {"data": [...]} positionally aligned with the request, with null in
place of addresses btc.com has never seen. Amounts are integer satoshis.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..base import AddressRecord, OracleParams, ParamsLike, resolve_params
from ..http import HttpGet, configured_http_get
from ..ordering import ensure_same_order, fill_missing
from ..payload import fetch_payload, require_field
from ...core.errors import FormatError
from ...units import btc_display, to_decimal

logger = logging.getLogger(__name__)


class BtcDotComOracle:
    """Address info from the btc.com v3 API."""

    param_key = "btcdotcom"
    multiaddr = True

    def __init__(
        self,
        params: Optional[OracleParams] = None,
        *,
        http_get: Optional[HttpGet] = None,
        log: Optional[logging.Logger] = None,
    ) -> None:
        if params is not None:
            params.base_url_for(self.param_key)
        self._params = params
        self._http_get = http_get or configured_http_get()
        self._log = log or logger

    @property
    def provider_name(self) -> str:
        return "btcdotcom"

    def supports_multiaddr(self) -> bool:
        return self.multiaddr

    def get_addresses_info(
        self, addresses: Sequence[str], params: ParamsLike = None
    ) -> List[AddressRecord]:
        name = self.provider_name
        p = resolve_params(params, self._params)
        addrs = list(addresses)
        if not addrs:
            return []

        url = f"{p.base_url_for(self.param_key)}/v3/address/{','.join(addrs)}"
        lookup = fetch_payload(url, self._http_get, p, name, self._log)
        if not lookup.is_found:
            return ensure_same_order(addrs, fill_missing(addrs, {}), name)

        if not isinstance(lookup.payload, dict) or "data" not in lookup.payload:
            raise FormatError("btcdotcom response missing field 'data'", provider=name)
        items = self._positional(lookup.payload["data"], len(addrs))

        by_address: Dict[str, AddressRecord] = {}
        for info in items:
            if info is not None:
                record = self.normalize(info)
                by_address[record.address] = record
        # only null positions are known-unused; any other gap is a bad echo
        for addr, info in zip(addrs, items):
            if info is None:
                by_address.setdefault(addr, AddressRecord.unused(addr))
        return ensure_same_order(addrs, by_address, name)

    def _positional(self, data: Any, expected: int) -> List[Any]:
        if data is None or isinstance(data, dict):
            data = [data]
        if not isinstance(data, list) or len(data) != expected:
            raise FormatError(
                f"btcdotcom returned {len(data) if isinstance(data, list) else type(data).__name__} "
                f"entries for {expected} addresses",
                provider=self.provider_name,
            )
        return data

    def normalize(self, info: Dict[str, Any]) -> AddressRecord:
        name = self.provider_name
        received = require_field(info, "received", name)
        return AddressRecord(
            address=str(require_field(info, "address", name)),
            balance=btc_display(require_field(info, "balance", name)),
            total_received=btc_display(received),
            total_sent=btc_display(require_field(info, "sent", name)),
            used=to_decimal(received) > 0,
        )
