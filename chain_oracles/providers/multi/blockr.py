"""
blockr.io address oracle (multi-address, at most 20 per request).

  GET {blockr}/api/v1/address/info/addr1,addr2,...
Returns {"status": "success", "data": ...} where data is a single object for
one address and a list otherwise. Amounts are BTC decimals; blockr has no
total-sent figure, so it is derived as received minus balance.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..base import AddressRecord, OracleParams, ParamsLike, resolve_params
from ..http import HttpGet, configured_http_get
from ..ordering import batched, ensure_same_order, fill_missing, index_by_address
from ..payload import as_record_list, fetch_payload, require_field, write_json
from ...core.errors import FormatError
from ...units import btc_display, btc_display_dec, btc_to_int, to_decimal

logger = logging.getLogger(__name__)

MAX_ADDRS = 20


class BlockrOracle:
    """Address info from blockr.io, batched to the API's per-request cap."""

    param_key = "blockr"
    multiaddr = True
    max_addrs = MAX_ADDRS

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
        return "blockr"

    def supports_multiaddr(self) -> bool:
        return self.multiaddr

    def get_addresses_info(
        self, addresses: Sequence[str], params: ParamsLike = None
    ) -> List[AddressRecord]:
        p = resolve_params(params, self._params)
        results: List[AddressRecord] = []
        for batch in batched(list(addresses), self.max_addrs):
            results.extend(self._get_batch(batch, p))
        return results

    def _get_batch(self, addrs: List[str], params: OracleParams) -> List[AddressRecord]:
        name = self.provider_name
        url = f"{params.base_url_for(self.param_key)}/api/v1/address/info/{','.join(addrs)}"
        lookup = fetch_payload(url, self._http_get, params, name, self._log, dump_decoded=False)
        if not lookup.is_found:
            return ensure_same_order(addrs, fill_missing(addrs, {}), name)

        response = lookup.payload
        status = response.get("status") if isinstance(response, dict) else None
        if status != "success":
            raise FormatError(f"Got unexpected status from blockr.io API: {status}", provider=name)
        write_json(params.oracle_json, response)

        items = as_record_list(require_field(response, "data", name), name)
        # addresses sometimes come back in a different order than we sent them
        by_address = index_by_address(self.normalize(info) for info in items)
        return ensure_same_order(addrs, by_address, name)

    def normalize(self, info: Dict[str, Any]) -> AddressRecord:
        name = self.provider_name
        balance = require_field(info, "balance", name)
        received = require_field(info, "totalreceived", name)
        total_sent = btc_to_int(received) - btc_to_int(balance)
        return AddressRecord(
            address=str(require_field(info, "address", name)),
            balance=btc_display_dec(balance),
            total_received=btc_display_dec(received),
            total_sent=btc_display(total_sent),
            used=to_decimal(received) > 0,
        )
