"""
blockchain.info address oracle (multi-address).

  GET {blockchaindotinfo}/multiaddr?active=addr1|addr2|...
Returns {"addresses": [...]} with integer satoshi amounts, not necessarily in
request order.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..base import AddressRecord, OracleParams, ParamsLike, resolve_params
from ..http import HttpGet, configured_http_get
from ..ordering import ensure_same_order, fill_missing, index_by_address
from ..payload import as_record_list, fetch_payload, require_field
from ...units import btc_display, to_decimal

logger = logging.getLogger(__name__)


class BlockchainDotInfoOracle:
    """Address info from blockchain.info's multiaddr endpoint."""

    param_key = "blockchaindotinfo"
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
        return "blockchaindotinfo"

    def supports_multiaddr(self) -> bool:
        return self.multiaddr

    def get_addresses_info(
        self, addresses: Sequence[str], params: ParamsLike = None
    ) -> List[AddressRecord]:
        p = resolve_params(params, self._params)
        addrs = list(addresses)
        if not addrs:
            return []

        url = f"{p.base_url_for(self.param_key)}/multiaddr?active={'|'.join(addrs)}"
        lookup = fetch_payload(url, self._http_get, p, self.provider_name, self._log)
        if not lookup.is_found:
            return ensure_same_order(addrs, fill_missing(addrs, {}), self.provider_name)

        name = self.provider_name
        items = as_record_list(require_field(lookup.payload, "addresses", name), name)
        # addresses sometimes come back in a different order than we sent them
        by_address = index_by_address(self.normalize(info) for info in items)
        return ensure_same_order(addrs, by_address, self.provider_name)

    def normalize(self, info: Dict[str, Any]) -> AddressRecord:
        name = self.provider_name
        received = require_field(info, "total_received", name)
        return AddressRecord(
            address=str(require_field(info, "address", name)),
            balance=btc_display(require_field(info, "final_balance", name)),
            total_received=btc_display(received),
            total_sent=btc_display(require_field(info, "total_sent", name)),
            used=to_decimal(received) > 0,
        )
