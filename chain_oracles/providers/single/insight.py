"""
Insight address oracle (single address per request).

Insight is BitPay's open-source explorer API; any Insight host works:
  GET {insight}/addr/{address}/?noTxList=1
Amounts are BTC decimals. A 404 means the address has no history.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..base import AddressRecord, OracleParams, ParamsLike, resolve_params
from ..http import HttpGet, configured_http_get
from ..payload import fetch_payload, require_field
from ...units import btc_display_dec, to_decimal

logger = logging.getLogger(__name__)


class InsightOracle:
    """Address info from an Insight server."""

    param_key = "insight"
    multiaddr = False

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
        return "insight"

    def supports_multiaddr(self) -> bool:
        return self.multiaddr

    def get_addresses_info(
        self, addresses: Sequence[str], params: ParamsLike = None
    ) -> List[AddressRecord]:
        p = resolve_params(params, self._params)
        return [self._get_address_info(addr, p) for addr in addresses]

    def _get_address_info(self, address: str, params: OracleParams) -> AddressRecord:
        url = f"{params.base_url_for(self.param_key)}/addr/{address}/?noTxList=1"
        lookup = fetch_payload(url, self._http_get, params, self.provider_name, self._log)
        if not lookup.is_found:
            return AddressRecord.unused(address)
        return self.normalize(lookup.payload)

    def normalize(self, info: Dict[str, Any]) -> AddressRecord:
        name = self.provider_name
        received = require_field(info, "totalReceived", name)
        return AddressRecord(
            address=str(require_field(info, "addrStr", name)),
            balance=btc_display_dec(require_field(info, "balance", name)),
            total_received=btc_display_dec(received),
            total_sent=btc_display_dec(require_field(info, "totalSent", name)),
            used=to_decimal(received) > 0,
        )
