"""
Toshi address oracle (single address per request).

Toshi is an open-source Coinbase project; any Toshi host works:
  GET {toshi}/api/v0/addresses/{address}
Amounts are integer satoshis. Toshi answers 404 for addresses it has never seen.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from ..base import AddressRecord, OracleParams, ParamsLike, resolve_params
from ..http import HttpGet, configured_http_get
from ..payload import fetch_payload, require_field
from ...units import btc_display, to_decimal

logger = logging.getLogger(__name__)


class ToshiOracle:
    """Address info from a Toshi server."""

    param_key = "toshi"
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
        return "toshi"

    def supports_multiaddr(self) -> bool:
        return self.multiaddr

    def get_addresses_info(
        self, addresses: Sequence[str], params: ParamsLike = None
    ) -> List[AddressRecord]:
        p = resolve_params(params, self._params)
        return [self._get_address_info(addr, p) for addr in addresses]

    def _get_address_info(self, address: str, params: OracleParams) -> AddressRecord:
        url = f"{params.base_url_for(self.param_key)}/api/v0/addresses/{address}"
        lookup = fetch_payload(url, self._http_get, params, self.provider_name, self._log)
        if not lookup.is_found:
            return AddressRecord.unused(address)
        return self.normalize(lookup.payload, address)

    def normalize(self, info: Dict[str, Any], address: str) -> AddressRecord:
        name = self.provider_name
        received = require_field(info, "received", name)
        return AddressRecord(
            address=address,
            balance=btc_display(require_field(info, "balance", name)),
            total_received=btc_display(received),
            total_sent=btc_display(require_field(info, "sent", name)),
            used=to_decimal(received) > 0,
        )
