"""
btcd address oracle (single address per request, JSON-RPC).

Uses searchrawtransactions on a btcd node with the address index enabled.
Fetching one transaction is enough to tell whether an address was ever used;
balance and totals would need the full history, so they are left as None.
A failing RPC degrades to "no transactions" so one bad oracle cannot block the rest.
"""
from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional, Sequence

from ..base import AddressRecord, OracleParams, ParamsLike, resolve_params
from ..payload import write_json, write_raw
from ..rpc import RPC_NO_INFORMATION, BtcdRpcClient
from ...core.errors import RpcError

logger = logging.getLogger(__name__)

RpcFactory = Callable[[str], BtcdRpcClient]


class BtcdOracle:
    """Address usage from a btcd node. Only `used` is populated."""

    param_key = "btcd"
    multiaddr = False

    def __init__(
        self,
        params: Optional[OracleParams] = None,
        *,
        rpc_factory: Optional[RpcFactory] = None,
        log: Optional[logging.Logger] = None,
    ) -> None:
        if params is not None:
            params.base_url_for(self.param_key)
        self._params = params
        self._rpc_factory = rpc_factory or BtcdRpcClient
        self._log = log or logger

    @property
    def provider_name(self) -> str:
        return "btcd"

    def supports_multiaddr(self) -> bool:
        return self.multiaddr

    def get_addresses_info(
        self, addresses: Sequence[str], params: ParamsLike = None
    ) -> List[AddressRecord]:
        p = resolve_params(params, self._params)
        rpc = self._rpc_factory(p.base_url_for(self.param_key))
        return [self._get_address_info(rpc, addr, p) for addr in addresses]

    def _get_address_info(
        self, rpc: BtcdRpcClient, address: str, params: OracleParams
    ) -> AddressRecord:
        self._log.debug("Retrieving addresses metadata from btcd for %s", address)
        try:
            tx_list: List[Any] = rpc.searchrawtransactions(
                address, verbose=1, skip=0, count=1, vin_extra=0,
                reverse=False, filter_addrs=[address],
            )
        except RpcError as exc:
            if exc.code != RPC_NO_INFORMATION:
                self._log.warning(
                    "Handled error from btcd searchrawtransactions for %s, continuing: %s",
                    address, exc, exc_info=True,
                )
            tx_list = []

        self._log.info("Received address info from btcd server.")
        write_raw(params.oracle_raw, rpc.last_response)
        write_json(params.oracle_json, tx_list)
        return self.normalize(tx_list, address)

    def normalize(self, tx_list: Sequence[Any], address: str) -> AddressRecord:
        return AddressRecord(
            address=address,
            balance=None,
            total_received=None,
            total_sent=None,
            used=len(tx_list) > 0,
        )
