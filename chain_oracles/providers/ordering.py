"""
Order recovery and batching for multi-address oracles.

Multi-address oracles answer with a keyed or positional result set whose order
is not guaranteed, and some leave out addresses they have never seen. Adapters
fill known gaps with zero-valued records first, then put the records back into
request order. An address still missing at that point is a provider contract
violation.
"""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, TypeVar

from ..core.errors import FormatError
from .base import AddressRecord

T = TypeVar("T")


def index_by_address(records: Iterable[AddressRecord]) -> Dict[str, AddressRecord]:
    """Key records by the address the oracle echoed back."""
    return {r.address: r for r in records}


def fill_missing(
    addresses: Sequence[str], by_address: Mapping[str, AddressRecord]
) -> Dict[str, AddressRecord]:
    """Copy of `by_address` with an unused record for every requested address it lacks."""
    out = dict(by_address)
    folded = {k.casefold() for k in out}
    for addr in addresses:
        if addr not in out and addr.casefold() not in folded:
            out[addr] = AddressRecord.unused(addr)
    return out


def ensure_same_order(
    addresses: Sequence[str],
    by_address: Mapping[str, AddressRecord],
    provider: Optional[str] = None,
) -> List[AddressRecord]:
    """
    Return one record per requested address, in request order.

    Exact key first; otherwise a case-insensitive match, since bech32 addresses
    may be echoed in a different case. Raises FormatError if an address is absent.
    """
    folded: Dict[str, AddressRecord] = {}
    for key, record in by_address.items():
        folded.setdefault(key.casefold(), record)

    ordered: List[AddressRecord] = []
    for addr in addresses:
        record = by_address.get(addr)
        if record is None:
            record = folded.get(addr.casefold())
        if record is None:
            raise FormatError(
                f"{provider or 'oracle'} response has no entry for address {addr}",
                provider=provider,
            )
        ordered.append(record)
    return ordered


def batched(items: Sequence[T], size: int) -> Iterator[List[T]]:
    """Yield consecutive slices of at most `size` items."""
    if size < 1:
        raise ValueError(f"batch size must be >= 1, got {size}")
    for start in range(0, len(items), size):
        yield list(items[start:start + size])
