"""
BTC and fiat unit conversions.

Oracles report amounts either as integers in the smallest unit (satoshis) or as
decimals in BTC. Every figure shown to a caller goes through this module so that
rounding and formatting are identical regardless of the wire representation:
ROUND_HALF_UP (half away from zero), fixed point, no thousands separators.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

from .core.errors import FormatError

Number = Union[int, float, str, Decimal]

SATOSHI = 100_000_000
CENT = 100

_BTC_PLACES = Decimal("0.00000001")
_FIAT_PLACES = Decimal("0.01")


def to_decimal(value: Number) -> Decimal:
    """
    Coerce a wire amount to Decimal.
    Floats go through str() so 0.1 becomes Decimal('0.1'), not its binary expansion.
    """
    if isinstance(value, bool):
        raise FormatError(f"Not a numeric amount: {value!r}")
    if isinstance(value, Decimal):
        out = value
    elif isinstance(value, float):
        out = Decimal(str(value))
    else:
        try:
            out = Decimal(value)
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise FormatError(f"Not a numeric amount: {value!r}") from exc
    if not out.is_finite():
        raise FormatError(f"Not a finite amount: {value!r}")
    return out


def _fixed(value: Decimal, places: Decimal) -> str:
    q = value.quantize(places, rounding=ROUND_HALF_UP)
    if q.is_zero():
        q = abs(q)  # no "-0.00000000"
    return format(q, "f")


def btc_to_int(value: Number) -> int:
    """BTC decimal amount -> integer satoshis."""
    return int((to_decimal(value) * SATOSHI).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def int_to_btc(value: Number) -> Decimal:
    """Integer satoshis -> BTC decimal amount with full precision."""
    return to_decimal(value) / SATOSHI


def btc_display(value: Number) -> str:
    """Integer satoshis -> BTC display string, e.g. 150 -> '0.00000150'."""
    return _fixed(int_to_btc(value), _BTC_PLACES)


def btc_display_dec(value: Number) -> str:
    """BTC decimal amount -> BTC display string."""
    return _fixed(to_decimal(value), _BTC_PLACES)


def fiat_display(value: Number) -> str:
    """Integer fiat minor units (cents) -> display string, e.g. 250 -> '2.50'."""
    return _fixed(to_decimal(value) / CENT, _FIAT_PLACES)


def btcint_to_fiatint(value: Number, price: Number) -> int:
    """Integer satoshis valued at `price` (fiat major units per BTC) -> fiat minor units."""
    cents = int_to_btc(value) * to_decimal(price) * CENT
    return int(cents.quantize(Decimal(1), rounding=ROUND_HALF_UP))


__all__ = [
    "CENT",
    "SATOSHI",
    "btc_display",
    "btc_display_dec",
    "btc_to_int",
    "btcint_to_fiatint",
    "fiat_display",
    "int_to_btc",
    "to_decimal",
]
