from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, localcontext
from typing import Callable

from config import config
from domain.currency import Currency
from domain.net_flow import NetAmount
from domain.units import HASTING_SUFFIX, SIACOIN_EXPONENT, UNITS, hastings_per_unit

_SMALLEST_UNIT = next(iter(UNITS))


def format_decimal(value: Decimal) -> str:
    quantized = value.normalize()
    # Avoid scientific notation for integers.
    if quantized == quantized.to_integral():
        return f"{quantized:.0f}"
    return format(quantized, "f")


def format_units(value: Currency, significant_digits: int | None = None) -> str:
    """Render ``value`` in the largest unit not exceeding it, e.g. ``"1.23 KS"``.

    Amounts below one pS are shown as raw hastings.
    """
    if value.hastings < hastings_per_unit(_SMALLEST_UNIT):
        return f"{value.hastings} {HASTING_SUFFIX}"

    unit = _SMALLEST_UNIT
    for candidate in UNITS:
        if value.hastings < hastings_per_unit(candidate):
            break
        unit = candidate

    digits = significant_digits or config().significant_digits
    with localcontext() as ctx:
        ctx.prec = digits
        ctx.rounding = ROUND_HALF_EVEN
        scaled = +Decimal(value.hastings).scaleb(-(SIACOIN_EXPONENT + UNITS[unit]))
    return f"{format_decimal(scaled)} {unit}"


def format_net_amount(amount: NetAmount, formatter: Callable[[Currency], str] = format_units) -> str:
    sign = "+" if amount.is_positive else "-"
    return f"{sign}{formatter(amount.magnitude)}"


__all__ = ["format_decimal", "format_net_amount", "format_units"]
