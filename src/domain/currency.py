"""Exact siacoin amounts.

``Currency`` wraps a non-negative Python ``int`` counting hastings, so no
amount is ever rounded through binary floating point. Signed quantities are
never expressed as a negative ``Currency``; see ``domain.net_flow.NetAmount``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal

from .units import HASTING_SUFFIX, SIACOIN_EXPONENT, SIACOIN_PRECISION, UNITS

_AMOUNT_PATTERN = re.compile(r"^\s*(?P<number>[+-]?(?:\d+(?:\.\d*)?|\.\d+))\s*(?P<unit>[A-Za-z]*)\s*$")


class CurrencyParseError(ValueError):
    def __init__(self, message: str, *, text: str) -> None:
        self.text = text
        super().__init__(f"{message}: {text!r}")


class CurrencyPreconditionError(AssertionError):
    """Raised on programming errors such as subtracting a larger amount."""


@dataclass(frozen=True, order=True)
class Currency:
    hastings: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.hastings, bool) or not isinstance(self.hastings, int):
            msg = f"Currency requires an int number of hastings, got {type(self.hastings).__name__}"
            raise TypeError(msg)
        if self.hastings < 0:
            raise CurrencyPreconditionError(f"Currency cannot be negative (hastings={self.hastings})")

    @classmethod
    def siacoins(cls, amount: int) -> Currency:
        return cls(amount * SIACOIN_PRECISION)

    @classmethod
    def parse(cls, text: str, default_unit_is_subunit: bool = True) -> Currency:
        return parse_currency(text, default_unit_is_subunit=default_unit_is_subunit)

    def format(self) -> str:
        return format_currency(self)

    def to_decimal(self) -> Decimal:
        """Exact amount in SC."""
        return Decimal(format_currency(self))

    def cmp(self, other: Currency) -> int:
        if self.hastings < other.hastings:
            return -1
        if self.hastings > other.hastings:
            return 1
        return 0

    def is_zero(self) -> bool:
        return self.hastings == 0

    def __add__(self, other: Currency) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        return Currency(self.hastings + other.hastings)

    def __sub__(self, other: Currency) -> Currency:
        if not isinstance(other, Currency):
            return NotImplemented
        if self.hastings < other.hastings:
            raise CurrencyPreconditionError(
                f"Cannot subtract {other.hastings} H from smaller amount {self.hastings} H"
            )
        return Currency(self.hastings - other.hastings)

    def __mul__(self, factor: int) -> Currency:
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        return Currency(self.hastings * factor)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return str(self.hastings)


ZERO = Currency(0)


def parse_currency(text: str, *, default_unit_is_subunit: bool = True) -> Currency:
    """Parse a user supplied amount such as ``"1.23KS"``, ``"500"`` or ``"10H"``.

    A recognised unit suffix scales the literal by that unit; the result is
    truncated to whole hastings. Without a suffix the literal counts hastings
    (and must then be integral) unless ``default_unit_is_subunit`` is false,
    in which case it is read in SC.
    """
    if not text or not text.strip():
        raise CurrencyParseError("Amount is empty", text=text)

    match = _AMOUNT_PATTERN.match(text)
    if match is None:
        raise CurrencyParseError("Malformed amount", text=text)

    unit = match.group("unit")
    if unit == HASTING_SUFFIX or (not unit and default_unit_is_subunit):
        exponent = 0
        whole_hastings_only = True
    elif not unit:
        exponent = SIACOIN_EXPONENT
        whole_hastings_only = False
    elif unit in UNITS:
        exponent = SIACOIN_EXPONENT + UNITS[unit]
        whole_hastings_only = False
    else:
        raise CurrencyParseError(f"Unrecognized unit {unit!r}; expected one of {', '.join(UNITS)} or H", text=text)

    amount = Decimal(match.group("number"))
    sign, digits, literal_exponent = amount.as_tuple()
    coefficient = int("".join(str(digit) for digit in digits))
    if sign and coefficient:
        raise CurrencyParseError("Amount cannot be negative", text=text)

    shift = int(literal_exponent) + exponent
    if shift >= 0:
        return Currency(coefficient * 10**shift)

    hastings, remainder = divmod(coefficient, 10**-shift)
    if remainder and whole_hastings_only:
        raise CurrencyParseError("Hastings are indivisible; fractional amount needs a unit", text=text)
    return Currency(hastings)


def format_currency(value: Currency) -> str:
    """Exact SC amount with trailing fractional zeros removed (``"0"`` for zero)."""
    whole, remainder = divmod(value.hastings, SIACOIN_PRECISION)
    if not remainder:
        return str(whole)
    fraction = f"{remainder:0{SIACOIN_EXPONENT}d}".rstrip("0")
    return f"{whole}.{fraction}"


__all__ = [
    "ZERO",
    "Currency",
    "CurrencyParseError",
    "CurrencyPreconditionError",
    "format_currency",
    "parse_currency",
]
