from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

# One siacoin (SC) is 10^24 hastings (H), the smallest indivisible unit.
SIACOIN_EXPONENT = 24
SIACOIN_PRECISION = 10**SIACOIN_EXPONENT

HASTING_SUFFIX = "H"
BASE_UNIT = "SC"

# Suffix -> power of ten relative to one SC, smallest first.
UNITS: Mapping[str, int] = MappingProxyType(
    {
        "pS": -12,
        "nS": -9,
        "uS": -6,
        "mS": -3,
        BASE_UNIT: 0,
        "KS": 3,
        "MS": 6,
        "GS": 9,
        "TS": 12,
    }
)


def hastings_per_unit(unit: str) -> int:
    """Number of hastings in one ``unit``; raises ``KeyError`` for unknown suffixes."""
    return 10 ** (SIACOIN_EXPONENT + UNITS[unit])


__all__ = ["BASE_UNIT", "HASTING_SUFFIX", "SIACOIN_EXPONENT", "SIACOIN_PRECISION", "UNITS", "hastings_per_unit"]
