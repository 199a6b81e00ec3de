"""Display rounding helpers.

Values are rounded half away from the lower neighbour (half-up), so 2.5 -> 3
and -12.5 -> -12, independent of binary float representation.
"""

from __future__ import annotations

import math
from decimal import ROUND_FLOOR, Decimal


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round to ndigits decimal places with ties going towards +infinity."""
    if not math.isfinite(value):
        return 0.0
    quantum = Decimal(1).scaleb(-ndigits)
    shifted = Decimal(str(value)) + quantum / 2
    return float(shifted.quantize(quantum, rounding=ROUND_FLOOR))


def round_to_int(value: float) -> int:
    """Round half-up to the nearest integer."""
    return int(round_half_up(value, 0))
