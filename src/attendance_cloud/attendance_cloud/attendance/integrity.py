"""Distance integrity check applied to check-in payloads.

The trusted client always emits a distance whose fixed-point rendering at five
decimals ends with the digit ``1``. Any other last digit means the value was
recomputed or forged on the way to the server.
"""

from __future__ import annotations

import math
import re
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Any

from ..core.constants import DISTANCE_DECIMALS, DISTANCE_SIGNATURE_DIGIT

_QUANTUM = Decimal(1).scaleb(-DISTANCE_DECIMALS)
# Wide enough for every finite float rendered in fixed point.
_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)
# Plain ASCII decimal literal, optionally signed and with an exponent.
_NUMBER = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def parse_distance(value: Any) -> float:
    """Return the payload distance as a float, NaN when it is not numeric."""
    if value is None or isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        text = value.strip()
        if not _NUMBER.fullmatch(text):
            return math.nan
        return float(text)
    return math.nan


def format_distance(value: Any) -> str:
    """Render `value` with exactly five decimals, rounding half away from zero.

    Rounding works on the exact binary value of the float, so 0.015625 (exactly
    representable) becomes "0.01563". Non-numeric and non-finite inputs render
    as "NaN" / "Infinity" / "-Infinity".
    """
    number = parse_distance(value)
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0:
        number = 0.0
    rounded = Decimal(number).quantize(_QUANTUM, context=_CONTEXT)
    return f"{rounded:f}"


def has_valid_signature(formatted: str) -> bool:
    return formatted.endswith(DISTANCE_SIGNATURE_DIGIT)
