"""Numeric coercion for user-typed values — pure functions, no I/O."""

from __future__ import annotations

import math


def _to_float(raw: object) -> float | None:
    """Float value of raw input, infinities and NaN included; None if unparseable."""
    if isinstance(raw, (bool, int, float)):
        return float(raw)
    text = str(raw).strip() if raw is not None else ""
    # Blank text is an untouched input box
    if not text:
        return 0.0
    try:
        return float(text)
    except ValueError:
        return None


def parse_number(raw: object) -> float | None:
    """Parse user input as a finite number.

    Blank text parses as 0. Returns None for anything that isn't a number,
    including NaN and infinities.
    """
    value = _to_float(raw)
    if value is None or not math.isfinite(value):
        return None
    return value


def clamp_progress(raw: object) -> int:
    """Coerce raw input to a whole percentage in [0, 100].

    Non-numeric input (NaN included) is 0; infinities clamp to the nearest bound.
    """
    value = _to_float(raw)
    if value is None or math.isnan(value):
        return 0
    return int(round(max(0.0, min(100.0, value))))
