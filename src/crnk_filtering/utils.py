"""
Shared helper functions for the crnk-filtering package.

These are pure-Python helpers with no third-party dependencies.
"""

from __future__ import annotations

import datetime
import math
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

# ---------------------------------------------------------------------------
# Emptiness checks
# ---------------------------------------------------------------------------


def is_nan(value: Any) -> bool:
    """True for float NaN (``bool`` and ``int`` are never NaN)."""
    return isinstance(value, float) and math.isnan(value)


def is_blank(value: Any) -> bool:
    """True for ``None``, NaN and strings that are empty after trimming."""
    if value is None or is_nan(value):
        return True
    return isinstance(value, str) and not value.strip()


# ---------------------------------------------------------------------------
# List helpers
# ---------------------------------------------------------------------------


def compact(values: Iterable[Any]) -> list[Any]:
    """
    Drop ``None``, empty strings and NaN from *values*.

    String entries are trimmed first, so whitespace-only strings are
    dropped too.  ``False`` and ``0`` are kept: they are real filter values.
    """
    out: list[Any] = []
    for value in values:
        if is_blank(value):
            continue
        out.append(value.strip() if isinstance(value, str) else value)
    return out


def as_list(value: Any) -> list[Any]:
    """
    Wrap *value* in a list.

    ``None`` becomes ``[]``, strings stay whole, other iterables are
    materialised.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Iterable):
        return list(value)
    return [value]


def join_names(names: str | Iterable[str] | None) -> str | None:
    """
    Comma-join trimmed, non-empty resource / field names.

    Returns ``None`` when nothing is left, so callers can skip the
    parameter entirely.  Order is preserved and duplicates are kept.
    """
    cleaned = [n for n in compact(as_list(names)) if isinstance(n, str)]
    if not cleaned:
        return None
    return ",".join(cleaned)


# ---------------------------------------------------------------------------
# Scalar rendering
# ---------------------------------------------------------------------------


def format_float(value: float) -> str:
    """
    Render a float the way JavaScript's ``Number#toString`` does.

    Integral floats lose the fraction (``10.0`` → ``10``).  Magnitudes in
    ``[1e-6, 1e21)`` are written positionally; others use the short
    exponent form (``1e-7``, ``1.5e+21``).  Infinities become
    ``Infinity`` / ``-Infinity``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    text = repr(value)
    mantissa, _, exponent = text.partition("e")
    if not exponent:
        return text[:-2] if text.endswith(".0") else text
    power = int(exponent)
    if -7 < power < 21:
        positional = format(Decimal(text), "f")
        if "." in positional:
            positional = positional.rstrip("0").rstrip(".")
        return positional
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    return f"{mantissa}e{power:+d}"


def format_scalar(value: Any) -> str:
    """
    Render a sanitized scalar as query-string text.

    - ``bool``      → ``true`` / ``false``
    - ``float``     → see :func:`format_float`
    - ``datetime``  → UTC ISO-8601 with milliseconds and ``Z``
      (naive datetimes are taken as UTC)
    - ``date``      → ``YYYY-MM-DD``
    - anything else → ``str(value)``
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return format_float(value)
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc)
        return value.strftime("%Y-%m-%dT%H:%M:%S.") + (
            f"{value.microsecond // 1000:03d}Z"
        )
    if isinstance(value, datetime.date):
        return value.isoformat()
    return str(value)
