"""
Filter value sanitization.

Raw filter values are normalised into a closed tagged union:

- :class:`Scalar`: one str / int / float / bool / date value
- :class:`ArrayOf`: a non-empty tuple of scalars
- :class:`Null`: explicit "IS NULL" (nullable filters only)

:func:`sanitize_value` returns ``None`` when the raw value carries nothing
to filter on; the filter is then dropped by the collection.
"""

from __future__ import annotations

import datetime
from collections.abc import Set
from dataclasses import dataclass
from typing import Any

from .exceptions import ValidationError
from .utils import is_blank, is_nan

SCALAR_TYPES: tuple[type, ...] = (str, bool, int, float, datetime.date)


@dataclass(frozen=True)
class Scalar:
    """A single filter value."""

    value: Any


@dataclass(frozen=True)
class ArrayOf:
    """Several filter values (membership)."""

    items: tuple[Any, ...]


@dataclass(frozen=True)
class Null:
    """The explicit ``null`` value of a nullable filter."""


FilterValue = Scalar | ArrayOf | Null


def is_array(value: Any) -> bool:
    return isinstance(value, list | tuple | Set)


def check_value_type(value: Any, path: str | None = None) -> None:
    """
    Raise :class:`ValidationError` for values no filter can carry.

    Accepted: ``None``, scalars and flat lists / tuples / sets of scalars
    (``None`` / NaN entries are allowed, they are compacted away later).
    """
    if value is None or isinstance(value, SCALAR_TYPES):
        return
    if is_array(value):
        for item in value:
            if item is None or isinstance(item, SCALAR_TYPES):
                continue
            raise ValidationError(
                f"Unsupported filter array item of type {type(item).__name__}",
                path=path,
            )
        return
    raise ValidationError(
        f"Unsupported filter value of type {type(value).__name__}",
        path=path,
    )


def compact_array(raw: Any) -> tuple[Any, ...]:
    """Drop blank items from an array; trim strings of all-string arrays."""
    items = [item for item in raw if not is_blank(item)]
    if all(isinstance(item, str) for item in items):
        return tuple(item.strip() for item in items)
    return tuple(items)


def sanitize_value(raw: Any, nullable: bool = False) -> FilterValue | None:
    """
    Normalise *raw* into a :data:`FilterValue`, or ``None`` if invalid.

    - strings are trimmed; empty → invalid
    - arrays are compacted (``None``, blank strings and NaN removed);
      empty → invalid.  Arrays are never nullable.  String items are
      trimmed only when every remaining item is a string; in mixed arrays
      they are kept as given.
    - numbers: NaN → invalid
    - dates and booleans are always valid
    - ``None`` → :class:`Null` when *nullable*, otherwise invalid
    """
    if raw is None:
        return Null() if nullable else None

    if is_array(raw):
        items = compact_array(raw)
        if not items:
            return None
        return ArrayOf(items)

    if isinstance(raw, str):
        trimmed = raw.strip()
        return Scalar(trimmed) if trimmed else None

    if is_nan(raw):
        return None

    return Scalar(raw)
