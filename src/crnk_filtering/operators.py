from __future__ import annotations

from enum import Enum

from .exceptions import OperatorNotFoundError


class FilterOperator(str, Enum):
    """Comparison operators understood by CRNK filters."""

    EQ = "EQ"
    NEQ = "NEQ"
    LIKE = "LIKE"
    LT = "LT"
    LE = "LE"
    GT = "GT"
    GE = "GE"


class NestingOperator(str, Enum):
    """Boolean operators composing nested filters."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"


_FILTER_OPERATORS: frozenset[str] = frozenset(m.value for m in FilterOperator)
_NESTING_OPERATORS: frozenset[str] = frozenset(m.value for m in NestingOperator)


def parse_filter_operator(
    op: FilterOperator | str | None, path: str | None = None
) -> FilterOperator:
    """Return the ``FilterOperator`` for *op*; a missing operator means ``EQ``."""
    if op is None or (isinstance(op, str) and not op.strip()):
        return FilterOperator.EQ
    if isinstance(op, FilterOperator):
        return op
    if not isinstance(op, str):
        raise OperatorNotFoundError(repr(op), sorted(_FILTER_OPERATORS), path)
    normalized = op.strip().upper()
    if normalized not in _FILTER_OPERATORS:
        raise OperatorNotFoundError(op, sorted(_FILTER_OPERATORS), path)
    return FilterOperator(normalized)


def parse_nesting_operator(op: NestingOperator | str | None) -> NestingOperator:
    """Return the ``NestingOperator`` for *op*; a missing operator means ``AND``."""
    if op is None or (isinstance(op, str) and not op.strip()):
        return NestingOperator.AND
    if isinstance(op, NestingOperator):
        return op
    if not isinstance(op, str):
        raise OperatorNotFoundError(repr(op), sorted(_NESTING_OPERATORS))
    normalized = op.strip().upper()
    if normalized not in _NESTING_OPERATORS:
        raise OperatorNotFoundError(op, sorted(_NESTING_OPERATORS))
    return NestingOperator(normalized)
