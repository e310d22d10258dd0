"""
Exception hierarchy for programmer errors.

Invalid filter *values* are never errors: they are dropped by the filter
collection.  These exceptions cover malformed construction arguments.
Each carries the filter path it concerns (when there is one) and a
stable ``code``; ``to_dict()`` turns both into a payload an application
can hand back to whoever supplied the filter.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class CrnkFilteringError(Exception):
    """Base exception for all crnk-filtering errors."""

    code = "CRNK_FILTERING_ERROR"

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code, "message": self.message}
        if self.path is not None:
            payload["path"] = self.path
        return payload


class ValidationError(CrnkFilteringError):
    """A filter, builder or pagination argument is malformed."""

    code = "VALIDATION_ERROR"


class OperatorNotFoundError(CrnkFilteringError):
    """
    Unknown filter or nesting operator.

    ``suggestions`` holds the closest valid operator names, so a typo like
    ``"LKE"`` on ``user.name`` reports ``LIKE``.
    """

    code = "OPERATOR_NOT_FOUND"

    def __init__(
        self,
        operator: str,
        valid_operators: list[str],
        path: str | None = None,
    ) -> None:
        self.operator = operator
        self.valid_operators = sorted(valid_operators)
        self.suggestions = get_close_matches(
            operator.strip().upper(), self.valid_operators, n=3, cutoff=0.6
        )

        target = f" for filter '{path}'" if path else ""
        message = f"Unknown operator '{operator}'{target}."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid operators: {', '.join(self.valid_operators)}"
        super().__init__(message, path=path)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["operator"] = self.operator
        payload["suggestions"] = self.suggestions
        return payload
