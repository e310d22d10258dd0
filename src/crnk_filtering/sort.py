"""Sort specifications and ``sort=`` parameter composition."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortSpec:
    """
    Sort by one attribute path.

    ``direction`` is compared case-insensitively with ``"asc"``; any other
    value sorts descending.  A blank path produces no sort token.
    """

    path: str
    direction: SortDirection | str = SortDirection.ASC

    @property
    def sort_param(self) -> str | None:
        """``path``, ``-path`` or ``None`` for a blank path."""
        path = (self.path or "").strip()
        if not path:
            return None
        direction = self.direction
        if isinstance(direction, SortDirection):
            direction = direction.value
        if str(direction or "").strip().lower() == SortDirection.ASC.value:
            return path
        return f"-{path}"


SortSpecs = SortSpec | Iterable[SortSpec] | None


def sort_param(sort_specs: SortSpecs) -> str | None:
    """
    Join the tokens of *sort_specs* with ``,``.

    Specs with a blank path are skipped; ``None`` is returned when no
    token is left.
    """
    if sort_specs is None:
        return None
    if isinstance(sort_specs, SortSpec):
        sort_specs = [sort_specs]
    tokens = [t for t in (spec.sort_param for spec in sort_specs) if t]
    return ",".join(tokens) if tokens else None
