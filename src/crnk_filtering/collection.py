"""FilterCollection: the single gate between raw FilterSpecs and encoders."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from .filter_spec import FilterSpec, SanitizedFilter

logger = logging.getLogger(__name__)

FilterSpecs = FilterSpec | Iterable[FilterSpec] | None


def filter_array(filter_specs: FilterSpecs) -> list[SanitizedFilter]:
    """
    Sanitize *filter_specs* and keep only the valid ones, in order.

    A single :class:`FilterSpec` is treated as a one-element sequence.
    Invalid specs (blank path, empty / null / NaN value) are dropped.
    """
    if filter_specs is None:
        return []
    if isinstance(filter_specs, FilterSpec):
        filter_specs = [filter_specs]

    valid: list[SanitizedFilter] = []
    for spec in filter_specs:
        sanitized = spec.sanitize()
        if sanitized is None:
            logger.debug("Dropping filter without usable value: %r", spec)
            continue
        valid.append(sanitized)
    return valid


class FilterCollection(Sequence[SanitizedFilter]):
    """Immutable ordered sequence of sanitized filters."""

    def __init__(self, filter_specs: FilterSpecs = None) -> None:
        self._filters: tuple[SanitizedFilter, ...] = tuple(
            filter_array(filter_specs)
        )

    @overload
    def __getitem__(self, index: int) -> SanitizedFilter: ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[SanitizedFilter]: ...

    def __getitem__(
        self, index: int | slice
    ) -> SanitizedFilter | Sequence[SanitizedFilter]:
        return self._filters[index]

    def __len__(self) -> int:
        return len(self._filters)

    def __iter__(self) -> Iterator[SanitizedFilter]:
        return iter(self._filters)

    def __repr__(self) -> str:
        return f"FilterCollection({list(self._filters)!r})"
