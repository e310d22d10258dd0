"""PaginationSpec: ``page[limit]`` / ``page[offset]`` parameters."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from .exceptions import ValidationError
from .params import QueryParams

DEFAULT_PAGE_INDEX = 0
DEFAULT_PAGE_SIZE = 10

DEFAULT_LIMIT_KEY = "page[limit]"
DEFAULT_OFFSET_KEY = "page[offset]"


class PageEvent(BaseModel):
    """Immutable page position, as reported by a paginator."""

    model_config = ConfigDict(frozen=True)

    page_index: int = Field(default=DEFAULT_PAGE_INDEX, ge=0)
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    length: int = Field(default=0, ge=0)

    @property
    def offset(self) -> int:
        return self.page_index * self.page_size


def _page_event(**values: int) -> PageEvent:
    try:
        return PageEvent(**values)
    except PydanticValidationError as exc:
        errors = "; ".join(
            f"{'.'.join(str(p) for p in error.get('loc', ()))}: {error.get('msg')}"
            for error in exc.errors()
        )
        raise ValidationError(f"Invalid pagination: {errors}") from exc


class PaginationSpec:
    """
    Offset pagination for CRNK endpoints.

    ``page[offset]`` is ``page_index * page_size``.  Missing (or zero)
    constructor arguments fall back to index 0, size 10 and length 0.
    """

    def __init__(
        self,
        page_index: int | None = None,
        page_size: int | None = None,
        length: int | None = None,
        *,
        limit_key: str = DEFAULT_LIMIT_KEY,
        offset_key: str = DEFAULT_OFFSET_KEY,
    ) -> None:
        self._initial = _page_event(
            page_index=page_index or DEFAULT_PAGE_INDEX,
            page_size=page_size or DEFAULT_PAGE_SIZE,
            length=length or 0,
        )
        self._limit_key = limit_key
        self._offset_key = offset_key
        self.page_event = self._initial

    def set_pagination(self, page_event: PageEvent) -> None:
        """Track a new page position (e.g. from a paginator change)."""
        self.page_event = page_event

    def reset_paginator(self) -> None:
        """Go back to the position given at construction."""
        self.page_event = self._initial

    @property
    def offset(self) -> int:
        return self.page_event.offset

    def get_query_params(self) -> QueryParams:
        return self.set_query_params(QueryParams())

    def set_query_params(self, params: QueryParams) -> QueryParams:
        """Return *params* with ``page[limit]`` and ``page[offset]`` set."""
        params = params.set(self._limit_key, self.page_event.page_size)
        return params.set(self._offset_key, self.offset)
