"""Shared plumbing of the basic and nested filter encoders."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .collection import FilterCollection, FilterSpecs
from .params import QueryParams
from .sort import SortSpecs, sort_param
from .utils import join_names

logger = logging.getLogger(__name__)

DEFAULT_FILTER_KEY = "filter"
DEFAULT_INCLUDE_KEY = "include"
DEFAULT_FIELDS_KEY = "fields"
DEFAULT_SORT_KEY = "sort"


class BaseFilter:
    """
    Common state of a CRNK filter encoder.

    Parameters are emitted in a fixed order: ``include``, the filter
    parameter(s), ``fields``, ``sort``.  Parts without content are left
    out, so an encoder without valid filters, includes, fields or sort
    produces an empty :class:`QueryParams`.
    """

    def __init__(
        self,
        filter_specs: FilterSpecs,
        related_resources: str | Iterable[str] | None = None,
        sparse_fieldsets: str | Iterable[str] | None = None,
        *,
        sort: SortSpecs = None,
        filter_key: str = DEFAULT_FILTER_KEY,
        include_key: str = DEFAULT_INCLUDE_KEY,
        fields_key: str = DEFAULT_FIELDS_KEY,
        sort_key: str = DEFAULT_SORT_KEY,
    ) -> None:
        self._filters = FilterCollection(filter_specs)
        self._included_resources = join_names(related_resources)
        self._sparse_fieldsets = join_names(sparse_fieldsets)
        self._sort = sort_param(sort)
        self._filter_key = filter_key
        self._include_key = include_key
        self._fields_key = fields_key
        self._sort_key = sort_key

    @property
    def filters(self) -> FilterCollection:
        return self._filters

    @property
    def sort(self) -> str | None:
        return self._sort

    def is_any_filter(self) -> bool:
        """True if at least one filter survived sanitization."""
        return bool(self._filters)

    def sort_by(self, sort_specs: SortSpecs) -> None:
        """Replace the sort with *sort_specs* (one spec or a sequence)."""
        self._sort = sort_param(sort_specs)

    def get_query_params(self, params: QueryParams | None = None) -> QueryParams:
        """Return *params* (or a fresh carrier) with this encoder's parameters."""
        params = params if params is not None else QueryParams()
        if self._included_resources:
            params = params.set(self._include_key, self._included_resources)
        params = self._set_filter_params(params)
        if self._sparse_fieldsets:
            params = params.set(self._fields_key, self._sparse_fieldsets)
        if self._sort:
            params = params.set(self._sort_key, self._sort)
        logger.debug("Encoded query parameters: %s", params.to_decoded_string())
        return params

    encode = get_query_params

    def _set_filter_params(self, params: QueryParams) -> QueryParams:
        raise NotImplementedError
