"""
BasicFilter: flat CRNK filter parameters.

Every valid filter becomes its own ``filter[<path>][<OP>]=<value>``
parameter.  Dotted paths are passed through unchanged: the backend
resolves relations itself.

Example::

    BasicFilter(
        [FilterSpec("user.name", "Auto", "LIKE"), FilterSpec("user.id", [1, 2])],
        related_resources="client",
    ).get_query_params()
    # include=client&filter[user.name][LIKE]=Auto%&filter[user.id][EQ]=1,2
"""

from __future__ import annotations

from .base import BaseFilter
from .filter_spec import SanitizedFilter
from .params import QueryParams


class BasicFilter(BaseFilter):
    """Encoder for the flat ``filter[path][OP]`` style."""

    def filter_key_for(self, flt: SanitizedFilter) -> str:
        return f"{self._filter_key}[{flt.path}][{flt.operator.value}]"

    def _set_filter_params(self, params: QueryParams) -> QueryParams:
        for flt in self._filters:
            params = params.set(self.filter_key_for(flt), flt.flat_value())
        return params
