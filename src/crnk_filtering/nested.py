"""
NestedFilter: one JSON-shaped CRNK ``filter=`` parameter.

Dotted paths fold into nested objects and several filters are composed
under a nesting operator::

    NestedFilter(
        [FilterSpec("client.id", "16512"), FilterSpec("client.name", "Jag", "LIKE")],
        NestingOperator.OR,
    ).build_filter_string()
    # {"OR": [{"client": {"EQ": {"id": "16512"}}},
    #         {"client": {"LIKE": {"name": "Jag%"}}}]}

Filters built by other ``NestedFilter`` instances can be embedded with
``inner_nested_filter``; the embedded strings are appended as extra
fragments without being parsed again, so composition can go arbitrarily
deep.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .base import (
    DEFAULT_FIELDS_KEY,
    DEFAULT_FILTER_KEY,
    DEFAULT_INCLUDE_KEY,
    DEFAULT_SORT_KEY,
    BaseFilter,
)
from .collection import FilterSpecs
from .exceptions import ValidationError
from .operators import NestingOperator, parse_nesting_operator
from .params import QueryParams
from .sort import SortSpecs
from .tree import Fragment, Group, Leaf, render

logger = logging.getLogger(__name__)


def _inner_fragments(inner: str | Iterable[str] | None) -> tuple[str, ...]:
    if inner is None:
        return ()
    if isinstance(inner, str):
        inner = [inner]
    fragments = []
    for text in inner:
        if not isinstance(text, str):
            raise ValidationError(
                f"Inner nested filter must be a string, got {type(text).__name__}"
            )
        if text:
            fragments.append(text)
    return tuple(fragments)


class NestedFilter(BaseFilter):
    """
    Encoder for the nested (JSON-like) CRNK filter style.

    Args:
        filter_specs: One :class:`FilterSpec` or a sequence of them.
        nesting_condition: Operator joining several fragments.
            Defaults to ``AND``.
        inner_nested_filter: A filter string built earlier (typically by
            another ``NestedFilter``), or a sequence of such strings.
        related_resources: Names for the ``include`` parameter.
        sparse_fieldsets: Names for the ``fields`` parameter.
    """

    def __init__(
        self,
        filter_specs: FilterSpecs,
        nesting_condition: NestingOperator | str | None = None,
        inner_nested_filter: str | Iterable[str] | None = None,
        related_resources: str | Iterable[str] | None = None,
        sparse_fieldsets: str | Iterable[str] | None = None,
        *,
        sort: SortSpecs = None,
        filter_key: str = DEFAULT_FILTER_KEY,
        include_key: str = DEFAULT_INCLUDE_KEY,
        fields_key: str = DEFAULT_FIELDS_KEY,
        sort_key: str = DEFAULT_SORT_KEY,
    ) -> None:
        super().__init__(
            filter_specs,
            related_resources,
            sparse_fieldsets,
            sort=sort,
            filter_key=filter_key,
            include_key=include_key,
            fields_key=fields_key,
            sort_key=sort_key,
        )
        self._nesting_condition = parse_nesting_operator(nesting_condition)
        self._inner_nested_filters = _inner_fragments(inner_nested_filter)

    @property
    def nesting_condition(self) -> NestingOperator:
        return self._nesting_condition

    def to_tree(self) -> Group:
        """The filter as an explicit tree (own filters, then inner fragments)."""
        children = [Leaf(flt) for flt in self._filters]
        children.extend(Fragment(text) for text in self._inner_nested_filters)
        return Group(self._nesting_condition, tuple(children))

    def build_filter_string(self) -> str:
        """
        Render the nested filter string.

        - one fragment (own filter or inner filter) → returned bare
        - several fragments → ``{"<COND>": [f1, f2, ...]}``
        - nothing valid → ``""``
        """
        filter_string = render(self.to_tree())
        logger.debug("Built nested filter string: %s", filter_string)
        return filter_string

    def _set_filter_params(self, params: QueryParams) -> QueryParams:
        filter_string = self.build_filter_string()
        if filter_string:
            params = params.set(self._filter_key, filter_string)
        return params
