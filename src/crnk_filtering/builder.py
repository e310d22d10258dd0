"""
Fluent builder for nested filter trees.

Example::

    filter_string = (
        NestedFilterBuilder()
        .or_group()
            .where("role.name", "admin")
            .where("role.name", "superuser")
        .end_group()
        .where("active", True)
        .build_filter_string()
    )
    # {"AND": [{"OR": [{"role": {"EQ": {"name": "admin"}}},
    #                  {"role": {"EQ": {"name": "superuser"}}}]},
    #          {"EQ": {"active": "true"}}]}

Filters whose values do not survive sanitization are dropped, and groups
left without children disappear, exactly like in :class:`NestedFilter`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .exceptions import ValidationError
from .filter_spec import FilterSpec
from .nested import NestedFilter
from .operators import NestingOperator
from .tree import FilterNode, Fragment, Group, Leaf, Negation, render

if TYPE_CHECKING:
    from .operators import FilterOperator

logger = logging.getLogger(__name__)


class NestedFilterBuilder:
    """
    Fluent builder composing nested filter trees.

    Conditions added at the same level are combined with AND.  Use
    ``or_group()`` / ``and_group()`` / ``not_group()`` for explicit
    grouping, and ``end_group()`` to close the current group.
    """

    def __init__(self) -> None:
        self._nodes: list[FilterNode] = []
        self._stack: list[tuple[NestingOperator, list[FilterNode]]] = []

    # -- leaf conditions -----------------------------------------------------

    def where(
        self,
        path: str,
        value: Any,
        operator: FilterOperator | str | None = None,
        *,
        nullable: bool = False,
    ) -> NestedFilterBuilder:
        """Add a single filter condition to the current group."""
        return self.add(FilterSpec(path, value, operator, nullable))

    def add(
        self, item: FilterNode | FilterSpec | NestedFilter | str
    ) -> NestedFilterBuilder:
        """
        Add an existing condition to the current group.

        Accepts a :class:`FilterSpec`, a tree node, a :class:`NestedFilter`
        or an already built filter string.
        """
        node = _to_node(item)
        if node is not None:
            self._current_list().append(node)
        return self

    # -- grouping ------------------------------------------------------------

    def and_group(self) -> NestedFilterBuilder:
        """Open a new AND group.  Close with ``end_group()``."""
        self._stack.append((NestingOperator.AND, []))
        return self

    def or_group(self) -> NestedFilterBuilder:
        """Open a new OR group.  Close with ``end_group()``."""
        self._stack.append((NestingOperator.OR, []))
        return self

    def not_group(self) -> NestedFilterBuilder:
        """Open a new NOT group (single child).  Close with ``end_group()``."""
        self._stack.append((NestingOperator.NOT, []))
        return self

    def end_group(self) -> NestedFilterBuilder:
        """Close the current group and add it to the parent."""
        if not self._stack:
            raise ValidationError("No open group to close")
        condition, nodes = self._stack.pop()
        composite = _combine(condition, nodes)
        if composite is not None:
            self._current_list().append(composite)
        return self

    # -- build ---------------------------------------------------------------

    def build(self) -> FilterNode | None:
        """
        Return the composed tree, or ``None`` if no valid condition was added.

        Raises:
            ValidationError: If groups are still open.
        """
        if self._stack:
            raise ValidationError(
                f"{len(self._stack)} group(s) still open, "
                f"call end_group() before build()"
            )
        return _combine(NestingOperator.AND, self._nodes)

    def build_filter_string(self) -> str:
        return render(self.build())

    def reset(self) -> NestedFilterBuilder:
        """Clear all conditions and return ``self`` for reuse."""
        self._nodes.clear()
        self._stack.clear()
        return self

    # -- internals -----------------------------------------------------------

    def _current_list(self) -> list[FilterNode]:
        if self._stack:
            return self._stack[-1][1]
        return self._nodes


def _to_node(item: FilterNode | FilterSpec | NestedFilter | str) -> FilterNode | None:
    if isinstance(item, FilterSpec):
        sanitized = item.sanitize()
        if sanitized is None:
            logger.debug("Dropping filter without usable value: %r", item)
            return None
        return Leaf(sanitized)
    if isinstance(item, NestedFilter):
        return item.to_tree()
    if isinstance(item, str):
        return Fragment(item) if item else None
    if isinstance(item, Leaf | Fragment | Group | Negation):
        return item
    raise ValidationError(f"Cannot add {type(item).__name__} to a nested filter")


def _combine(condition: NestingOperator, nodes: list[FilterNode]) -> FilterNode | None:
    """Combine *nodes* under *condition*; empty groups vanish."""
    if not nodes:
        return None
    if condition is NestingOperator.NOT:
        if len(nodes) != 1:
            raise ValidationError("NOT group must contain exactly one condition")
        return Negation(nodes[0])
    if len(nodes) == 1:
        return nodes[0]
    return Group(condition, tuple(nodes))
