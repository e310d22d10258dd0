"""
Explicit nested-filter tree and its serializer.

A nested CRNK filter is a tree of boolean groups over leaf conditions::

    Group(OR, [
        Leaf(client.id EQ 16512),
        Group(AND, [Leaf(user.number GE 30000), Leaf(user.name LIKE Emil)]),
    ])

:func:`render` turns the tree into the JSON-like ``filter=`` value::

    {"OR": [{"client": {"EQ": {"id": "16512"}}}, {"AND": [...]}]}

Pre-built filter strings can be embedded unchanged as :class:`Fragment`
nodes, which is how independently built filters are composed.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .filter_spec import SanitizedFilter
from .operators import NestingOperator

FRAGMENT_SEPARATOR = ", "


@dataclass(frozen=True)
class Leaf:
    """One sanitized filter condition."""

    filter: SanitizedFilter


@dataclass(frozen=True)
class Fragment:
    """An opaque, already rendered nested filter string."""

    text: str


@dataclass(frozen=True)
class Group:
    """
    Boolean composition of child nodes.

    A group with a single non-empty child renders as that child; only
    two or more children are wrapped in ``{"<COND>": [...]}``.
    """

    condition: NestingOperator
    children: tuple[FilterNode, ...]


@dataclass(frozen=True)
class Negation:
    """Explicit ``{"NOT": [child]}``, rendered even for a single child."""

    child: FilterNode


FilterNode = Leaf | Fragment | Group | Negation


def render(node: FilterNode | None) -> str:
    """Serialize *node*; empty groups and fragments render as ``""``."""
    if node is None:
        return ""
    if isinstance(node, Leaf):
        return render_leaf(node.filter)
    if isinstance(node, Fragment):
        return node.text
    if isinstance(node, Group):
        return render_group(node.condition, [render(c) for c in node.children])
    if isinstance(node, Negation):
        inner = render(node.child)
        if not inner:
            return ""
        return _wrap_condition(NestingOperator.NOT, [inner])
    raise TypeError(f"Unknown filter node {node!r}")


def render_leaf(flt: SanitizedFilter) -> str:
    """
    ``{"<OP>": {"<leaf>": <value>}}`` wrapped once per relation segment.

    Segments are stored innermost first, so wrapping in that order
    reproduces the dotted path from left to right.
    """
    fragment = (
        f'{{"{flt.operator.value}": '
        f'{{"{flt.leaf_attribute}": {flt.nested_value()}}}}}'
    )
    for segment in flt.relation_segments:
        fragment = f'{{"{segment}": {fragment}}}'
    return fragment


def render_group(condition: NestingOperator, fragments: Sequence[str]) -> str:
    present = [f for f in fragments if f]
    if not present:
        return ""
    if len(present) == 1:
        return present[0]
    return _wrap_condition(condition, present)


def _wrap_condition(condition: NestingOperator, fragments: Sequence[str]) -> str:
    return f'{{"{condition.value}": [{FRAGMENT_SEPARATOR.join(fragments)}]}}'
