"""
QueryParams: immutable, ordered multi-map of query-string parameters.

Every mutating operation returns a new instance, so encoders can build on
a caller-supplied carrier without touching it::

    params = QueryParams().set("include", "client").set("sort", "-name")
    str(params)  # 'include=client&sort=-name'
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any
from urllib.parse import quote, unquote

# Characters left unescaped in keys and values, on top of the RFC 3986
# unreserved set.  Matches the encoding HTTP clients apply to CRNK filters.
_SAFE_CHARS = "@:$,;=?/!*'()"


def encode_component(text: str) -> str:
    return quote(text, safe=_SAFE_CHARS, encoding="utf-8")


class QueryParams:
    """Ordered ``str -> list[str]`` map with immutable updates."""

    __slots__ = ("_map",)

    def __init__(
        self,
        params: Mapping[str, Any] | Iterable[tuple[str, Any]] | None = None,
    ) -> None:
        entries: dict[str, tuple[str, ...]] = {}
        if params is not None:
            items = params.items() if isinstance(params, Mapping) else params
            for key, value in items:
                values = value if isinstance(value, list | tuple) else [value]
                entries[str(key)] = entries.get(str(key), ()) + tuple(
                    str(v) for v in values
                )
        self._map = entries

    @classmethod
    def _from_map(cls, entries: dict[str, tuple[str, ...]]) -> QueryParams:
        obj = cls.__new__(cls)
        obj._map = entries
        return obj

    # -- immutable updates ------------------------------------------------------

    def set(self, key: str, value: Any) -> QueryParams:
        """Replace every value of *key*; an existing key keeps its position."""
        entries = dict(self._map)
        entries[key] = (str(value),)
        return self._from_map(entries)

    def append(self, key: str, value: Any) -> QueryParams:
        """Add one more value for *key*."""
        entries = dict(self._map)
        entries[key] = entries.get(key, ()) + (str(value),)
        return self._from_map(entries)

    def delete(self, key: str) -> QueryParams:
        entries = dict(self._map)
        entries.pop(key, None)
        return self._from_map(entries)

    def merge(self, other: QueryParams) -> QueryParams:
        """Return a copy with every key of *other* set on top of ``self``."""
        entries = dict(self._map)
        entries.update(other._map)
        return self._from_map(entries)

    # -- read access ------------------------------------------------------------

    def get(self, key: str) -> str | None:
        """First value of *key*, or ``None``."""
        values = self._map.get(key)
        return values[0] if values else None

    def get_all(self, key: str) -> list[str]:
        return list(self._map.get(key, ()))

    def has(self, key: str) -> bool:
        return key in self._map

    def keys(self) -> list[str]:
        return list(self._map)

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield ``(key, value)`` pairs in insertion order."""
        for key, values in self._map.items():
            for value in values:
                yield key, value

    def to_list(self) -> list[tuple[str, str]]:
        return list(self.items())

    def to_string(self) -> str:
        """Percent-encoded ``key=value`` pairs joined with ``&``."""
        return "&".join(
            f"{encode_component(key)}={encode_component(value)}"
            for key, value in self.items()
        )

    def to_decoded_string(self) -> str:
        """Human-readable form of :meth:`to_string` (for logs and debugging)."""
        return unquote(self.to_string())

    # -- dunder -----------------------------------------------------------------

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __len__(self) -> int:
        return len(self._map)

    def __bool__(self) -> bool:
        return bool(self._map)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueryParams):
            return NotImplemented
        return list(self._map.items()) == list(other._map.items())

    def __hash__(self) -> int:
        return hash(tuple(self._map.items()))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"QueryParams({self.to_list()!r})"
