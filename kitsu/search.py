# search.py - query builder for search endpoints
from __future__ import annotations

from typing import Any, Tuple
from urllib.parse import quote


class Search:
    """
    Accumulates query pairs for a search call.

    Pairs are kept in insertion order and never removed; duplicate keys are
    legal and all of them end up in the encoded string. Keys and values are
    percent-encoded, except that `[` and `]` in keys are left literal so
    JSON:API names like `filter[text]` and `page[limit]` stay readable:

        Search().filter("text", "non non biyori").param("page[limit]", 5)
        -> filter[text]=non%20non%20biyori&page[limit]=5
    """

    def __init__(self) -> None:
        self._pairs: list[Tuple[str, str]] = []

    def filter(self, key: str, value: Any) -> "Search":
        """Adds a `filter[key]=value` pair."""
        self._pairs.append((f"filter[{key}]", str(value)))
        return self

    def param(self, key: str, value: Any) -> "Search":
        """Adds a raw `key=value` pair (sort, page[limit], include, ...)."""
        self._pairs.append((str(key), str(value)))
        return self

    @property
    def pairs(self) -> Tuple[Tuple[str, str], ...]:
        return tuple(self._pairs)

    def encode(self) -> str:
        return "&".join(f"{quote(k, safe='[]')}={quote(v, safe='')}" for k, v in self._pairs)

    def __str__(self) -> str:
        return self.encode()

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"Search({self._pairs!r})"
