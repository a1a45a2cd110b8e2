"""Map that also behaves like a plain ``str``-keyed record."""

from typing import Any, Iterator

from utility_maps.core.common.base_map import BaseUtilityMap
from utility_maps.core.protocols import E
from utility_maps.exceptions import KeyNotFoundError


class OpenMap(BaseUtilityMap[E]):
    """
    String-keyed map usable wherever a plain record is expected.

    Besides the map operations, entries are reachable with item syntax:
    ``m["k"]``, ``m["k"] = v``, ``del m["k"]``, ``"k" in m``, iteration over
    keys and ``keys()``, so ``dict(m)`` yields the basic map. Item assignment
    is an upsert and bypasses the add/set partition.

    Entries live in an insertion-ordered ``dict`` apart from the methods, so
    keys such as ``"add"`` or ``"size"`` are ordinary keys and falsy values
    are stored and found like any other.
    """

    def __init__(self) -> None:
        super().__init__()
        self._entries: dict[str, E] = {}

    # ------------------------------------------------------------------ #
    # storage primitives
    # ------------------------------------------------------------------ #

    def _contains(self, key: str) -> bool:
        return key in self._entries

    def _fetch(self, key: str) -> E:
        return self._entries[key]

    def _store(self, key: str, value: E) -> None:
        self._entries[key] = value

    def _replace(self, key: str, value: E) -> None:
        self._entries[key] = value

    def _discard(self, key: str) -> None:
        del self._entries[key]

    def _iter_items(self) -> Iterator[tuple[str, E]]:
        return iter(self._entries.items())

    def size(self) -> int:
        return len(self._entries)

    def to_basic_map(self) -> dict[str, E]:
        return dict(self._entries)

    # ------------------------------------------------------------------ #
    # record projection
    # ------------------------------------------------------------------ #

    def keys(self) -> list[str]:
        return list(self._entries)

    def __getitem__(self, key: str) -> E:
        try:
            return self._entries[key]
        except KeyError:
            raise KeyNotFoundError(f"Property '{key}' is not set", key=key) from None

    def __setitem__(self, key: str, value: E) -> None:
        self._check_key(key, "__setitem__")
        self._entries[key] = value

    def __delitem__(self, key: str) -> None:
        self.remove(key)

    def __contains__(self, key: Any) -> bool:
        return self.includes_key(key)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))
