"""Map whose entries are reachable only through its operations."""

from typing import Any, Callable, Iterator

from utility_maps.core.common.base_map import BaseUtilityMap
from utility_maps.core.protocols import E

from .entry import MapEntry


class GuardedMap(BaseUtilityMap[E]):
    """
    String-keyed map holding its entries in a private, ordered list.

    There is no item or attribute access to the entries, so they cannot be
    changed by mistake the way a plain ``dict`` can. Every presence check is
    an explicit key search, which keeps falsy values (``0``, ``""``,
    ``False``, ``None``) fully usable.

    Insertion order is stable: ``set`` replaces an entry in place and
    ``remove`` leaves the remaining entries in their order.
    """

    def __init__(self) -> None:
        super().__init__()
        self._elements: list[MapEntry[E]] = []

    # ------------------------------------------------------------------ #
    # search helpers
    # ------------------------------------------------------------------ #

    def _find_index(self, match: Callable[[MapEntry[E]], bool]) -> int:
        """Index of the first entry satisfying ``match``, -1 if none."""
        for index, entry in enumerate(self._elements):
            if match(entry):
                return index
        return -1

    def _index_of_key(self, key: str) -> int:
        return self._find_index(lambda entry: entry.key == key)

    # ------------------------------------------------------------------ #
    # storage primitives
    # ------------------------------------------------------------------ #

    def _contains(self, key: str) -> bool:
        return self._index_of_key(key) != -1

    def _fetch(self, key: str) -> E:
        return self._elements[self._index_of_key(key)].value

    def _store(self, key: str, value: E) -> None:
        self._elements.append(MapEntry(key=key, value=value))

    def _replace(self, key: str, value: E) -> None:
        self._elements = [
            entry.with_value(value) if entry.key == key else entry
            for entry in self._elements
        ]

    def _discard(self, key: str) -> None:
        self._elements = [entry for entry in self._elements if entry.key != key]

    def _iter_items(self) -> Iterator[tuple[str, E]]:
        for entry in self._elements:
            yield entry.key, entry.value

    def size(self) -> int:
        return len(self._elements)

    # ------------------------------------------------------------------ #
    # queries over the entry list
    # ------------------------------------------------------------------ #

    def to_objects_array(self) -> list[dict[str, Any]]:
        # Fresh dicts; the entry list itself never leaves the map
        return [entry.to_object() for entry in self._elements]

    def keys_to_array(self) -> list[str]:
        return [entry.key for entry in self._elements]

    def values_to_array(self) -> list[E]:
        return [entry.value for entry in self._elements]

    def entries(self) -> list[MapEntry[E]]:
        """Snapshot of the entry records; the records are immutable."""
        return list(self._elements)
