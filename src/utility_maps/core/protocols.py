from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Iterator,
    Mapping,
    Optional,
    Protocol,
    TypeVar,
    Union,
    runtime_checkable,
)

if TYPE_CHECKING:
    from utility_maps.config import MapSettings
    from utility_maps.maps.guarded_map import GuardedMap
    from utility_maps.maps.open_map import OpenMap

E = TypeVar("E")

Compare = Callable[[Any, Any], bool]
"""``compare(map_element, searched_element) -> bool``"""


@runtime_checkable
class UtilityMap(Protocol[E]):
    """
    Defines the contract shared by every string-keyed map.

    Callbacks passed to ``for_each``, ``every``, ``some`` and the comparators
    run synchronously and must not mutate the map they were handed; doing so
    is undefined behavior.
    """

    def add(self, key: str, value: E) -> None:
        """
        Store a new entry.

        Raises:
            KeyConflictError: If the key is already present.
        """
        ...

    def get(self, key: str) -> E:
        """
        Return the value stored under ``key``.

        Raises:
            KeyNotFoundError: If the key is absent.
        """
        ...

    def set(self, key: str, value: E) -> None:
        """
        Overwrite the value of an existing entry.

        Raises:
            KeyNotFoundError: If the key is absent.
        """
        ...

    def remove(self, key: str) -> None:
        """
        Delete an entry.

        Raises:
            KeyNotFoundError: If the key is absent.
        """
        ...

    def size(self) -> int:
        """Number of stored entries."""
        ...

    def includes_key(self, key: str) -> bool:
        """True if an entry is stored under ``key``."""
        ...

    def includes(self, value: E, compare: Optional[Compare] = None) -> bool:
        """True if some entry's value matches ``value``."""
        ...

    def key_of(self, value: E, compare: Optional[Compare] = None) -> Optional[str]:
        """First key, in iteration order, whose value matches; None otherwise."""
        ...

    def for_each(self, each: Callable[[E, str], Any]) -> None:
        """Call ``each(value, key)`` once per entry, in iteration order."""
        ...

    def every(self, test: Callable[[E, str, "UtilityMap[E]"], bool]) -> bool:
        """True if ``test(value, key, map)`` holds for all entries."""
        ...

    def some(self, test: Callable[[E, str, "UtilityMap[E]"], bool]) -> bool:
        """True if ``test(value, key, map)`` holds for at least one entry."""
        ...

    def items(self) -> Iterator[tuple[str, E]]:
        """Iterate over ``(key, value)`` pairs in insertion order."""
        ...

    def to_objects_array(self) -> list[dict[str, Any]]:
        """Ordered ``{"key": ..., "value": ...}`` snapshots."""
        ...

    def keys_to_array(self) -> list[str]:
        ...

    def values_to_array(self) -> list[E]:
        ...

    def concat(
        self,
        other_map: Union["UtilityMap[E]", Mapping[str, E]],
        replace: bool = False,
    ) -> None:
        """Merge the entries of another map into this one."""
        ...

    def equals(
        self, other_map: "UtilityMap[E]", compare: Optional[Compare] = None
    ) -> bool:
        """True if both maps hold the same keys with matching values."""
        ...

    def to_json(self, settings: Optional["MapSettings"] = None) -> str:
        ...

    def to_yaml(self, settings: Optional["MapSettings"] = None) -> str:
        ...

    def to_basic_map(self) -> dict[str, E]:
        """Independent plain ``dict`` snapshot."""
        ...

    def to_map(self) -> "OpenMap[E]":
        ...

    def to_guarded_map(self) -> "GuardedMap[E]":
        ...
