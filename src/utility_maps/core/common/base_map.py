"""Base implementation shared by every map variant."""

import logging
from abc import ABC, abstractmethod
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Union,
)

from utility_maps.config import MapSettings
from utility_maps.exceptions import (
    KeyConflictError,
    KeyNotFoundError,
    TypeMismatchError,
)
from utility_maps.io import codecs

from ..protocols import Compare, E, UtilityMap

if TYPE_CHECKING:
    from typing import Self

    from utility_maps.maps.guarded_map import GuardedMap
    from utility_maps.maps.open_map import OpenMap

logger = logging.getLogger(__name__)


def default_compare(map_element: Any, searched_element: Any) -> bool:
    """Identity first, then equality."""
    return map_element is searched_element or map_element == searched_element


def is_valid_key(key: Any) -> bool:
    return isinstance(key, str) and key != ""


class BaseUtilityMap(UtilityMap[E], ABC):
    """
    Abstract base class for string-keyed maps.

    Implements the whole contract on top of a handful of storage primitives,
    so a variant only decides how entries are held.

    Subclasses must implement:
    - _contains(): Explicit presence test for a key
    - _fetch(): Read the value of a present key
    - _store(): Append a new entry
    - _replace(): Overwrite a present key in place
    - _discard(): Delete a present key
    - _iter_items(): Iterate ``(key, value)`` pairs in insertion order
    - size()

    Key validation, error reporting and logging happen here, before any
    primitive is called, so a failing operation never has a partial effect.
    """

    def __init__(self) -> None:
        self._logger = logger.getChild(self.__class__.__name__)

    # ------------------------------------------------------------------ #
    # storage primitives
    # ------------------------------------------------------------------ #

    @abstractmethod
    def _contains(self, key: str) -> bool:
        pass

    @abstractmethod
    def _fetch(self, key: str) -> E:
        pass

    @abstractmethod
    def _store(self, key: str, value: E) -> None:
        pass

    @abstractmethod
    def _replace(self, key: str, value: E) -> None:
        pass

    @abstractmethod
    def _discard(self, key: str) -> None:
        pass

    @abstractmethod
    def _iter_items(self) -> Iterator[tuple[str, E]]:
        pass

    @abstractmethod
    def size(self) -> int:
        pass

    # ------------------------------------------------------------------ #
    # guarded mutation
    # ------------------------------------------------------------------ #

    def _check_key(self, key: Any, operation: str) -> None:
        if not is_valid_key(key):
            self._logger.warning(f"Rejected key {key!r} in {operation}()")
            raise TypeMismatchError(
                f"Map keys must be non-empty strings, got {key!r}", key=key
            )

    def _require(self, key: str, operation: str, hint: str) -> None:
        self._check_key(key, operation)
        if not self._contains(key):
            self._logger.warning(f"{operation}() on missing key '{key}'")
            raise KeyNotFoundError(f"Property '{key}' is not set, {hint}", key=key)

    def add(self, key: str, value: E) -> None:
        """
        Add a new entry.

        Args:
            key: Non-empty string key
            value: Element to store

        Raises:
            TypeMismatchError: If the key is not a non-empty string
            KeyConflictError: If the key is already present
        """
        self._check_key(key, "add")
        if self._contains(key):
            self._logger.warning(f"add() on existing key '{key}'")
            raise KeyConflictError(
                f"Property '{key}' is set, use set() instead", key=key
            )
        self._store(key, value)
        self._logger.debug(f"Added '{key}'")

    def get(self, key: str) -> E:
        """
        Get the value stored under a key.

        Raises:
            TypeMismatchError: If the key is not a non-empty string
            KeyNotFoundError: If the key is absent
        """
        self._require(key, "get", "use add(key, value) to add new element")
        return self._fetch(key)

    def set(self, key: str, value: E) -> None:
        """
        Change the value of an existing entry, keeping its position.

        Raises:
            TypeMismatchError: If the key is not a non-empty string
            KeyNotFoundError: If the key is absent
        """
        self._require(key, "set", "use add() instead")
        self._replace(key, value)
        self._logger.debug(f"Updated '{key}'")

    def remove(self, key: str) -> None:
        """
        Remove an entry; the remaining entries keep their order.

        Raises:
            TypeMismatchError: If the key is not a non-empty string
            KeyNotFoundError: If the key is absent
        """
        self._require(key, "remove", "so cannot remove it")
        self._discard(key)
        self._logger.debug(f"Removed '{key}'")

    # ------------------------------------------------------------------ #
    # queries
    # ------------------------------------------------------------------ #

    def includes_key(self, key: str) -> bool:
        return is_valid_key(key) and self._contains(key)

    def items(self) -> Iterator[tuple[str, E]]:
        # Snapshot, so callbacks cannot corrupt the walk
        return iter(list(self._iter_items()))

    def includes(self, value: E, compare: Optional[Compare] = None) -> bool:
        """
        Check whether some entry holds the given value.

        Args:
            value: Value to look for
            compare: Optional ``compare(map_element, value)``; identity or
                equality when omitted

        Returns:
            True if a matching entry exists
        """
        return self.key_of(value, compare) is not None

    def key_of(self, value: E, compare: Optional[Compare] = None) -> Optional[str]:
        """
        Find the first key, in insertion order, holding the given value.

        Returns:
            The key, or None when no entry matches
        """
        compare = compare or default_compare
        for key, element in self.items():
            if compare(element, value):
                return key
        return None

    def for_each(self, each: Callable[[E, str], Any]) -> None:
        for key, value in self.items():
            each(value, key)

    def every(self, test: Callable[[E, str, "UtilityMap[E]"], bool]) -> bool:
        return all(test(value, key, self) for key, value in self.items())

    def some(self, test: Callable[[E, str, "UtilityMap[E]"], bool]) -> bool:
        return any(test(value, key, self) for key, value in self.items())

    def to_objects_array(self) -> list[dict[str, Any]]:
        return [{"key": key, "value": value} for key, value in self.items()]

    def keys_to_array(self) -> list[str]:
        return [key for key, _ in self.items()]

    def values_to_array(self) -> list[E]:
        return [value for _, value in self.items()]

    # ------------------------------------------------------------------ #
    # combination
    # ------------------------------------------------------------------ #

    def concat(
        self,
        other_map: Union["UtilityMap[E]", Mapping[str, E]],
        replace: bool = False,
    ) -> None:
        """
        Add the entries of another map to this one.

        Keys missing here are added. Keys present in both keep this map's
        value unless ``replace`` is True, in which case they take the other
        map's value. Nothing is ever removed.

        Args:
            other_map: Another map of either variant, or a plain mapping
            replace: Overwrite values on key collisions

        Raises:
            TypeMismatchError: If a key of a plain mapping is not a non-empty
                string; checked before anything is merged
        """
        pairs = list(other_map.items())
        for key, _ in pairs:
            self._check_key(key, "concat")

        added = replaced = 0
        for key, value in pairs:
            if self.includes_key(key):
                if replace:
                    self.set(key, value)
                    replaced += 1
            else:
                self.add(key, value)
                added += 1
        self._logger.debug(f"Concatenated: {added} added, {replaced} replaced")

    def equals(
        self, other_map: "UtilityMap[E]", compare: Optional[Compare] = None
    ) -> bool:
        """
        Check if another map, of either variant, holds the same entries.

        Insertion order is ignored.

        Args:
            other_map: Map to compare with
            compare: Optional ``compare(this_value, other_value)``; identity
                or equality when omitted

        Returns:
            True when sizes match and every entry of ``other_map`` has a key
            here with a matching value
        """
        compare = compare or default_compare
        if self.size() != other_map.size():
            return False
        for key, value in other_map.items():
            if not self.includes_key(key):
                return False
            if not compare(self._fetch(key), value):
                return False
        return True

    # ------------------------------------------------------------------ #
    # conversion
    # ------------------------------------------------------------------ #

    def to_basic_map(self) -> dict[str, E]:
        return dict(self.items())

    def to_json(self, settings: Optional[MapSettings] = None) -> str:
        """
        Serialize the basic map form to JSON.

        Raises:
            TypeError: If a value is not JSON serializable
        """
        return codecs.dump_json(self.to_basic_map(), settings)

    def to_yaml(self, settings: Optional[MapSettings] = None) -> str:
        """
        Serialize the basic map form to YAML.

        Raises:
            RepresenterError: If ruamel.yaml cannot represent a value
        """
        return codecs.dump_yaml(self.to_basic_map(), settings)

    def to_map(self) -> "OpenMap[E]":
        from utility_maps.maps.open_map import OpenMap

        return OpenMap.from_basic_map(self.to_basic_map())

    def to_guarded_map(self) -> "GuardedMap[E]":
        from utility_maps.maps.guarded_map import GuardedMap

        return GuardedMap.from_basic_map(self.to_basic_map())

    # ------------------------------------------------------------------ #
    # constructors
    # ------------------------------------------------------------------ #

    @classmethod
    def create(cls) -> "Self":
        return cls()

    @classmethod
    def from_array(
        cls, items: Iterable[E], key_suffix: Optional[str] = None
    ) -> "Self":
        """
        Build a map keyed by position.

        Args:
            items: Elements in order; not mutated
            key_suffix: Optional literal appended to every index key

        Returns:
            A map where ``items[i]`` is stored under ``str(i) + key_suffix``
        """
        new_map = cls()
        for index, element in enumerate(items):
            new_map.add(f"{index}{key_suffix}" if key_suffix else str(index), element)
        return new_map

    @classmethod
    def from_basic_map(cls, basic: Mapping[str, E]) -> "Self":
        """Build a map from a plain ``str``-keyed mapping, in its key order."""
        new_map = cls()
        for key in basic:
            new_map.add(key, basic[key])
        return new_map

    @classmethod
    def from_json(cls, text: str) -> "Self":
        """
        Build a map from a JSON object document.

        Raises:
            MapLoadError: If the text is not a JSON object
        """
        return cls.from_basic_map(codecs.load_json(text))

    @classmethod
    def from_yaml(cls, text: str) -> "Self":
        """
        Build a map from a YAML mapping document.

        Raises:
            MapLoadError: If the text is not a YAML mapping
        """
        return cls.from_basic_map(codecs.load_yaml(text))

    # ------------------------------------------------------------------ #
    # python protocol
    # ------------------------------------------------------------------ #

    def __len__(self) -> int:
        return self.size()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BaseUtilityMap):
            return self.equals(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_basic_map()!r})"
