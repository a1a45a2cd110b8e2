"""Static constructors for both map variants."""

from __future__ import annotations

from typing import Iterable, Mapping, Optional

from utility_maps.core.protocols import E

from .guarded_map import GuardedMap
from .open_map import OpenMap


class Maps:
    """
    Stateless factory; every constructor is a pure function of its inputs.

    Inputs are only read. Rejections come from the underlying ``add``,
    e.g. a ``KeyConflictError`` if two produced keys collide.
    """

    @staticmethod
    def create_map() -> OpenMap:
        """New empty OpenMap."""
        return OpenMap.create()

    @staticmethod
    def create_guarded_map() -> GuardedMap:
        """New empty GuardedMap (entries only reachable through methods)."""
        return GuardedMap.create()

    @staticmethod
    def map_from_array(
        items: Iterable[E], key_suffix: Optional[str] = None
    ) -> OpenMap[E]:
        """
        OpenMap with the given elements keyed by position.

        Keys are the indexes as strings, followed by ``key_suffix`` when one
        is given: ``map_from_array([10, 20], "_k")`` holds ``"0_k"`` and
        ``"1_k"``.
        """
        return OpenMap.from_array(items, key_suffix)

    @staticmethod
    def guarded_map_from_array(
        items: Iterable[E], key_suffix: Optional[str] = None
    ) -> GuardedMap[E]:
        """GuardedMap counterpart of ``map_from_array``."""
        return GuardedMap.from_array(items, key_suffix)

    @staticmethod
    def map_from_basic_map(basic: Mapping[str, E]) -> OpenMap[E]:
        """OpenMap from a plain key: value mapping."""
        return OpenMap.from_basic_map(basic)

    @staticmethod
    def guarded_map_from_basic_map(basic: Mapping[str, E]) -> GuardedMap[E]:
        return GuardedMap.from_basic_map(basic)

    @staticmethod
    def map_from_json(text: str) -> OpenMap:
        return OpenMap.from_json(text)

    @staticmethod
    def guarded_map_from_json(text: str) -> GuardedMap:
        return GuardedMap.from_json(text)

    @staticmethod
    def map_from_yaml(text: str) -> OpenMap:
        return OpenMap.from_yaml(text)

    @staticmethod
    def guarded_map_from_yaml(text: str) -> GuardedMap:
        return GuardedMap.from_yaml(text)
