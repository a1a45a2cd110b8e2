"""String-keyed generic maps: OpenMap, GuardedMap and the Maps factory."""

from .config import DEFAULT_SETTINGS, MapSettings
from .core.common.base_map import BaseUtilityMap, default_compare
from .core.protocols import UtilityMap
from .exceptions import (
    KeyConflictError,
    KeyNotFoundError,
    MapError,
    MapLoadError,
    TypeMismatchError,
)
from .maps import GuardedMap, MapEntry, Maps, OpenMap

__all__ = [
    "UtilityMap",
    "BaseUtilityMap",
    "OpenMap",
    "GuardedMap",
    "MapEntry",
    "Maps",
    "MapSettings",
    "DEFAULT_SETTINGS",
    "MapError",
    "KeyConflictError",
    "KeyNotFoundError",
    "TypeMismatchError",
    "MapLoadError",
    "default_compare",
]
