from .entry import MapEntry
from .factory import Maps
from .guarded_map import GuardedMap
from .open_map import OpenMap

__all__ = ["MapEntry", "Maps", "GuardedMap", "OpenMap"]
