"""
exceptions.py

Custom, typed exception hierarchy raised by the map collections
"""

from __future__ import annotations

# --------------------------------------------------------------------------- #
#                              Base hierarchy                                 #
# --------------------------------------------------------------------------- #


class MapError(Exception):
    """
    Root of all errors raised by this project.
    """

    def __init__(self, message: str, key: object = None) -> None:
        super().__init__(message)
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0]) if self.args else ""


class KeyConflictError(MapError):
    """
    Raised by ``add`` when the key is already present.

    The collection is left untouched; use ``set`` to overwrite.
    """


class KeyNotFoundError(MapError, KeyError):
    """
    Raised by ``get``, ``set`` and ``remove`` when the key is absent.

    Subclasses ``KeyError`` so record-style access on an OpenMap behaves
    like any other Python mapping.
    """


class TypeMismatchError(MapError, TypeError):
    """
    Raised when a key is not a non-empty ``str``.
    """


class MapLoadError(MapError):
    """
    Raised by the decoders when a document cannot be turned into a map.

    Examples
    --------
    * JSON or YAML syntax error
    * Top-level object is not a mapping
    * A top-level key is not a string
    """
