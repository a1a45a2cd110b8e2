"""Common base classes and utilities for core functionality."""

from .base_map import BaseUtilityMap, default_compare

__all__ = ["BaseUtilityMap", "default_compare"]
