"""Encode and decode the plain-object interchange format (JSON / YAML)."""

from __future__ import annotations

import json
import logging
from io import StringIO
from typing import Any, Dict, Mapping

from ruamel.yaml import YAML

from ..config import DEFAULT_SETTINGS, MapSettings
from ..exceptions import MapLoadError

logger = logging.getLogger(__name__)

_yaml_parser = YAML(typ="safe")  # safe loader, YAML 1.2


def _build_dumper(settings: MapSettings) -> YAML:
    yaml = YAML()
    yaml.indent(mapping=settings.yaml_indent, sequence=4, offset=2)
    yaml.default_flow_style = False
    yaml.allow_unicode = True
    yaml.width = settings.yaml_width
    return yaml


def dump_json(basic: Mapping[str, Any], settings: MapSettings | None = None) -> str:
    """
    Serialize a basic map to JSON.

    Args:
        basic: Plain ``str``-keyed mapping.
        settings: Output options; defaults match a bare ``json.dumps``.

    Returns:
        JSON text.

    Raises:
        TypeError: If a value is not JSON serializable.
    """
    settings = settings or DEFAULT_SETTINGS
    return json.dumps(
        dict(basic),
        indent=settings.json_indent,
        sort_keys=settings.json_sort_keys,
        ensure_ascii=settings.json_ensure_ascii,
    )


def dump_yaml(basic: Mapping[str, Any], settings: MapSettings | None = None) -> str:
    """
    Serialize a basic map to block-style YAML, keeping insertion order.

    Raises:
        RepresenterError: If ruamel.yaml has no representer for a value
    """
    settings = settings or DEFAULT_SETTINGS
    stream = StringIO()
    _build_dumper(settings).dump(dict(basic), stream)
    return stream.getvalue()


def _ensure_basic_map(data: Any, source: str) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise MapLoadError(f"Top-level {source} object must be a mapping")
    for key in data:
        if not isinstance(key, str):
            raise MapLoadError(
                f"Top-level {source} keys must be strings, got {key!r}", key=key
            )
    return data


def load_json(text: str) -> Dict[str, Any]:
    """
    Parse JSON text into a basic map.

    Raises:
        MapLoadError: On syntax errors or when the top level is not a mapping.
    """
    try:
        data = json.loads(text)
    except Exception as exc:
        raise MapLoadError(f"Cannot parse JSON: {exc}") from exc

    basic = _ensure_basic_map(data, "JSON")
    logger.debug("JSON document decoded (%d root keys)", len(basic))
    return basic


def load_yaml(text: str) -> Dict[str, Any]:
    """
    Parse YAML text into a basic map.

    An empty document decodes to an empty map.

    Raises:
        MapLoadError: On syntax errors or when the top level is not a mapping.
    """
    try:
        data = _yaml_parser.load(text)
    except Exception as exc:
        raise MapLoadError(f"Cannot parse YAML: {exc}") from exc

    if data is None:
        data = {}

    basic = _ensure_basic_map(data, "YAML")
    logger.debug("YAML document decoded (%d root keys)", len(basic))
    return basic
