"""Serialization settings shared by every map."""

from pydantic import BaseModel, ConfigDict, Field


class MapSettings(BaseModel):
    """Options shaping ``to_json`` / ``to_yaml`` output.

    Defaults reproduce plain ``json.dumps`` output.
    """

    json_indent: int | None = Field(
        default=None,
        ge=0,
        description="Indentation passed to json.dumps; None keeps one line.",
    )
    json_sort_keys: bool = Field(
        default=False,
        description="Sort keys in JSON output instead of insertion order.",
    )
    json_ensure_ascii: bool = Field(
        default=True,
        description="Escape non-ASCII characters in JSON output.",
    )
    yaml_indent: int = Field(
        default=2, ge=1, description="Mapping indentation for YAML output."
    )
    yaml_width: int = Field(
        default=4096, ge=20, description="Preferred YAML line width."
    )

    model_config = ConfigDict(extra="forbid", frozen=True)


DEFAULT_SETTINGS = MapSettings()
