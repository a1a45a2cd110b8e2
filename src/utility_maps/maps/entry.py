from typing import Any, Generic

from pydantic import BaseModel, ConfigDict, Field

from utility_maps.core.protocols import E


class MapEntry(BaseModel, Generic[E]):
    """One ``(key, value)`` pair held by a GuardedMap."""

    key: str = Field(
        ..., min_length=1, strict=True, description="Unique key within the map."
    )
    value: E = Field(..., description="Stored element, kept by reference.")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def with_value(self, value: E) -> "MapEntry[E]":
        """Copy of this entry holding another value."""
        return self.model_copy(update={"value": value})

    def to_object(self) -> dict[str, Any]:
        return {"key": self.key, "value": self.value}
