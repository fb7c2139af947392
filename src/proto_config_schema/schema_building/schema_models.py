"""Schema building entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SchemaProperty:
    """JSON Schema fragment describing one message field."""

    type: str
    items: SchemaProperty | None = None
    additional_properties: SchemaProperty | None = None

    def to_json(self) -> dict[str, Any]:
        rendered: dict[str, Any] = {"type": self.type}
        if self.items is not None:
            rendered["items"] = self.items.to_json()
        if self.additional_properties is not None:
            rendered["additionalProperties"] = self.additional_properties.to_json()
        return rendered


@dataclass(frozen=True)
class ConfigSchema:
    """Flat object schema merging the properties of every processed message."""

    properties: Mapping[str, SchemaProperty] = field(default_factory=dict)

    def with_properties(self, updates: Mapping[str, SchemaProperty]) -> ConfigSchema:
        """Return a new schema where ``updates`` replace same-named properties."""
        return ConfigSchema(properties={**self.properties, **updates})

    def to_json(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {name: prop.to_json() for name, prop in self.properties.items()},
        }
