"""Schema building exports."""

from .schema_builder import apply_message, apply_messages, build_field_property
from .schema_models import ConfigSchema, SchemaProperty
from .type_mapping import JSON_TYPE_BY_FIELD_KIND, map_field_kind

__all__ = [
    "ConfigSchema",
    "SchemaProperty",
    "JSON_TYPE_BY_FIELD_KIND",
    "map_field_kind",
    "build_field_property",
    "apply_message",
    "apply_messages",
]
