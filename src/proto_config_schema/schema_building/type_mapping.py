"""Protobuf field kind to JSON Schema type mapping."""

from __future__ import annotations

from google.protobuf.descriptor import FieldDescriptor

FALLBACK_JSON_TYPE = "object"

# Unsigned and fixed-width kinds fall back to "object".
JSON_TYPE_BY_FIELD_KIND: dict[int, str] = {
    FieldDescriptor.TYPE_STRING: "string",
    FieldDescriptor.TYPE_INT32: "integer",
    FieldDescriptor.TYPE_INT64: "integer",
    FieldDescriptor.TYPE_SINT32: "integer",
    FieldDescriptor.TYPE_SINT64: "integer",
    FieldDescriptor.TYPE_FLOAT: "number",
    FieldDescriptor.TYPE_DOUBLE: "number",
    FieldDescriptor.TYPE_BOOL: "boolean",
    FieldDescriptor.TYPE_BYTES: "string",
    FieldDescriptor.TYPE_MESSAGE: "object",
    FieldDescriptor.TYPE_GROUP: "object",
    FieldDescriptor.TYPE_ENUM: "string",
}


def map_field_kind(kind: int | None) -> str:
    """Return the JSON Schema primitive type for a protobuf field kind."""
    if kind is None:
        return FALLBACK_JSON_TYPE
    return JSON_TYPE_BY_FIELD_KIND.get(kind, FALLBACK_JSON_TYPE)
