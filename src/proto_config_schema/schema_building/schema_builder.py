"""Message to JSON Schema property merging service."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import reduce

from proto_config_schema.descriptor_loading.descriptor_models import (
    FieldDescriptor,
    MessageDescriptor,
)

from .schema_models import ConfigSchema, SchemaProperty
from .type_mapping import map_field_kind

_LOGGER = logging.getLogger("proto_config_schema.schema_building")


def build_field_property(field: FieldDescriptor) -> SchemaProperty:
    """Build the JSON Schema fragment for a single field.

    Message and group fields are opaque objects; their own fields are not expanded.
    """
    base_type = map_field_kind(field.map_value_kind if field.is_map else field.kind)
    prop = SchemaProperty(type=base_type)
    if field.is_list:
        prop = SchemaProperty(type="array", items=SchemaProperty(type=base_type))
    if field.is_map:
        prop = SchemaProperty(
            type="object", additional_properties=SchemaProperty(type=base_type)
        )
    return prop


def apply_message(message: MessageDescriptor, schema: ConfigSchema) -> ConfigSchema:
    """Merge the fields of ``message`` into ``schema`` and return the result.

    Properties share one flat namespace: a field replaces any earlier property
    with the same name, whichever message declared it.
    """
    updates = {field.name: build_field_property(field) for field in message.fields}
    replaced = sorted(name for name in updates if name in schema.properties)
    if replaced:
        _LOGGER.debug("%s replaces properties: %s", message.full_name, ", ".join(replaced))
    _LOGGER.debug("merged %s (%d field(s))", message.full_name, len(updates))
    return schema.with_properties(updates)


def apply_messages(messages: Iterable[MessageDescriptor], schema: ConfigSchema) -> ConfigSchema:
    """Fold ``apply_message`` over ``messages`` in order."""
    return reduce(lambda acc, message: apply_message(message, acc), messages, schema)
