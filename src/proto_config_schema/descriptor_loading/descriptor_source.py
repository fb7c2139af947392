"""Compiled descriptor set loading service."""

from __future__ import annotations

import logging
from pathlib import Path

from google.protobuf import descriptor_pb2
from google.protobuf.message import DecodeError

from .descriptor_models import FieldDescriptor, MessageDescriptor

_LOGGER = logging.getLogger("proto_config_schema.descriptor_loading")

_MAP_VALUE_FIELD_NUMBER = 2


class DescriptorDecodeError(Exception):
    """Raised when a file cannot be read or decoded as a FileDescriptorSet."""


def load_message_descriptors(file_path: Path | str) -> list[MessageDescriptor]:
    """Decode a serialized FileDescriptorSet and return its top-level messages.

    Args:
      file_path: File holding a binary ``FileDescriptorSet``.

    Returns:
      Top-level message descriptors of every contained file, in file order.

    Raises:
      DescriptorDecodeError: If the file cannot be read or is not a valid
        descriptor set encoding.
    """
    path = Path(file_path)
    try:
        contents = path.read_bytes()
    except OSError as exc:
        raise DescriptorDecodeError(f"Failed to read descriptor set {path}: {exc}") from exc

    descriptor_set = descriptor_pb2.FileDescriptorSet()
    try:
        descriptor_set.ParseFromString(contents)
    except DecodeError as exc:
        raise DescriptorDecodeError(f"Invalid descriptor set {path}: {exc}") from exc

    messages = [
        _to_message_descriptor(message, package=file_proto.package, source_file=file_proto.name)
        for file_proto in descriptor_set.file
        for message in file_proto.message_type
    ]
    _LOGGER.debug(
        "decoded %s: %d file(s), %d message(s)", path, len(descriptor_set.file), len(messages)
    )
    return messages


def _to_message_descriptor(
    message: descriptor_pb2.DescriptorProto, *, package: str = "", source_file: str = ""
) -> MessageDescriptor:
    """Map a raw ``DescriptorProto`` onto a read-only message descriptor."""
    full_name = f"{package}.{message.name}" if package else message.name
    map_entries = _map_entries_by_name(message, full_name)
    fields = tuple(_to_field_descriptor(field, map_entries) for field in message.field)
    return MessageDescriptor(
        name=message.name,
        full_name=full_name,
        source_file=source_file,
        fields=fields,
    )


def _map_entries_by_name(
    message: descriptor_pb2.DescriptorProto, full_name: str
) -> dict[str, descriptor_pb2.DescriptorProto]:
    entries: dict[str, descriptor_pb2.DescriptorProto] = {}
    for nested in message.nested_type:
        if nested.options.map_entry:
            entries[f"{full_name}.{nested.name}"] = nested
            entries[nested.name] = nested
    return entries


def _to_field_descriptor(
    field: descriptor_pb2.FieldDescriptorProto,
    map_entries: dict[str, descriptor_pb2.DescriptorProto],
) -> FieldDescriptor:
    repeated = field.label == descriptor_pb2.FieldDescriptorProto.LABEL_REPEATED
    map_entry = None
    if repeated and field.type == descriptor_pb2.FieldDescriptorProto.TYPE_MESSAGE:
        map_entry = map_entries.get(field.type_name.lstrip("."))

    if map_entry is None:
        return FieldDescriptor(name=field.name, kind=field.type, is_list=repeated)

    return FieldDescriptor(
        name=field.name,
        kind=field.type,
        is_map=True,
        map_value_kind=_map_value_kind(map_entry),
    )


def _map_value_kind(map_entry: descriptor_pb2.DescriptorProto) -> int | None:
    for entry_field in map_entry.field:
        if entry_field.number == _MAP_VALUE_FIELD_NUMBER:
            return entry_field.type
    return None
