"""Descriptor loading entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldDescriptor:
    """One field declared directly on a message.

    ``kind`` and ``map_value_kind`` hold protobuf ``FieldDescriptor.TYPE_*``
    values. ``is_list`` and ``is_map`` are disjoint for decoded descriptors.
    """

    name: str
    kind: int
    is_list: bool = False
    is_map: bool = False
    map_value_kind: int | None = None


@dataclass(frozen=True)
class MessageDescriptor:
    """Top-level message type found in a descriptor set."""

    name: str
    full_name: str
    source_file: str
    fields: tuple[FieldDescriptor, ...]
