"""Descriptor set discovery and schema accumulation service."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from functools import reduce
from pathlib import Path

from proto_config_schema.configuration.runtime_settings import DEFAULT_DESCRIPTOR_EXTENSION
from proto_config_schema.descriptor_loading.descriptor_source import load_message_descriptors
from proto_config_schema.schema_building import ConfigSchema, apply_messages

_LOGGER = logging.getLogger("proto_config_schema.directory_collection")


class DirectoryWalkError(Exception):
    """Raised when the directory tree cannot be traversed."""


@dataclass(frozen=True)
class CollectionSummary:
    """Counters describing one completed collection."""

    files: int
    messages: int
    properties: int


@dataclass(frozen=True)
class _CollectionState:
    """Accumulator threaded through the fold over discovered files."""

    schema: ConfigSchema
    files: int = 0
    messages: int = 0


def discover_descriptor_files(
    root_path: Path | str, extension: str = DEFAULT_DESCRIPTOR_EXTENSION
) -> Iterator[Path]:
    """Yield files under ``root_path`` whose extension equals ``extension``.

    Entries are visited depth-first in lexical order. Symlinked directories are
    not descended into. The extension match is case-sensitive.

    Raises:
      DirectoryWalkError: If the root or any directory below it cannot be read.
    """
    root = Path(root_path)
    try:
        root.lstat()
    except OSError as exc:
        raise DirectoryWalkError(f"Cannot access {root}: {exc}") from exc

    if _is_walkable_directory(root):
        yield from _walk_directory(root, extension)
    elif _extension(root.name) == extension:
        yield root


def collect_schema(
    root_path: Path | str, *, extension: str = DEFAULT_DESCRIPTOR_EXTENSION
) -> ConfigSchema:
    """Build one flat schema from every descriptor set under ``root_path``."""
    schema, _ = collect_schema_with_summary(root_path, extension=extension)
    return schema


def collect_schema_with_summary(
    root_path: Path | str, *, extension: str = DEFAULT_DESCRIPTOR_EXTENSION
) -> tuple[ConfigSchema, CollectionSummary]:
    """Build the flat schema and report how much input went into it.

    The first traversal or decode failure aborts the whole collection.

    Raises:
      DirectoryWalkError: If traversal fails.
      DescriptorDecodeError: If a matching file is not a valid descriptor set.
    """
    state = reduce(
        _merge_descriptor_file,
        discover_descriptor_files(root_path, extension),
        _CollectionState(schema=ConfigSchema()),
    )
    summary = CollectionSummary(
        files=state.files,
        messages=state.messages,
        properties=len(state.schema.properties),
    )
    return state.schema, summary


def _merge_descriptor_file(state: _CollectionState, path: Path) -> _CollectionState:
    _LOGGER.debug("loading descriptor set %s", path)
    messages = load_message_descriptors(path)
    return _CollectionState(
        schema=apply_messages(messages, state.schema),
        files=state.files + 1,
        messages=state.messages + len(messages),
    )


def _walk_directory(directory: Path, extension: str) -> Iterator[Path]:
    # One open iterator per directory level below the root.
    pending = [iter(_sorted_entries(directory))]
    while pending:
        entry = next(pending[-1], None)
        if entry is None:
            pending.pop()
        elif _is_walkable_directory(entry):
            pending.append(iter(_sorted_entries(entry)))
        elif _extension(entry.name) == extension:
            yield entry


def _sorted_entries(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        raise DirectoryWalkError(f"Cannot read directory {directory}: {exc}") from exc


def _is_walkable_directory(path: Path) -> bool:
    return path.is_dir() and not path.is_symlink()


def _extension(name: str) -> str:
    # Text from the last dot, so ".proto" itself has extension ".proto".
    index = name.rfind(".")
    return name[index:] if index >= 0 else ""
