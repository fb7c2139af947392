"""Directory collection exports."""

from .directory_collector import (
    CollectionSummary,
    DirectoryWalkError,
    collect_schema,
    collect_schema_with_summary,
    discover_descriptor_files,
)

__all__ = [
    "CollectionSummary",
    "DirectoryWalkError",
    "collect_schema",
    "collect_schema_with_summary",
    "discover_descriptor_files",
]
