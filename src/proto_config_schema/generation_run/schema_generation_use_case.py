"""Schema generation use-case service."""

from __future__ import annotations

import logging

from proto_config_schema.configuration import DEFAULT_SETTINGS, GeneratorSettings
from proto_config_schema.descriptor_loading import DescriptorDecodeError
from proto_config_schema.directory_collection import (
    DirectoryWalkError,
    collect_schema_with_summary,
)
from proto_config_schema.schema_emission import (
    SchemaMarshalError,
    SchemaWriteError,
    write_schema,
)

from .run_contracts import GenerationOutcome

_LOGGER = logging.getLogger("proto_config_schema.generation_run")


class GenerationRunError(Exception):
    """Raised when a generation run cannot be completed."""


def execute_schema_generation(settings: GeneratorSettings = DEFAULT_SETTINGS) -> GenerationOutcome:
    """Walk, convert and write the schema; any failure aborts the whole run."""
    try:
        schema, summary = collect_schema_with_summary(
            settings.root_dir, extension=settings.descriptor_extension
        )
    except (DirectoryWalkError, DescriptorDecodeError) as exc:
        raise GenerationRunError(f"Failed to walk through directory: {exc}") from exc

    try:
        output_path = write_schema(schema, settings.output_path, indent=settings.json_indent)
    except SchemaMarshalError as exc:
        raise GenerationRunError(f"Failed to marshal schema to JSON: {exc}") from exc
    except SchemaWriteError as exc:
        raise GenerationRunError(f"Failed to write JSON schema file: {exc}") from exc

    _LOGGER.info(
        "wrote %s from %d file(s), %d message(s), %d property name(s)",
        output_path,
        summary.files,
        summary.messages,
        summary.properties,
    )
    return GenerationOutcome(
        output_path=output_path,
        files=summary.files,
        messages=summary.messages,
        properties=summary.properties,
    )
