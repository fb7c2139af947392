"""JSON schema serialization and file writer service."""

from __future__ import annotations

import json
from pathlib import Path

from proto_config_schema.configuration.runtime_settings import DEFAULT_JSON_INDENT
from proto_config_schema.schema_building.schema_models import ConfigSchema


class SchemaEmissionError(Exception):
    """Base error for schema serialization and output failures."""


class SchemaMarshalError(SchemaEmissionError):
    """Raised when the schema cannot be serialized to JSON."""


class SchemaWriteError(SchemaEmissionError):
    """Raised when the schema file cannot be written."""


def render_schema_json(schema: ConfigSchema, *, indent: int = DEFAULT_JSON_INDENT) -> str:
    """Serialize ``schema`` to indented JSON text."""
    try:
        return json.dumps(schema.to_json(), indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise SchemaMarshalError(str(exc)) from exc


def write_schema(
    schema: ConfigSchema, output_path: Path | str, *, indent: int = DEFAULT_JSON_INDENT
) -> Path:
    """Write the schema as UTF-8 JSON to ``output_path``.

    Args:
      schema: Accumulated schema to serialize.
      output_path: Destination file; an existing file is replaced.
      indent: Number of spaces per indentation level.

    Returns:
      The resolved destination path.

    Raises:
      SchemaMarshalError: If serialization fails. Nothing is written.
      SchemaWriteError: If the file cannot be written.
    """
    text = render_schema_json(schema, indent=indent)
    destination = Path(output_path)
    try:
        destination.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise SchemaWriteError(str(exc)) from exc
    return destination.resolve()
