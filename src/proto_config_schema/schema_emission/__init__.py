"""Schema emission exports."""

from .schema_writer import (
    SchemaEmissionError,
    SchemaMarshalError,
    SchemaWriteError,
    render_schema_json,
    write_schema,
)

__all__ = [
    "SchemaEmissionError",
    "SchemaMarshalError",
    "SchemaWriteError",
    "render_schema_json",
    "write_schema",
]
