"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_DESCRIPTOR_EXTENSION = ".proto"
DEFAULT_OUTPUT_FILENAME = "config_schema.json"
DEFAULT_JSON_INDENT = 2


@dataclass(frozen=True)
class GeneratorSettings:
    """Fixed inputs of one schema generation run."""

    root_dir: Path = field(default_factory=lambda: Path("."))
    descriptor_extension: str = DEFAULT_DESCRIPTOR_EXTENSION
    output_filename: str = DEFAULT_OUTPUT_FILENAME
    json_indent: int = DEFAULT_JSON_INDENT

    @property
    def output_path(self) -> Path:
        """Output file, relative to the current working directory."""
        return Path(self.output_filename)


DEFAULT_SETTINGS = GeneratorSettings()
