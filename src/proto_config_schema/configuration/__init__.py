"""Configuration domain exports."""

from .runtime_settings import (
    DEFAULT_DESCRIPTOR_EXTENSION,
    DEFAULT_JSON_INDENT,
    DEFAULT_OUTPUT_FILENAME,
    DEFAULT_SETTINGS,
    GeneratorSettings,
)

__all__ = [
    "GeneratorSettings",
    "DEFAULT_SETTINGS",
    "DEFAULT_DESCRIPTOR_EXTENSION",
    "DEFAULT_OUTPUT_FILENAME",
    "DEFAULT_JSON_INDENT",
]
