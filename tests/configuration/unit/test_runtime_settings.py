"""Runtime settings tests."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest
from proto_config_schema.configuration import DEFAULT_SETTINGS, GeneratorSettings


def test_default_settings_target_current_directory() -> None:
    assert DEFAULT_SETTINGS.root_dir == Path(".")
    assert DEFAULT_SETTINGS.descriptor_extension == ".proto"
    assert DEFAULT_SETTINGS.output_path == Path("config_schema.json")
    assert DEFAULT_SETTINGS.json_indent == 2


def test_settings_are_immutable() -> None:
    settings = GeneratorSettings()

    with pytest.raises(FrozenInstanceError):
        settings.output_filename = "other.json"  # type: ignore[misc]
