"""Schema generation use-case tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from google.protobuf import descriptor_pb2
from proto_config_schema.configuration import GeneratorSettings
from proto_config_schema.generation_run import GenerationRunError, execute_schema_generation
from proto_config_schema.generation_run import schema_generation_use_case
from proto_config_schema.schema_emission import SchemaMarshalError

_Field = descriptor_pb2.FieldDescriptorProto


def _write_person_descriptor_set(path: Path) -> None:
    message = descriptor_pb2.DescriptorProto(
        name="Person",
        field=[
            _Field(name="name", number=1, type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL),
            _Field(name="age", number=2, type=_Field.TYPE_INT32, label=_Field.LABEL_OPTIONAL),
            _Field(name="active", number=3, type=_Field.TYPE_BOOL, label=_Field.LABEL_OPTIONAL),
        ],
    )
    file_proto = descriptor_pb2.FileDescriptorProto(
        name="person.proto", package="demo", message_type=[message]
    )
    path.write_bytes(descriptor_pb2.FileDescriptorSet(file=[file_proto]).SerializeToString())


def _settings(tmp_path: Path) -> GeneratorSettings:
    return GeneratorSettings(
        root_dir=tmp_path / "descriptors",
        output_filename=str(tmp_path / "config_schema.json"),
    )


def test_generation_writes_schema_and_reports_counts(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    settings.root_dir.mkdir()
    _write_person_descriptor_set(settings.root_dir / "person.proto")

    outcome = execute_schema_generation(settings)

    assert outcome.output_path == (tmp_path / "config_schema.json").resolve()
    assert (outcome.files, outcome.messages, outcome.properties) == (1, 1, 3)
    assert json.loads(outcome.output_path.read_text(encoding="utf-8")) == {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "age": {"type": "integer"},
            "active": {"type": "boolean"},
        },
    }


def test_decode_failure_names_walk_stage_and_writes_nothing(tmp_path: Path) -> None:
    settings = _settings(tmp_path)
    settings.root_dir.mkdir()
    (settings.root_dir / "broken.proto").write_bytes(b"\n\xffnot a descriptor")

    with pytest.raises(GenerationRunError, match="^Failed to walk through directory: "):
        execute_schema_generation(settings)

    assert not settings.output_path.exists()


def test_missing_root_names_walk_stage(tmp_path: Path) -> None:
    with pytest.raises(GenerationRunError, match="^Failed to walk through directory: "):
        execute_schema_generation(_settings(tmp_path))


def test_write_failure_names_write_stage(tmp_path: Path) -> None:
    root = tmp_path / "descriptors"
    root.mkdir()
    settings = GeneratorSettings(
        root_dir=root, output_filename=str(tmp_path / "missing" / "config_schema.json")
    )

    with pytest.raises(GenerationRunError, match="^Failed to write JSON schema file: "):
        execute_schema_generation(settings)



def test_marshal_failure_names_marshal_stage(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    settings = _settings(tmp_path)
    settings.root_dir.mkdir()

    def failing_write_schema(*_args, **_kwargs):
        raise SchemaMarshalError("Object of type object is not JSON serializable")

    monkeypatch.setattr(schema_generation_use_case, "write_schema", failing_write_schema)

    with pytest.raises(GenerationRunError, match="^Failed to marshal schema to JSON: Object"):
        execute_schema_generation(settings)

    assert not settings.output_path.exists()
