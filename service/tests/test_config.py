from pathlib import Path

import pytest

from swizzle_generator.data.config import SwizzleConfig
from swizzle_generator.errors import ConfigError
from swizzle_generator.model.declaration import (
    CombinationBlockDeclaration,
    SelfSwizzleDeclaration,
    SingleMappingDeclaration,
)


def test_load_yaml_config(files_dir: Path):
    config = SwizzleConfig.from_file(files_dir / "vectors.yaml")

    assert config.name == "vectors"
    assert config.header == "Vector swizzles"
    assert config.large_swizzle_warning == 100
    assert [s.name for s in config.shapes] == ["Scalar", "Vec2", "Vec3"]
    assert [type(s) for s in config.swizzles] == [
        SelfSwizzleDeclaration,
        CombinationBlockDeclaration,
        CombinationBlockDeclaration,
        SingleMappingDeclaration,
    ]
    assert list(config.swizzles[3].mapping.items()) == [("x", "y"), ("y", "x"), ("z", "y")]
    assert config.file_path == files_dir / "vectors.yaml"
    assert config.output_path == files_dir / "out" / "vector_swizzles.py"


def test_load_json_config_defaults(files_dir: Path):
    config = SwizzleConfig.from_file(files_dir / "colors.json")

    assert config.name == "colors"
    assert config.output_file == "swizzles.py"
    assert config.header is None
    assert config.shapes[0].module == "colors"


def test_missing_candidate_list_survives_loading(files_dir: Path):
    config = SwizzleConfig.from_file(files_dir / "broken.yaml")

    assert config.swizzles[0].fields["y"] is None


def test_invalid_config_raises(files_dir: Path):
    with pytest.raises(ConfigError, match="failed to load config"):
        SwizzleConfig.from_file(files_dir / "invalid.yaml")


def test_missing_file_raises(tmp_path: Path):
    with pytest.raises(ConfigError, match="failed to read config"):
        SwizzleConfig.from_file(tmp_path / "nope.yaml")


def test_unsupported_suffix_raises(tmp_path: Path):
    file = tmp_path / "config.toml"
    file.write_text("shapes = []", encoding="utf-8")

    with pytest.raises(ConfigError, match="unsupported config format"):
        SwizzleConfig.from_file(file)


def test_empty_yaml_is_an_empty_config(tmp_path: Path):
    file = tmp_path / "empty.yaml"
    file.write_text("", encoding="utf-8")

    config = SwizzleConfig.from_file(file)

    assert config.shapes == []
    assert config.swizzles == []
    assert config.name == "empty"


def test_yaml_syntax_error_raises(tmp_path: Path):
    file = tmp_path / "bad.yaml"
    file.write_text("shapes: [\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="failed to parse YAML"):
        SwizzleConfig.from_file(file)
