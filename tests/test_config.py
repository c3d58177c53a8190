"""Tests for tagdoc.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from tagdoc.config import (
    DEFAULT_DOCSRC_DIR,
    DEFAULT_FILENAMES,
    DEFAULT_SRC_DIR,
    ConfigError,
    TagDocConfig,
    load_config,
)


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, TagDocConfig)
    assert config.root == tmp_path.resolve()
    assert config.src_dir == tmp_path.resolve() / DEFAULT_SRC_DIR
    assert config.docsrc_dir == tmp_path.resolve() / DEFAULT_DOCSRC_DIR
    assert config.filenames == DEFAULT_FILENAMES
    assert len(config.filenames) == 15
    assert dict(config.patches) == {"TagAnnotation.java": "{ def value: String}"}


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".tagdoc.yml"
    config_file.write_text(
        """
src_dir: "java/src"
docsrc_dir: "build/docsrc"
filenames:
  - Ignore.java
  - tags/Slow.java
  - Ignore.java
patches:
  Ignore.java: "{ }"
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.src_dir == tmp_path.resolve() / "java" / "src"
    assert config.docsrc_dir == tmp_path.resolve() / "build" / "docsrc"
    assert config.filenames == ("Ignore.java", "tags/Slow.java")
    assert dict(config.patches) == {"Ignore.java": "{ }"}
    assert config.source_suffix == ".java"
    assert config.target_suffix == ".scala"


def test_load_config_accepts_absolute_directories(tmp_path: Path) -> None:
    out_dir = tmp_path / "elsewhere"
    (tmp_path / ".tagdoc.yml").write_text(f"docsrc_dir: {out_dir}\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.docsrc_dir == out_dir


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".tagdoc.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="mapping"):
        load_config(tmp_path)


def test_load_config_rejects_bad_filenames(tmp_path: Path) -> None:
    (tmp_path / ".tagdoc.yml").write_text("filenames: Ignore.java\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="filenames"):
        load_config(tmp_path)


def test_load_config_reports_yaml_errors(tmp_path: Path) -> None:
    (tmp_path / ".tagdoc.yml").write_text("src_dir: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Failed to parse"):
        load_config(tmp_path)


def test_config_paths_mirror_source_layout(tmp_path: Path) -> None:
    config = TagDocConfig.defaults(tmp_path)

    assert config.class_name("tags/Slow.java") == "Slow"
    assert config.class_name("Ignore.java") == "Ignore"
    assert config.source_path("tags/Slow.java") == config.src_dir / "tags" / "Slow.java"
    assert config.output_path("tags/Slow.java") == config.docsrc_dir / "tags" / "Slow.scala"


def test_config_is_immutable(tmp_path: Path) -> None:
    config = TagDocConfig.defaults(tmp_path)

    with pytest.raises(AttributeError):
        config.src_dir = tmp_path  # type: ignore[misc]
    with pytest.raises(TypeError):
        config.patches["Ignore.java"] = "{}"  # type: ignore[index]
