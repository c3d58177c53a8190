"""Configuration loading for tagdoc (.tagdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

import yaml

CONFIG_FILENAME = ".tagdoc.yml"

DEFAULT_SRC_DIR = "src/main/java/org/scalatest"
DEFAULT_DOCSRC_DIR = "target/docsrc/org/scalatest"

DEFAULT_FILENAMES: Tuple[str, ...] = (
    "DoNotDiscover.java",
    "Ignore.java",
    "Finders.java",
    "TagAnnotation.java",
    "WrapWith.java",
    "tags/ChromeBrowser.java",
    "tags/FirefoxBrowser.java",
    "tags/HtmlUnitBrowser.java",
    "tags/InternetExplorerBrowser.java",
    "tags/SafariBrowser.java",
    "tags/Slow.java",
    "tags/CPU.java",
    "tags/Disk.java",
    "tags/Network.java",
    "tags/Retryable.java",
)

# TagAnnotation's value() carries a default, so the accessor rewrite never sees it.
DEFAULT_PATCHES: Mapping[str, str] = MappingProxyType(
    {"TagAnnotation.java": "{ def value: String}"}
)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class TagDocConfig:
    """Settings for one transcoding run."""

    root: Path
    src_dir: Path
    docsrc_dir: Path
    filenames: Tuple[str, ...] = DEFAULT_FILENAMES
    source_suffix: str = ".java"
    target_suffix: str = ".scala"
    patches: Mapping[str, str] = field(default_factory=lambda: DEFAULT_PATCHES)

    @classmethod
    def defaults(cls, root: Path) -> "TagDocConfig":
        root = root.resolve()
        return cls(root=root, src_dir=root / DEFAULT_SRC_DIR, docsrc_dir=root / DEFAULT_DOCSRC_DIR)

    def source_path(self, filename: str) -> Path:
        return self.src_dir / filename

    def output_path(self, filename: str) -> Path:
        if filename.endswith(self.source_suffix):
            filename = filename[: -len(self.source_suffix)]
        return self.docsrc_dir / (filename + self.target_suffix)

    def class_name(self, filename: str) -> str:
        """Return the declared type name for ``filename`` (directory and suffix removed)."""
        name = filename.rsplit("/", 1)[-1]
        if name.endswith(self.source_suffix):
            name = name[: -len(self.source_suffix)]
        return name


def load_config(config_path: Path) -> TagDocConfig:
    """Load configuration from disk, falling back to defaults when no file exists."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent

    if not config_file.exists():
        return TagDocConfig.defaults(root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    src_dir = _as_path(root, data.get("src_dir"), "src_dir") or root / DEFAULT_SRC_DIR
    docsrc_dir = _as_path(root, data.get("docsrc_dir"), "docsrc_dir") or root / DEFAULT_DOCSRC_DIR

    filenames = DEFAULT_FILENAMES
    if data.get("filenames") is not None:
        filenames = _as_filenames(data.get("filenames"))

    patches: Mapping[str, str] = DEFAULT_PATCHES
    if data.get("patches") is not None:
        patches = MappingProxyType(_as_patches(data.get("patches")))

    return TagDocConfig(
        root=root,
        src_dir=src_dir,
        docsrc_dir=docsrc_dir,
        filenames=filenames,
        source_suffix=_as_suffix(data.get("source_suffix"), "source_suffix") or ".java",
        target_suffix=_as_suffix(data.get("target_suffix"), "target_suffix") or ".scala",
        patches=patches,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_path(root: Path, value: Any, key: str) -> Optional[Path]:
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string")
    path = Path(value).expanduser()
    return path if path.is_absolute() else root / path


def _as_suffix(value: Any, key: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str) or not value.startswith("."):
        raise ConfigError(f"{key} must be a string starting with '.'")
    return value


def _as_filenames(value: Any) -> Tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, list):
        raise ConfigError("filenames must be a list of relative paths")
    result = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ConfigError("filenames entries must be non-empty strings")
        if item.startswith("/"):
            raise ConfigError(f"filenames entries must be relative: {item}")
        if item not in result:
            result.append(item)
    return tuple(result)


def _as_patches(value: Any) -> Dict[str, str]:
    if not isinstance(value, dict):
        raise ConfigError("patches must map filenames to literal suffixes")
    patches: Dict[str, str] = {}
    for key, literal in value.items():
        if not isinstance(key, str) or not isinstance(literal, str):
            raise ConfigError("patches must map filenames to literal suffixes")
        patches[key] = literal
    return patches
