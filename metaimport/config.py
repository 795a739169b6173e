"""Configuration loading for metaimport (.metaimport.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import MetaImportError

CONFIG_FILENAME = ".metaimport.yml"
DEFAULT_OUTPUT_DIR = "html"
DEFAULT_DOCS_URL = "https://godoc.org"


class ConfigError(MetaImportError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class MetaImportConfig:
    """Represents the settings defined in .metaimport.yml."""

    root: Path
    output_dir: Optional[Path] = None
    branch: Optional[str] = None
    godoc: Optional[bool] = None
    redirect: Optional[bool] = None
    docs_url: str = DEFAULT_DOCS_URL
    templates_dir: Optional[Path] = None


def load_config(config_path: Path) -> MetaImportConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return MetaImportConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    output_dir_str = _as_str(data.get("output_dir"))
    templates_dir_str = _as_str(data.get("templates_dir"))
    docs_url = _as_str(data.get("docs_url")) or DEFAULT_DOCS_URL

    return MetaImportConfig(
        root=root,
        output_dir=root / output_dir_str if output_dir_str else None,
        branch=_as_str(data.get("branch")),
        godoc=_as_bool(data.get("godoc")),
        redirect=_as_bool(data.get("redirect")),
        docs_url=docs_url.rstrip("/"),
        templates_dir=root / templates_dir_str if templates_dir_str else None,
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
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


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None
