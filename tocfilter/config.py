"""Configuration loading for tocfilter (.tocfilter.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .models import MAX_HEADING_LEVEL, MIN_HEADING_LEVEL, TocOptions

CONFIG_FILENAME = ".tocfilter.yml"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class OutputConfig:
    """How rendered documents are read and written."""

    encoding: str = "utf-8"


@dataclass
class TocFilterConfig:
    """Represents the settings defined in .tocfilter.yml."""

    root: Path
    toc: TocOptions = field(default_factory=TocOptions)
    output: OutputConfig = field(default_factory=OutputConfig)


def load_config(config_path: Path) -> TocFilterConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return TocFilterConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    defaults = TocOptions()
    toc_data = _as_dict(data.get("toc"))
    min_level = _clamp_level(_as_int(toc_data.get("min_level")), defaults.min_level)
    max_level = _clamp_level(_as_int(toc_data.get("max_level")), defaults.max_level)
    toc = TocOptions(
        min_level=min_level,
        max_level=max_level,
        chapter_numbers=_as_bool(toc_data.get("chapter_numbers")) or False,
        prefix=_as_str(toc_data.get("prefix")) or "",
        heading_ids=_as_bool(toc_data.get("heading_ids")) or False,
    )

    output_data = _as_dict(data.get("output"))
    output = OutputConfig()
    encoding = _as_str(output_data.get("encoding"))
    if encoding:
        output.encoding = encoding

    return TocFilterConfig(root=root, toc=toc, output=output)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.suffix not in {".yml", ".yaml"}:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _clamp_level(value: Optional[int], default: int) -> int:
    if value is None:
        return default
    return max(MIN_HEADING_LEVEL, min(MAX_HEADING_LEVEL, value))


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


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
