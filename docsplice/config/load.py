from __future__ import annotations

from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import ProcessorConfig
from ..errors import ConfigError

# Single source of truth for the configuration file name.
CONFIG_FILE = "docsplice.yaml"

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> dict:
    """Reads a YAML file and returns a mapping."""
    if not path.is_file():
        return {}
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def find_config(start: Path) -> Optional[Path]:
    """docsplice.yaml in `start` (or next to it, if `start` is a file)."""
    base = start if start.is_dir() else start.parent
    candidate = base / CONFIG_FILE
    return candidate if candidate.is_file() else None


def load_config(path: Optional[Path] = None) -> ProcessorConfig:
    """
    Load processor configuration.

    Args:
        path: YAML file; None or a missing file yields defaults

    Returns:
        Parsed configuration

    Raises:
        ConfigError: On malformed YAML, non-mapping content or unknown keys
    """
    if path is None:
        return ProcessorConfig()
    return ProcessorConfig.from_dict(_read_yaml_map(path))


__all__ = ["CONFIG_FILE", "find_config", "load_config"]
