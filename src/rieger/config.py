"""Configuration: default paths and config loading (global + project overrides)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

# Directory holding rieger settings, under the home directory or a project
RIEGER_DIR = ".rieger"
CONFIG_FILENAME = "config.json"


def _global_config_dir() -> Path:
    return Path.home() / RIEGER_DIR


def global_config_path() -> Path:
    """Path to global config file (~/.rieger/config.json)."""
    return _global_config_dir() / CONFIG_FILENAME


def project_config_path(project_root: Path) -> Path:
    """Path to project-local config (<project>/.rieger/config.json)."""
    return project_root / RIEGER_DIR / CONFIG_FILENAME


def default_config() -> dict[str, Any]:
    """Default configuration."""
    return {
        "logging": {
            "level": "WARNING",
            "file": None,
        },
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load a JSON object from path; return None if file missing or invalid."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError, UnicodeDecodeError):
        return None
    return data if isinstance(data, dict) else None


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config(project_root: Path | None = None) -> dict[str, Any]:
    """
    Load merged configuration: defaults + global (~/.rieger/config.json) + project overrides.

    Project overrides apply when project_root is set and .rieger/config.json exists there.
    """
    merged = default_config()
    global_data = _load_json(global_config_path())
    if global_data is not None:
        _deep_merge(merged, global_data)
    if project_root is not None:
        project_data = _load_json(project_config_path(Path(project_root).resolve()))
        if project_data is not None:
            _deep_merge(merged, project_data)
    return merged
