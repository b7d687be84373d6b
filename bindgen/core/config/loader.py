"""
Configuration loader — reads bindgen.yml into a ProjectConfig.

The file is looked up from the current directory upwards, so
``bindgen get`` works from anywhere inside a project.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from bindgen.core.models.project import ProjectConfig

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILE = "bindgen.yml"


class ConfigError(Exception):
    """Raised when project configuration is invalid or missing."""


def find_project_file(start_dir: Path | None = None) -> Path | None:
    """Search for bindgen.yml starting from the given directory, walking up.

    Returns:
        Path to bindgen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / PROJECT_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_project(path: Path | None = None) -> ProjectConfig:
    """Load and validate project configuration.

    Args:
        path: Explicit path to bindgen.yml. If None, searches upward.

    Raises:
        ConfigError: If the file is missing or invalid.
    """
    if path is None:
        path = find_project_file()

    if path is None:
        raise ConfigError(
            f"No {PROJECT_CONFIG_FILE} found. "
            "Create one or pass --provider/--module on the command line."
        )

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading project config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = ProjectConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid project configuration: {e}") from e

    logger.info(
        "Loaded %s: %d provider(s), %d module(s), language=%s",
        path.name,
        len(config.providers),
        len(config.modules),
        config.language.value,
    )
    return config


def project_root(config_path: Path) -> Path:
    """Directory that relative output paths are resolved against."""
    return config_path.parent.resolve()
