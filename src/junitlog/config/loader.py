"""
junitlog.config.loader - Locate, parse and merge TOML configuration.

Configuration lives in a `.junitlog.toml` file or in the `[tool.junitlog]`
table of a `pyproject.toml`, found by walking up from a start directory.
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import tomlkit
from tomlkit.exceptions import TOMLKitError

from junitlog.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG
from junitlog.errors import ConfigError
from junitlog.parsers.classifier import RiskyRule

logger = logging.getLogger(__name__)

PYPROJECT_FILENAME = "pyproject.toml"


def parse_toml_document(content: str) -> tomlkit.TOMLDocument:
    """Parse TOML content into a tomlkit document (round-trip preserving)."""
    return tomlkit.parse(content)


def parse_toml(content: str) -> Dict[str, Any]:
    """Parse TOML content into plain Python dicts and lists."""
    return parse_toml_document(content).unwrap()


def _pyproject_section(path: Path) -> Optional[Dict[str, Any]]:
    try:
        data = parse_toml(path.read_text(encoding="utf-8"))
    except (OSError, TOMLKitError):
        return None
    section = data.get("tool", {}).get("junitlog")
    return section if isinstance(section, dict) else None


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file for a directory.

    Walks up from `start` (default: the current directory). In each
    directory a `.junitlog.toml` wins over a `pyproject.toml` with a
    `[tool.junitlog]` table.

    Args:
        start: Directory to start searching from.

    Returns:
        Path to the configuration file, or None if there is none.
    """
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        pyproject = directory / PYPROJECT_FILENAME
        if pyproject.is_file() and _pyproject_section(pyproject) is not None:
            return pyproject
    return None


def merge_configs(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Deep-merge `overrides` over `defaults`, returning a new dict.

    Nested tables are merged key by key; any other value in `overrides`
    replaces the default.
    """
    merged = copy.deepcopy(defaults)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_configs(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def load_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration merged over the defaults.

    Args:
        path: A `.junitlog.toml` or `pyproject.toml` file. When None, a copy
            of the defaults is returned.

    Returns:
        The merged configuration dictionary.

    Raises:
        ConfigError: If the file cannot be read, is not valid TOML, or has
            a malformed `[risky]` table.
    """
    if path is None:
        return copy.deepcopy(DEFAULT_CONFIG)

    path = Path(path)
    try:
        data = parse_toml(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", path) from e
    except TOMLKitError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}", path) from e

    if path.name == PYPROJECT_FILENAME:
        data = data.get("tool", {}).get("junitlog", {})

    merged = merge_configs(DEFAULT_CONFIG, data)
    try:
        RiskyRule.from_config(merged)
    except ConfigError as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}", path) from e

    logger.debug("Loaded configuration from %s", path)
    return merged


def resolve_config(explicit: Optional[Path] = None, start: Optional[Path] = None) -> Dict[str, Any]:
    """Load the configuration a command should use.

    Args:
        explicit: Configuration file given on the command line, if any.
        start: Directory to search from when no file is given.

    Returns:
        The merged configuration dictionary.
    """
    path = explicit if explicit is not None else find_config_file(start)
    return load_config(path)
