"""
junitlog.config - Configuration loading and defaults
"""

from junitlog.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG
from junitlog.config.loader import (
    find_config_file,
    load_config,
    merge_configs,
    parse_toml,
    parse_toml_document,
    resolve_config,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "find_config_file",
    "load_config",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
    "resolve_config",
]
