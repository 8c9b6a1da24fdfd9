"""
junitlog.config.defaults - Default configuration values.
"""

from junitlog.parsers.classifier import DEFAULT_RISKY_MESSAGES, DEFAULT_RISKY_TYPES

DEFAULT_CONFIG = {
    "risky": {
        "messages": list(DEFAULT_RISKY_MESSAGES),
        "types": list(DEFAULT_RISKY_TYPES),
    },
    "output": {
        "format": "text",
    },
}

CONFIG_FILENAME = ".junitlog.toml"
