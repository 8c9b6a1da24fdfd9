"""Logging setup for the junitlog command line.

The library modules only create module loggers; handlers are configured
here, once, by the CLI.
"""

from __future__ import annotations

import logging

_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.ERROR
    return logging.WARNING


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the root logger with the shared formatter and level."""
    root = logging.getLogger()
    root.setLevel(resolve_level(verbose, quiet))
    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)
