"""
junitlog.errors - Error taxonomy for reading JUnit logs.

Missing files are reported with the builtin FileNotFoundError; everything
else raised by this package derives from JUnitLogError.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class JUnitLogError(Exception):
    """Base class for junitlog errors.

    Attributes:
        path: The log or config file the error refers to, if any.
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None) -> None:
        super().__init__(message)
        self.path = str(path) if path is not None else None


class EmptyLogError(JUnitLogError):
    """The log file exists but has zero bytes."""

    def __init__(self, path: Union[str, Path]) -> None:
        super().__init__(f"Log file is empty: {path}", path)


class MalformedLogError(JUnitLogError):
    """The log file is not well-formed XML."""

    def __init__(self, path: Union[str, Path], reason: str) -> None:
        super().__init__(f"Log file is not well-formed XML: {path} ({reason})", path)
        self.reason = reason


class FilesystemError(JUnitLogError):
    """Deleting the log file failed."""


class ConfigError(JUnitLogError):
    """A configuration file could not be parsed."""
