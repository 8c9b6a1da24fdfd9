"""
junitlog.reader - Read a JUnit log file and query its results.

A Reader loads exactly one log file, builds its suite tree once, and
answers every query by traversing that tree in document order.
"""

from __future__ import annotations

import errno
import logging
import os
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from junitlog.errors import EmptyLogError, FilesystemError, MalformedLogError
from junitlog.formatting import encode_feedback, format_message
from junitlog.models import AnyTestCase, Outcome, TestSuite
from junitlog.parsers.classifier import RiskyRule
from junitlog.parsers.tree_builder import build_tree

logger = logging.getLogger(__name__)


class Reader:
    """Read-only view over one JUnit log file.

    Args:
        path: Path to the log file.
        config: Optional configuration mapping (see junitlog.config).

    Raises:
        FileNotFoundError: If `path` is not a regular file or cannot be read.
        EmptyLogError: If the file has zero bytes.
        MalformedLogError: If the content is not well-formed XML.
    """

    def __init__(self, path: Union[str, Path], config: Optional[Mapping[str, Any]] = None) -> None:
        self.path = Path(path)

        if not self.path.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(self.path))

        try:
            content = self.path.read_bytes()
        except PermissionError as e:
            raise FileNotFoundError(e.errno, e.strerror, str(self.path)) from e

        if not content:
            raise EmptyLogError(self.path)

        try:
            root = ET.fromstring(content)
        except ET.ParseError as e:
            raise MalformedLogError(self.path, str(e)) from e

        self._suite = build_tree(root, RiskyRule.from_config(config))
        logger.debug(
            "Read %s: %d suite(s), %d case(s)",
            self.path,
            sum(1 for _ in self._suite.iter_suites()),
            sum(1 for _ in self._suite.iter_cases()),
        )

    def __repr__(self) -> str:
        return f"Reader({str(self.path)!r})"

    def get_suite(self) -> TestSuite:
        """Return the root suite. Callers must treat it as read-only."""
        return self._suite

    # Totals pre-aggregated by the producer on the root suite

    def get_total_tests(self) -> int:
        return self._suite.tests

    def get_total_assertions(self) -> int:
        return self._suite.assertions

    def get_total_errors(self) -> int:
        return self._suite.errors

    def get_total_failures(self) -> int:
        return self._suite.failures

    def get_total_time(self) -> float:
        return self._suite.time

    # Totals counted over the cases

    def _cases(self, outcome: Outcome) -> List[AnyTestCase]:
        return [case for case in self._suite.iter_cases() if case.outcome is outcome]

    def get_total_warnings(self) -> int:
        return len(self._cases(Outcome.WARNING))

    def get_total_skipped(self) -> int:
        return len(self._cases(Outcome.SKIPPED))

    def get_total_risky(self) -> int:
        return len(self._cases(Outcome.RISKY))

    # Messages

    def _messages(self, outcome: Outcome) -> List[str]:
        return [format_message(case) for case in self._cases(outcome)]

    def get_failures(self) -> List[str]:
        return self._messages(Outcome.FAILURE)

    def get_errors(self) -> List[str]:
        return self._messages(Outcome.ERROR)

    def get_warnings(self) -> List[str]:
        return self._messages(Outcome.WARNING)

    def get_skipped(self) -> List[str]:
        return self._messages(Outcome.SKIPPED)

    def get_risky(self) -> List[str]:
        return self._messages(Outcome.RISKY)

    def get_feedback(self) -> str:
        """Return one feedback character per case, in document order."""
        return encode_feedback(self._suite.iter_cases())

    def summary(self) -> Dict[str, Any]:
        """Return totals, feedback and messages as plain data."""
        return {
            "path": str(self.path),
            "name": self._suite.name,
            "totals": {
                "tests": self.get_total_tests(),
                "assertions": self.get_total_assertions(),
                "errors": self.get_total_errors(),
                "failures": self.get_total_failures(),
                "warnings": self.get_total_warnings(),
                "skipped": self.get_total_skipped(),
                "risky": self.get_total_risky(),
                "time": self.get_total_time(),
            },
            "feedback": self.get_feedback(),
            "messages": {
                "errors": self.get_errors(),
                "failures": self.get_failures(),
                "warnings": self.get_warnings(),
                "risky": self.get_risky(),
                "skipped": self.get_skipped(),
            },
        }

    def remove_log(self) -> None:
        """Delete the backing log file.

        Raises:
            FilesystemError: If the file cannot be deleted, including when
                it was already removed.
        """
        try:
            self.path.unlink()
        except OSError as e:
            raise FilesystemError(f"Cannot remove log file {self.path}: {e}", self.path) from e
        logger.debug("Removed %s", self.path)


def open_log(path: Union[str, Path], config: Optional[Mapping[str, Any]] = None) -> Reader:
    """Open a JUnit log file. See Reader for the errors raised."""
    return Reader(path, config)
