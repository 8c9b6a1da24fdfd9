"""
junitlog - Read JUnit XML test logs

Rebuilds the suite/case tree of a JUnit XML report, classifies every test
case by outcome, and exposes totals, report messages and a compact
feedback string for test orchestrators that merge results after a run.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("junitlog")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from junitlog.errors import (
    ConfigError,
    EmptyLogError,
    FilesystemError,
    JUnitLogError,
    MalformedLogError,
)
from junitlog.models import (
    AnyTestCase,
    ErrorTestCase,
    FailureTestCase,
    Outcome,
    PassedTestCase,
    RiskyTestCase,
    SkippedTestCase,
    TestCase,
    TestSuite,
    WarningTestCase,
)
from junitlog.reader import Reader, open_log

__all__ = [
    "__version__",
    "AnyTestCase",
    "ConfigError",
    "EmptyLogError",
    "ErrorTestCase",
    "FailureTestCase",
    "FilesystemError",
    "JUnitLogError",
    "MalformedLogError",
    "Outcome",
    "PassedTestCase",
    "Reader",
    "RiskyTestCase",
    "SkippedTestCase",
    "TestCase",
    "TestSuite",
    "WarningTestCase",
    "open_log",
]
