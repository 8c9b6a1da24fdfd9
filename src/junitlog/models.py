"""
junitlog.models - Suite and case data models.

Provides frozen dataclasses for the suite tree of a JUnit log and the
closed family of test case variants, one per outcome.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import ClassVar, Iterator, Mapping, Optional, Tuple, Union


class Outcome(Enum):
    """Outcome of a single test case.

    The value of each member is its feedback character.
    """

    PASSED = "."
    FAILURE = "F"
    ERROR = "E"
    WARNING = "W"
    RISKY = "R"
    SKIPPED = "S"

    @property
    def symbol(self) -> str:
        """Character used for this outcome in the feedback string."""
        return self.value


@dataclass(frozen=True)
class TestCase:
    """
    Payload shared by every test case variant.

    Attributes:
        name: Test method/function name
        classname: Fully qualified test class or group identifier
        file: Source file of the test, empty if unknown
        line: Line of the test in `file`, 0 if unknown
        assertions: Number of assertions performed
        time: Duration in seconds
    """

    __test__ = False

    outcome: ClassVar[Outcome] = Outcome.PASSED

    name: str = ""
    classname: str = ""
    file: str = ""
    line: int = 0
    assertions: int = 0
    time: float = 0.0

    @property
    def message_text(self) -> Optional[str]:
        """Text carried by the outcome marker, None for passed cases."""
        return None

    @property
    def qualified_name(self) -> str:
        return f"{self.classname}::{self.name}"


@dataclass(frozen=True)
class PassedTestCase(TestCase):
    """A case without any outcome marker."""

    outcome: ClassVar[Outcome] = Outcome.PASSED


@dataclass(frozen=True)
class FailureTestCase(TestCase):
    """A case with a <failure> marker."""

    outcome: ClassVar[Outcome] = Outcome.FAILURE

    type: str = ""
    text: str = ""

    @property
    def message_text(self) -> Optional[str]:
        return self.text


@dataclass(frozen=True)
class ErrorTestCase(TestCase):
    """A case with an <error> marker."""

    outcome: ClassVar[Outcome] = Outcome.ERROR

    type: str = ""
    text: str = ""

    @property
    def message_text(self) -> Optional[str]:
        return self.text


@dataclass(frozen=True)
class WarningTestCase(TestCase):
    """A case with a <warning> marker that is not risky."""

    outcome: ClassVar[Outcome] = Outcome.WARNING

    text: str = ""

    @property
    def message_text(self) -> Optional[str]:
        return self.text


@dataclass(frozen=True)
class RiskyTestCase(TestCase):
    """A case that completed without performing any assertions."""

    outcome: ClassVar[Outcome] = Outcome.RISKY

    text: str = ""

    @property
    def message_text(self) -> Optional[str]:
        return self.text


@dataclass(frozen=True)
class SkippedTestCase(TestCase):
    """A case with a <skipped> marker. The marker may carry no text."""

    outcome: ClassVar[Outcome] = Outcome.SKIPPED

    text: Optional[str] = None

    @property
    def message_text(self) -> Optional[str]:
        return self.text


AnyTestCase = Union[
    PassedTestCase,
    FailureTestCase,
    ErrorTestCase,
    WarningTestCase,
    RiskyTestCase,
    SkippedTestCase,
]


@dataclass(frozen=True)
class TestSuite:
    """
    A (possibly nested) group of test cases.

    Counters are taken verbatim from the suite element; they are not
    recomputed from the children.

    Attributes:
        name: Suite name, may be empty
        file: Source file of the suite, may be empty
        tests: Number of tests reported by the producer
        assertions: Number of assertions reported by the producer
        failures: Number of failures reported by the producer
        errors: Number of errors reported by the producer
        time: Duration in seconds
        suites: Child suites keyed by name, in document order (read-only;
            left out of hashing)
        cases: Cases directly inside this suite, in document order
        children: Child suites and cases interleaved in document order
    """

    __test__ = False

    name: str = ""
    file: str = ""
    tests: int = 0
    assertions: int = 0
    failures: int = 0
    errors: int = 0
    time: float = 0.0
    suites: Mapping[str, "TestSuite"] = field(default_factory=lambda: MappingProxyType({}), hash=False)
    cases: Tuple[AnyTestCase, ...] = ()
    children: Tuple[Union["TestSuite", AnyTestCase], ...] = field(default=(), repr=False)

    def iter_cases(self) -> Iterator[AnyTestCase]:
        """Yield every case of this subtree, depth-first in document order."""
        for child in self.children:
            if isinstance(child, TestSuite):
                yield from child.iter_cases()
            else:
                yield child

    def iter_suites(self) -> Iterator[TestSuite]:
        """Yield this suite and every nested suite, depth-first in document order."""
        yield self
        for child in self.children:
            if isinstance(child, TestSuite):
                yield from child.iter_suites()
