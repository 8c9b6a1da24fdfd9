"""Pytest fixtures for junitlog tests."""

from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"
RESULTS_DIR = FIXTURES_DIR / "results"


@pytest.fixture
def results_dir() -> Path:
    """Directory holding the JUnit XML fixture files."""
    return RESULTS_DIR


@pytest.fixture
def mixed_path() -> Path:
    return RESULTS_DIR / "mixed-results.xml"


@pytest.fixture
def mixed(mixed_path):
    """Reader over the mixed-results fixture (19 tests, three child suites)."""
    from junitlog.reader import Reader

    return Reader(mixed_path)


@pytest.fixture
def single():
    """Reader over a single suite with one failure."""
    from junitlog.reader import Reader

    return Reader(RESULTS_DIR / "single-wfailure.xml")


@pytest.fixture
def empty_suite():
    """Reader over a log whose only suite has no attributes and no children."""
    from junitlog.reader import Reader

    return Reader(RESULTS_DIR / "empty-test-suite.xml")


@pytest.fixture
def write_log(tmp_path):
    """Write XML content to a temporary log file and return its path."""

    def _write(content: str, name: str = "junit.xml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
