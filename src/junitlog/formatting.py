"""
junitlog.formatting - Message and feedback rendering.

Message strings are consumed by downstream reporting and must be
byte-exact: the qualified name, then the marker text, then the location,
each part omitted when unknown.
"""

from __future__ import annotations

from typing import Iterable

from junitlog.models import TestCase


def format_location(case: TestCase) -> str:
    """Return "file:line", or an empty string when either is unknown."""
    if case.file and case.line:
        return f"{case.file}:{case.line}"
    return ""


def format_message(case: TestCase) -> str:
    """Format the report message of a test case.

    Args:
        case: Any test case variant.

    Returns:
        "{class}::{name}", followed by a newline and the marker text when
        there is text, followed by a blank line and "{file}:{line}" when the
        location is known.
    """
    message = case.qualified_name

    text = case.message_text
    if text:
        message += "\n" + text

    location = format_location(case)
    if location:
        message += "\n\n" + location

    return message


def encode_feedback(cases: Iterable[TestCase]) -> str:
    """Encode cases as one feedback character each, preserving order."""
    return "".join(case.outcome.symbol for case in cases)
