"""Case classifier - maps <testcase> elements to test case variants.

The variant is selected by the marker element found inside the case, with
precedence error > failure > warning > risky > skipped > passed.
Risky detection is a heuristic over the producer's conventions and lives in
the pure `is_risky` function, configured through a `RiskyRule`.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from junitlog.errors import ConfigError
from junitlog.models import (
    AnyTestCase,
    ErrorTestCase,
    FailureTestCase,
    PassedTestCase,
    RiskyTestCase,
    SkippedTestCase,
    WarningTestCase,
)
from junitlog.parsers.attributes import get_float, get_int, get_str

# Checked in this order; the first one present is the primary marker.
PRIMARY_MARKERS = ("error", "failure", "warning")
SKIPPED_MARKER = "skipped"

DEFAULT_RISKY_MESSAGES = ("This test did not perform any assertions",)
DEFAULT_RISKY_TYPES = (
    "PHPUnit\\Framework\\RiskyTestError",
    "PHPUnit\\Framework\\RiskyTest",
)


@dataclass(frozen=True)
class RiskyRule:
    """Conventions a producer uses to report risky tests.

    Attributes:
        messages: Message prefixes of a warning reporting a test without
            assertions.
        types: Marker `type` attributes dedicated to risky tests.
    """

    messages: tuple[str, ...] = DEFAULT_RISKY_MESSAGES
    types: tuple[str, ...] = DEFAULT_RISKY_TYPES

    @classmethod
    def from_config(cls, config: Optional[Mapping[str, Any]]) -> RiskyRule:
        """Build a rule from the `[risky]` section of a configuration mapping.

        Raises:
            ConfigError: If `risky` is not a table, or `messages`/`types`
                are not lists of strings.
        """
        if not config:
            return cls()
        section = config.get("risky", {})
        if not isinstance(section, Mapping):
            raise ConfigError(f"[risky] must be a table, got {type(section).__name__}")
        return cls(
            messages=_string_list(section, "messages", DEFAULT_RISKY_MESSAGES),
            types=_string_list(section, "types", DEFAULT_RISKY_TYPES),
        )


def _string_list(section: Mapping[str, Any], key: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = section.get(key, default)
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise ConfigError(f"risky.{key} must be a list of strings, got {type(value).__name__}")
    if not all(isinstance(item, str) for item in value):
        raise ConfigError(f"risky.{key} must contain only strings")
    return tuple(value)


DEFAULT_RISKY_RULE = RiskyRule()


def is_risky(tag: str, marker_type: str, text: str, rule: RiskyRule = DEFAULT_RISKY_RULE) -> bool:
    """Decide whether an outcome marker reports a risky test.

    Args:
        tag: Marker element tag (error, failure, warning).
        marker_type: The marker's `type` attribute, empty if absent.
        text: The marker's text content.
        rule: Producer conventions to apply.

    Returns:
        True if the marker carries a dedicated risky type, or if it is a
        warning whose text has a line starting with a risky message.
    """
    if marker_type and marker_type in rule.types:
        return True
    if tag != "warning" or not text:
        return False
    return any(
        line.lstrip().startswith(message)
        for line in text.splitlines()
        for message in rule.messages
        if message
    )


def default_type(tag: str) -> str:
    """Generic type label for a marker without a `type` attribute."""
    return tag.capitalize()


def classify_case(element: ET.Element, rule: RiskyRule = DEFAULT_RISKY_RULE) -> AnyTestCase:
    """Build the test case variant for a <testcase> element.

    Args:
        element: The <testcase> element.
        rule: Risky detection conventions.

    Returns:
        The matching TestCase variant.
    """
    common = dict(
        name=get_str(element, "name"),
        classname=get_str(element, ("class", "classname")),
        file=get_str(element, "file"),
        line=get_int(element, "line"),
        assertions=get_int(element, "assertions"),
        time=get_float(element, "time"),
    )

    for tag in PRIMARY_MARKERS:
        marker = element.find(tag)
        if marker is None:
            continue

        text = marker.text or ""
        marker_type = get_str(marker, "type")

        if is_risky(tag, marker_type, text, rule):
            return RiskyTestCase(text=text, **common)
        if tag == "error":
            return ErrorTestCase(type=marker_type or default_type(tag), text=text, **common)
        if tag == "failure":
            return FailureTestCase(type=marker_type or default_type(tag), text=text, **common)
        return WarningTestCase(text=text, **common)

    skipped = element.find(SKIPPED_MARKER)
    if skipped is not None:
        return SkippedTestCase(text=skipped.text or None, **common)

    return PassedTestCase(**common)
