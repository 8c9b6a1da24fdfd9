"""Tree builder - turns a parsed JUnit document into a TestSuite tree.

Suites and cases are built depth-first. Each suite keeps its child suites
keyed by name, its own cases, and the interleaved document order of both.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from types import MappingProxyType
from typing import Union

from junitlog.models import AnyTestCase, TestSuite
from junitlog.parsers.attributes import get_float, get_int, get_str
from junitlog.parsers.classifier import DEFAULT_RISKY_RULE, RiskyRule, classify_case

logger = logging.getLogger(__name__)

SUITE_TAG = "testsuite"
SUITES_TAG = "testsuites"
CASE_TAG = "testcase"


def find_root_suite(root: ET.Element) -> ET.Element:
    """Select the element read as the root suite.

    A <testsuites> wrapper is transparent over a single child suite. A
    wrapper holding no suite, or several, is read as the root suite itself.

    Args:
        root: Document root element.

    Returns:
        The element to build the root TestSuite from.
    """
    if root.tag == SUITE_TAG:
        return root

    if root.tag == SUITES_TAG:
        suites = root.findall(SUITE_TAG)
        if len(suites) == 1:
            return suites[0]
        return root

    logger.warning("Unexpected root element <%s>, reading it as a test suite", root.tag)
    return root


def build_suite(element: ET.Element, rule: RiskyRule = DEFAULT_RISKY_RULE) -> TestSuite:
    """Build a TestSuite from a suite element, recursing into child suites.

    Args:
        element: A <testsuite> (or root wrapper) element.
        rule: Risky detection conventions passed to the case classifier.

    Returns:
        The TestSuite for this element and its subtree.
    """
    suites: dict[str, TestSuite] = {}
    cases: list[AnyTestCase] = []
    children: list[Union[TestSuite, AnyTestCase]] = []

    for child in element:
        if child.tag == SUITE_TAG:
            suite = build_suite(child, rule)
            if suite.name in suites:
                logger.debug("Duplicate suite name %r, last one wins", suite.name)
            suites[suite.name] = suite
            children.append(suite)
        elif child.tag == CASE_TAG:
            case = classify_case(child, rule)
            cases.append(case)
            children.append(case)

    return TestSuite(
        name=get_str(element, "name"),
        file=get_str(element, "file"),
        tests=get_int(element, "tests"),
        assertions=get_int(element, "assertions"),
        failures=get_int(element, "failures"),
        errors=get_int(element, "errors"),
        time=get_float(element, "time"),
        suites=MappingProxyType(suites),
        cases=tuple(cases),
        children=tuple(children),
    )


def build_tree(root: ET.Element, rule: RiskyRule = DEFAULT_RISKY_RULE) -> TestSuite:
    """Build the root TestSuite of a parsed JUnit document.

    Args:
        root: Document root element.
        rule: Risky detection conventions.

    Returns:
        The root TestSuite.
    """
    return build_suite(find_root_suite(root), rule)
