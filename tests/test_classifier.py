"""Tests for the case classifier."""

import xml.etree.ElementTree as ET

import pytest

from junitlog.models import (
    ErrorTestCase,
    FailureTestCase,
    Outcome,
    PassedTestCase,
    RiskyTestCase,
    SkippedTestCase,
    WarningTestCase,
)
from junitlog.parsers.classifier import RiskyRule, classify_case, is_risky


def case(xml: str):
    return classify_case(ET.fromstring(xml))


class TestClassifyCaseAttributes:
    """Attribute reading for <testcase> elements."""

    def test_reads_all_attributes(self):
        result = case(
            '<testcase name="testTruth" class="Acme\\FooTest" file="./FooTest.php"'
            ' line="21" assertions="1" time="1.234567"/>'
        )

        assert result == PassedTestCase(
            name="testTruth",
            classname="Acme\\FooTest",
            file="./FooTest.php",
            line=21,
            assertions=1,
            time=1.234567,
        )

    def test_missing_attributes_default(self):
        result = case("<testcase/>")

        assert result.name == ""
        assert result.classname == ""
        assert result.file == ""
        assert result.line == 0
        assert result.assertions == 0
        assert result.time == 0.0

    def test_classname_fallback(self):
        """pytest and surefire write classname instead of class."""
        result = case('<testcase name="test_add" classname="tests.test_math"/>')

        assert result.classname == "tests.test_math"

    def test_class_wins_over_classname(self):
        result = case('<testcase name="t" class="Acme\\FooTest" classname="Acme.FooTest"/>')

        assert result.classname == "Acme\\FooTest"

    def test_invalid_numbers_default(self):
        result = case('<testcase name="t" line="abc" assertions="-3" time="slow"/>')

        assert result.line == 0
        assert result.assertions == 0
        assert result.time == 0.0


class TestClassifyCaseVariants:
    """Variant selection from marker elements."""

    def test_passed(self):
        result = case('<testcase name="t"/>')

        assert isinstance(result, PassedTestCase)
        assert result.outcome is Outcome.PASSED

    def test_failure(self):
        result = case(
            '<testcase name="t"><failure type="AssertionError">expected 1</failure></testcase>'
        )

        assert isinstance(result, FailureTestCase)
        assert result.type == "AssertionError"
        assert result.text == "expected 1"

    def test_error(self):
        result = case('<testcase name="t"><error type="RuntimeException">boom</error></testcase>')

        assert isinstance(result, ErrorTestCase)
        assert result.type == "RuntimeException"
        assert result.text == "boom"

    def test_missing_type_uses_generic_label(self):
        failure = case('<testcase name="t"><failure>x</failure></testcase>')
        error = case('<testcase name="t"><error>x</error></testcase>')

        assert failure.type == "Failure"
        assert error.type == "Error"

    def test_warning(self):
        result = case('<testcase name="t"><warning>MyWarning</warning></testcase>')

        assert isinstance(result, WarningTestCase)
        assert result.text == "MyWarning"

    def test_skipped_without_text(self):
        result = case('<testcase name="t"><skipped/></testcase>')

        assert isinstance(result, SkippedTestCase)
        assert result.text is None

    def test_skipped_with_text(self):
        result = case('<testcase name="t"><skipped>Not ready</skipped></testcase>')

        assert result.text == "Not ready"

    def test_marker_without_text(self):
        result = case('<testcase name="t"><failure type="E"/></testcase>')

        assert result.text == ""

    def test_text_is_verbatim(self):
        """Embedded newlines and surrounding whitespace are kept."""
        result = case(
            '<testcase name="t"><failure type="E">\n  first\n--- Expected\n+++ Actual\n</failure></testcase>'
        )

        assert result.text == "\n  first\n--- Expected\n+++ Actual\n"

    def test_unrelated_children_are_ignored(self):
        result = case(
            '<testcase name="t"><system-out>noise</system-out><system-err>more</system-err></testcase>'
        )

        assert isinstance(result, PassedTestCase)

    @pytest.mark.parametrize(
        "markers, expected",
        [
            ("<skipped/><warning>w</warning><failure>f</failure><error>e</error>", ErrorTestCase),
            ("<skipped/><warning>w</warning><failure>f</failure>", FailureTestCase),
            ("<skipped/><warning>w</warning>", WarningTestCase),
            (
                "<skipped/><warning>This test did not perform any assertions</warning>",
                RiskyTestCase,
            ),
            ("<skipped/>", SkippedTestCase),
        ],
    )
    def test_precedence(self, markers, expected):
        """error > failure > warning > risky > skipped > passed."""
        result = case(f'<testcase name="t">{markers}</testcase>')

        assert type(result) is expected


class TestRiskyClassification:
    """Risky detection during classification."""

    def test_warning_with_no_assertions_message(self):
        result = case(
            '<testcase name="testRisky" assertions="0">'
            "<warning>This test did not perform any assertions</warning></testcase>"
        )

        assert isinstance(result, RiskyTestCase)
        assert result.text == "This test did not perform any assertions"

    def test_dedicated_risky_type(self):
        result = case(
            '<testcase name="t"><error type="PHPUnit\\Framework\\RiskyTestError">'
            "Test code did not close its own output buffers</error></testcase>"
        )

        assert isinstance(result, RiskyTestCase)

    def test_error_with_no_assertions_text_stays_error(self):
        """Only warnings are inspected for the no-assertions message."""
        result = case(
            '<testcase name="t"><error type="RuntimeException">'
            "This test did not perform any assertions</error></testcase>"
        )

        assert isinstance(result, ErrorTestCase)

    def test_custom_rule(self):
        rule = RiskyRule(messages=("No assertions were made",), types=())
        element = ET.fromstring(
            '<testcase name="t"><warning>No assertions were made</warning></testcase>'
        )

        assert isinstance(classify_case(element, rule), RiskyTestCase)
        assert isinstance(classify_case(element), WarningTestCase)


class TestIsRisky:
    """Tests for the pure is_risky rule."""

    def test_message_prefix(self):
        assert is_risky("warning", "", "This test did not perform any assertions") is True

    def test_message_on_later_line(self):
        """Producers may prefix the message with the test name."""
        text = "Acme\\FooTest::testRisky\nThis test did not perform any assertions\n\nFoo.php:23"

        assert is_risky("warning", "", text) is True

    def test_leading_whitespace_is_ignored(self):
        assert is_risky("warning", "", "\n    This test did not perform any assertions\n") is True

    def test_ordinary_warning(self):
        assert is_risky("warning", "", "MyWarning") is False

    def test_message_must_start_the_line(self):
        assert is_risky("warning", "", "Note: This test did not perform any assertions") is False

    def test_empty_text(self):
        assert is_risky("warning", "", "") is False

    def test_type_match_for_any_tag(self):
        assert is_risky("error", "PHPUnit\\Framework\\RiskyTestError", "") is True
        assert is_risky("failure", "PHPUnit\\Framework\\RiskyTest", "whatever") is True

    def test_failure_message_is_not_inspected(self):
        assert is_risky("failure", "", "This test did not perform any assertions") is False


class TestRiskyRuleFromConfig:
    """Tests for RiskyRule.from_config()."""

    def test_none_gives_defaults(self):
        assert RiskyRule.from_config(None) == RiskyRule()

    def test_reads_risky_section(self):
        rule = RiskyRule.from_config(
            {"risky": {"messages": ["no asserts"], "types": ["Risky"]}}
        )

        assert rule.messages == ("no asserts",)
        assert rule.types == ("Risky",)

    def test_missing_keys_keep_defaults(self):
        rule = RiskyRule.from_config({"risky": {"types": []}})

        assert rule.messages == RiskyRule().messages
        assert rule.types == ()
