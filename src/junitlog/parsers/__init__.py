"""
junitlog.parsers - Building the suite tree from JUnit XML.
"""

from junitlog.parsers.classifier import RiskyRule, classify_case, is_risky
from junitlog.parsers.tree_builder import build_suite, build_tree, find_root_suite

__all__ = [
    "RiskyRule",
    "build_suite",
    "build_tree",
    "classify_case",
    "find_root_suite",
    "is_risky",
]
