"""
junitlog.commands.messages - Report messages of non-passing tests.
"""

from __future__ import annotations

import argparse
from typing import Callable, Dict, List

from junitlog.config import resolve_config
from junitlog.reader import Reader

NOUNS = {
    "errors": ("error", "errors"),
    "failures": ("failure", "failures"),
    "warnings": ("warning", "warnings"),
    "risky": ("risky test", "risky tests"),
    "skipped": ("skipped test", "skipped tests"),
}

# Report order of the sections when showing everything
SECTIONS: Dict[str, Callable[[Reader], List[str]]] = {
    "errors": Reader.get_errors,
    "failures": Reader.get_failures,
    "warnings": Reader.get_warnings,
    "risky": Reader.get_risky,
    "skipped": Reader.get_skipped,
}


def render_section(kind: str, messages: List[str]) -> str:
    """Render one numbered section, e.g. "There was 1 failure:"."""
    singular, plural = NOUNS[kind]

    count = len(messages)
    if count == 1:
        header = f"There was 1 {singular}:"
    else:
        header = f"There were {count} {plural}:"

    blocks = [f"{number}) {message}" for number, message in enumerate(messages, start=1)]
    return "\n\n".join([header, *blocks])


def run(args: argparse.Namespace) -> int:
    """Run the messages command."""
    config = resolve_config(args.config)
    reader = Reader(args.log, config)

    kinds = list(SECTIONS) if args.kind == "all" else [args.kind]

    sections = []
    for kind in kinds:
        messages = SECTIONS[kind](reader)
        if messages:
            sections.append(render_section(kind, messages))

    if sections:
        print("\n\n".join(sections))
    elif not args.quiet:
        print("No messages.")

    return 0
