"""
junitlog.commands.summary - Totals and feedback of a JUnit log.
"""

from __future__ import annotations

import argparse
import json

from junitlog.config import resolve_config
from junitlog.reader import Reader


def render_text(reader: Reader) -> str:
    """Render the totals of a log as aligned text lines."""
    data = reader.summary()
    totals = data["totals"]
    lines = [
        f"Log:        {data['path']}",
        f"Suite:      {data['name'] or '(unnamed)'}",
        f"Tests:      {totals['tests']}",
        f"Assertions: {totals['assertions']}",
        f"Errors:     {totals['errors']}",
        f"Failures:   {totals['failures']}",
        f"Warnings:   {totals['warnings']}",
        f"Risky:      {totals['risky']}",
        f"Skipped:    {totals['skipped']}",
        f"Time:       {totals['time']:.6f}s",
        "",
        data["feedback"],
    ]
    return "\n".join(lines)


def run(args: argparse.Namespace) -> int:
    """Run the summary command."""
    config = resolve_config(args.config)
    output_format = args.format or config["output"]["format"]

    reader = Reader(args.log, config)

    if output_format == "json":
        print(json.dumps(reader.summary(), indent=2))
    else:
        print(render_text(reader))

    if args.remove:
        reader.remove_log()

    return 0
