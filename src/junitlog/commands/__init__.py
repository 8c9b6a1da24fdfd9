"""
junitlog.commands - CLI command implementations
"""

__all__ = [
    "messages",
    "summary",
]
