"""Allow running junitlog as a module: python -m junitlog."""

import sys

from junitlog.cli import main

if __name__ == "__main__":
    sys.exit(main())
