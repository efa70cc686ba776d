"""Entry point for running courseindex directly.

Usage:
    python -m courseindex
"""

import sys

from courseindex.cli import main

if __name__ == "__main__":
    sys.exit(main())
