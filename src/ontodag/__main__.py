"""Entry point for running the ontodag CLI directly.

Usage:
    python -m ontodag
"""

import sys

from ontodag.cli import main

if __name__ == "__main__":
    sys.exit(main())
