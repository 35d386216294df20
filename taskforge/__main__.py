"""Entry point for taskforge when run as a module.

This allows the package to be run with: python -m taskforge
"""

import sys

from taskforge.cli import main

if __name__ == "__main__":
    sys.exit(main())
