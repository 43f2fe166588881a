"""Main entry point for running gauss_pkg as a module.

This allows running Gauss with:
    python -m gauss_pkg "x + y = 3" "x - y = 1"
    python -m gauss_pkg -e "x + y = 3, x - y = 1" --format json
    python -m gauss_pkg            # interactive session

This is equivalent to running:
    python -m gauss_pkg.cli
    python gauss.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
