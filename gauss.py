#!/usr/bin/env python3
"""
Gauss - exact linear equation solver

Main entry point for the Gauss solver. This file serves as a thin wrapper
that delegates all functionality to the gauss_pkg package.

Usage:
    python gauss.py "2x + 3y = 1" "x - y = 2"   # Solve a system
    python gauss.py -e "x + y = 3, x - y = 1"    # Equations in one string
    python gauss.py                             # Interactive session
    python gauss.py --help                      # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Gauss.

    Delegates to the gauss_pkg.cli module, which handles argument parsing,
    solving and output formatting.

    Returns:
        Exit code.
    """
    from gauss_pkg.cli import main_entry

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
