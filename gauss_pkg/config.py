"""Centralized configuration for Gauss.

This module defines:
- Input validation limits (length, number of equations)
- Default logging level and output format
- Whether solutions are cross-checked with SymPy by default
- The separators accepted between equations

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with GAUSS_)
"""

import importlib.metadata
import os
import re

try:
    VERSION = importlib.metadata.version("gauss")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("GAUSS_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_EQUATIONS = int(os.getenv("GAUSS_MAX_EQUATIONS", "1000"))  # per system

# Output and diagnostics
LOG_LEVEL = os.getenv("GAUSS_LOG_LEVEL", "WARNING").upper()
OUTPUT_FORMAT = os.getenv("GAUSS_OUTPUT_FORMAT", "human")  # "human", "json"
VERIFY_WITH_SYMPY = os.getenv("GAUSS_VERIFY", "false").lower() == "true"

# Separators accepted between equations in a single string
EQUATION_SEPARATOR_RE = re.compile(r"[,;\n]")
