"""Centralized configuration for PrattCalc.

This module defines:
- Input validation limits (length, nesting depth)
- Evaluation policy (strict or permissive handling of unbound symbols)
- Output formatting precision
- Sampling and ASCII plot dimensions
- REPL commands and prompt

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with PRATTCALC_)
"""

import os
import re

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("prattcalc")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("PRATTCALC_MAX_INPUT_LENGTH", "10000"))  # characters
MAX_EXPRESSION_DEPTH = int(
    os.getenv("PRATTCALC_MAX_EXPRESSION_DEPTH", "200")
)  # parser recursion depth

# Evaluation policy: unbound symbols evaluate to 0.0 unless strict
STRICT_SYMBOLS = os.getenv("PRATTCALC_STRICT_SYMBOLS", "false").lower() == "true"

# Output formatting
OUTPUT_PRECISION = int(
    os.getenv("PRATTCALC_OUTPUT_PRECISION", "12")
)  # significant digits

# Sampling and ASCII plot
SAMPLE_POINTS = int(os.getenv("PRATTCALC_SAMPLE_POINTS", "100"))
PLOT_ROWS = int(os.getenv("PRATTCALC_PLOT_ROWS", "20"))
PLOT_COLS = int(os.getenv("PRATTCALC_PLOT_COLS", "60"))

# REPL
REPL_PROMPT = ">>> "
QUIT_COMMANDS = {"q", "quit", "exit"}

VAR_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
LET_RE = re.compile(r"^let\s+([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.+)$")
