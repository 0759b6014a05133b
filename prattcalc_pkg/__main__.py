"""Main entry point for running prattcalc_pkg as a module.

This allows running PrattCalc with:
    python -m prattcalc_pkg
    python -m prattcalc_pkg --health-check
    python -m prattcalc_pkg -e "2+3*4"

This is equivalent to running:
    python -m prattcalc_pkg.cli
    python prattcalc.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
