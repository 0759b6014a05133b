#!/usr/bin/env python3
"""
PrattCalc - Expression Calculator

Main entry point for the PrattCalc calculator application.
This file serves as a thin wrapper that delegates all functionality
to the prattcalc_pkg package.

Usage:
    python prattcalc.py                         # Interactive REPL
    python prattcalc.py -e "2+3*4"              # Evaluate expression
    python prattcalc.py -e "a+b" -b a=3 -b b=2  # Evaluate with bound symbols
    python prattcalc.py --help                  # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for PrattCalc.

    Delegates all functionality to the prattcalc_pkg.cli module,
    which handles argument parsing, expression evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from prattcalc_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import prattcalc_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
