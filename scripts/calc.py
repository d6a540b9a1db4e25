#!/usr/bin/env python3
"""Run the polynomial stack calculator on stdin.

Usage:
    # Read commands and literals from a file
    python scripts/calc.py < input.txt

    # Verify the canonical form of every stacked polynomial after each line
    python scripts/calc.py --check-invariants < input.txt

    # Debug logging of every executed command (on stderr)
    python scripts/calc.py --log-level DEBUG < input.txt
"""

import argparse
import sys

from polycalc.calc.driver import Calculator, read_lines
from polycalc.config import Config
from polycalc.log_config import setup_logging


def main():
    parser = argparse.ArgumentParser(
        description="Stack calculator for sparse multivariate polynomials",
    )
    parser.add_argument("--check-invariants", action="store_true",
                        help="Check canonical form of the whole stack after each line")
    parser.add_argument("--log-level", type=str, default="WARNING",
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    parser.add_argument("--summary", action="store_true",
                        help="Print line and error counts to stderr at the end")
    parser.add_argument("--recursion-limit", type=int, default=Config.recursion_limit,
                        help="Interpreter frames available while handling one line")

    args = parser.parse_args()

    config = Config(
        check_invariants=args.check_invariants,
        log_level=args.log_level,
        recursion_limit=args.recursion_limit,
    )
    setup_logging(config.log_level)

    calc = Calculator(config=config, out=sys.stdout, err=sys.stderr)
    calc.run(read_lines(sys.stdin.buffer))

    if args.summary:
        print(f"[calc] lines={calc.line_number} errors={calc.num_errors} "
              f"stack={len(calc.stack)}", file=sys.stderr)


if __name__ == "__main__":
    main()
