"""Line-oriented driver for the polynomial stack calculator.

Each input line is one of:

  (empty)            -- ignored
  # comment          -- ignored
  NAME [ARG]         -- a command, if the first character is an ASCII letter
  anything else      -- a polynomial literal, pushed on the stack

Lines are numbered from 1, counting every line.  Only "\\n" ends a line, a
stray "\\r" belongs to the line it appears in.  An invalid line prints
`ERROR <line> <message>` to the error stream and leaves the stack as it was.

Polynomials nest arbitrarily deep and every engine operation recurses once
or twice per level, so each line runs with the recursion limit raised to
Config.recursion_limit.  Input deeper than that is reported as TOO DEEP.

Usage:
    calc = Calculator(out=sys.stdout, err=sys.stderr)
    calc.run(sys.stdin)
    stack = calc.stack
"""

from __future__ import annotations

import io
import logging
import string
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterable, Iterator, Optional, TextIO

from ..config import Config
from ..core.poly import is_canonical
from .commands import execute_line
from .errors import CalcError, NestingTooDeep
from .parser import parse_poly
from .stack import PolyStack

logger = logging.getLogger(__name__)

_LETTERS = frozenset(string.ascii_letters)


class Calculator:
    """Stack calculator state: the stack, the line counter and the streams."""

    def __init__(
        self,
        config: Optional[Config] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ):
        """Initialize an empty calculator.

        Args:
            config: Calculator settings (defaults to Config()).
            out:    Stream for command output (defaults to sys.stdout).
            err:    Stream for error reports (defaults to sys.stderr).
        """
        self.config = config if config is not None else Config()
        self.out = out if out is not None else sys.stdout
        self.err = err if err is not None else sys.stderr
        self.stack = PolyStack()
        self.line_number = 0
        self.num_errors = 0

    def handle_line(self, line: str) -> None:
        """Process one input line (with or without its trailing newline)."""
        self.line_number += 1
        if line.endswith("\n"):
            line = line[:-1]
        if not line or line.startswith(self.config.comment_prefix):
            return

        with recursion_limit(self.config.recursion_limit):
            try:
                self._execute(line)
            except RecursionError:
                logger.warning("line %d nests deeper than recursion_limit=%d allows",
                               self.line_number, self.config.recursion_limit)
                self._reject(line, NestingTooDeep())
            except CalcError as e:
                self._reject(line, e)

            if self.config.check_invariants:
                self._check_stack()

    def _execute(self, line: str) -> None:
        if line[0] in _LETTERS:
            execute_line(line, self.stack, self.out, self.config)
        else:
            self.stack.push(parse_poly(line, self.config))

    def _reject(self, line: str, error: CalcError) -> None:
        self.num_errors += 1
        logger.debug("line %d rejected: %r", self.line_number, line)
        print(f"ERROR {self.line_number} {error.message}", file=self.err)

    def run(self, lines: Iterable[str]) -> PolyStack:
        """Process every line and return the final stack."""
        for line in lines:
            self.handle_line(line)
        logger.info(
            "processed %d lines, %d errors, %d polynomials left on the stack",
            self.line_number, self.num_errors, len(self.stack),
        )
        return self.stack

    def _check_stack(self) -> None:
        for depth, p in enumerate(reversed(list(self.stack)), start=1):
            if not is_canonical(p):
                logger.error("non-canonical polynomial at stack position %d: %r", depth, p)
                raise AssertionError(
                    f"line {self.line_number}: stack position {depth} is not canonical"
                )


def run(
    lines: Iterable[str],
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    config: Optional[Config] = None,
) -> PolyStack:
    """Run the calculator over `lines` and return the final stack."""
    return Calculator(config=config, out=out, err=err).run(lines)


@contextmanager
def recursion_limit(limit: int) -> Iterator[None]:
    """Raise the interpreter recursion limit to at least `limit` for a block."""
    previous = sys.getrecursionlimit()
    if limit > previous:
        sys.setrecursionlimit(limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


def read_lines(stream: BinaryIO) -> TextIO:
    """Decode a byte stream into lines that end at "\\n" only.

    Undecodable bytes are kept as surrogates, so they reach the parser and
    are reported as a bad line instead of aborting the run.
    """
    return io.TextIOWrapper(stream, encoding="utf-8", errors="surrogateescape", newline="\n")
