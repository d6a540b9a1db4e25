"""Parsing of polynomial literals and command arguments.

Literal grammar (no whitespace anywhere):

  poly  := coeff | mono ("+" mono)*
  mono  := "(" poly "," exp ")"
  coeff := "-"? digit+          within [coeff_min, coeff_max]
  exp   := digit+               within [0, exp_max]

This inverts core.poly.format_poly.  Monomials of one literal are merged and
sorted by add_monos, so "(1,2)+(1,2)" reads as "(2,2)" and "(0,1)" as "0".

Example:
  parse_poly("(1,0)+((2,1),3)")  ->  1 + 2*x1*x0^3
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..config import Config
from ..core.algebra import add_monos
from ..core.poly import Const, Mono, Poly
from .errors import WrongPoly

_COEFF_RE = re.compile(r"-?[0-9]+")
_UINT_RE = re.compile(r"[0-9]+")


class PolyParser:
    """Recursive-descent parser over one line of text."""

    def __init__(self, text: str, config: Optional[Config] = None):
        self.text = text
        self.pos = 0
        self.config = config if config is not None else Config()

    def parse(self) -> Poly:
        """Parse the whole text as one polynomial or raise WrongPoly."""
        poly = self._poly()
        if self.pos != len(self.text):
            raise WrongPoly()
        return poly

    def _peek(self) -> str:
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _expect(self, char: str) -> None:
        if self._peek() != char:
            raise WrongPoly()
        self.pos += 1

    def _number(self, pattern: re.Pattern, low: int, high: int) -> int:
        match = pattern.match(self.text, self.pos)
        if match is None:
            raise WrongPoly()
        value = int(match.group())
        if not low <= value <= high:
            raise WrongPoly()
        self.pos = match.end()
        return value

    def _poly(self) -> Poly:
        head = self._peek()
        if head and head in "-0123456789":
            return Const(self._number(_COEFF_RE, self.config.coeff_min, self.config.coeff_max))

        monos: List[Mono] = [self._mono()]
        while self._peek() == "+":
            self.pos += 1
            monos.append(self._mono())
        return add_monos(monos)

    def _mono(self) -> Mono:
        self._expect("(")
        poly = self._poly()
        self._expect(",")
        exp = self._number(_UINT_RE, 0, self.config.exp_max)
        self._expect(")")
        return Mono(exp, poly)


def parse_poly(text: str, config: Optional[Config] = None) -> Poly:
    """Parse a polynomial literal into a canonical polynomial."""
    return PolyParser(text, config).parse()


# ---- Command arguments ----

def parse_index(text: str, config: Config) -> int:
    """Parse an unsigned decimal argument (DEG_BY, COMPOSE).

    Raises ValueError if the text is not digits only or exceeds index_max.
    """
    if _UINT_RE.fullmatch(text) is None:
        raise ValueError(f"Invalid unsigned argument {text!r}")
    value = int(text)
    if value > config.index_max:
        raise ValueError(f"Argument {value} out of range")
    return value


def parse_coeff(text: str, config: Config) -> int:
    """Parse a signed decimal coefficient argument (AT).

    Raises ValueError if malformed or outside [coeff_min, coeff_max].
    """
    if _COEFF_RE.fullmatch(text) is None:
        raise ValueError(f"Invalid coefficient argument {text!r}")
    value = int(text)
    if value not in config.coeff_range:
        raise ValueError(f"Argument {value} out of range")
    return value
