"""Stack of polynomials operated on by the calculator commands."""

from __future__ import annotations

from typing import Iterator, List

from ..core.poly import Poly
from .errors import StackUnderflow


class PolyStack:
    """LIFO stack of polynomials.

    Positions passed to get() count from the top, starting at 1.  Every
    accessor assumes the caller has checked the depth with require().
    """

    def __init__(self):
        self._items: List[Poly] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Poly]:
        """Iterate from the bottom of the stack to the top."""
        return iter(self._items)

    def require(self, n: int) -> None:
        """Raise StackUnderflow unless at least n polynomials are stacked."""
        if len(self._items) < n:
            raise StackUnderflow()

    def push(self, p: Poly) -> None:
        self._items.append(p)

    def pop(self) -> Poly:
        return self._items.pop()

    def peek(self) -> Poly:
        return self._items[-1]

    def get(self, pos: int) -> Poly:
        return self._items[-pos]
