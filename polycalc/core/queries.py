"""Queries, point evaluation and composition.

  is_eq        -- structural equality (sound because values are canonical)
  deg, deg_by  -- total degree and degree in one variable; -1 for zero
  at           -- substitute a value for x0, keeping deeper variables
  at_in_place  -- same, consuming its operand
  compose      -- substitute one polynomial per variable level

Composition with fewer substitutions than variable levels treats every
missing variable as 0: monomials with a non-zero exponent at an exhausted
level contribute nothing, exponent-0 monomials keep their composed
coefficient.  Extra substitutions are ignored.
"""

from __future__ import annotations

from typing import Sequence

from .algebra import add, mul, power, scale_in_place
from .poly import Const, Poly, clone, coeff_pow


def is_eq(p: Poly, q: Poly) -> bool:
    """Return True iff p and q are the same polynomial."""
    if isinstance(p, Const) and isinstance(q, Const):
        return p.value == q.value
    if isinstance(p, Const) or isinstance(q, Const):
        return False
    if len(p.monos) != len(q.monos):
        return False
    for a, b in zip(p.monos, q.monos):
        if a.exp != b.exp or not is_eq(a.poly, b.poly):
            return False
    return True


def deg(p: Poly) -> int:
    """Total degree; -1 for the zero polynomial."""
    if isinstance(p, Const):
        return -1 if p.value == 0 else 0
    return max([m.exp + deg(m.poly) for m in p.monos])


def deg_by(p: Poly, var_idx: int) -> int:
    """Degree in the variable at nesting level var_idx; -1 for zero."""
    if var_idx < 0:
        raise ValueError(f"Invalid variable index {var_idx}")
    if isinstance(p, Const):
        return -1 if p.value == 0 else 0
    if var_idx == 0:
        return p.monos[-1].exp
    return max([deg_by(m.poly, var_idx - 1) for m in p.monos])


def at(p: Poly, x: int) -> Poly:
    """Return p with x0 := x.  The result is over the remaining variables."""
    if isinstance(p, Const):
        return clone(p)
    result: Poly = Const(0)
    for m in p.monos:
        term = mul(m.poly, Const(coeff_pow(x, m.exp)))
        result = add(result, term)
    return result


def at_in_place(p: Poly, x: int) -> Poly:
    """Return p with x0 := x, reusing p's coefficients.

    p is consumed: its coefficients are scaled in place and handed to the
    result, so it must not be used after the call.
    """
    if isinstance(p, Const):
        return p
    terms = [scale_in_place(m.poly, coeff_pow(x, m.exp)) for m in p.monos]
    result = terms[0]
    for term in terms[1:]:
        result = add(result, term)
    return result


def compose(p: Poly, subs: Sequence[Poly]) -> Poly:
    """Substitute subs[k] for the variable at nesting level k.

    Args:
        p:    Polynomial to compose.
        subs: One polynomial per variable level of p.  May be shorter than
              p's depth; missing variables are taken as 0.

    Returns:
        The canonical composition.  p and subs are left untouched.
    """
    return _compose(p, subs, 0)


def _compose(p: Poly, subs: Sequence[Poly], level: int) -> Poly:
    if isinstance(p, Const):
        return clone(p)

    result: Poly = Const(0)
    for m in p.monos:
        if m.exp != 0 and level >= len(subs):
            # monomials are sorted, everything after this one vanishes too
            break
        inner = _compose(m.poly, subs, level + 1)
        if m.exp != 0:
            inner = mul(inner, power(subs[level], m.exp))
        result = add(result, inner)
    return result
