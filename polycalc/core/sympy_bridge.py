"""Conversions between nested polynomials and SymPy expressions.

Variable level k maps to the k-th symbol of the list passed in (x0, x1, ...
by default, see create_variables).  Useful for building test polynomials
from readable expressions and for displaying results.
"""

from __future__ import annotations

from collections import defaultdict
from typing import List, Sequence, Tuple

import sympy
from sympy import Expr, Symbol, ZZ, expand
from sympy.polys.polyerrors import BasePolynomialError

from .algebra import own_monos
from .poly import Const, Mono, Poly, num_vars


def create_variables(n: int) -> List[Symbol]:
    """Create n SymPy symbols: x0, x1, ..., x_{n-1}."""
    if n == 0:
        return []
    return list(sympy.symbols(f"x0:{n}"))


def to_sympy(poly: Poly, syms: Sequence[Symbol]) -> Expr:
    """Convert a polynomial to an expanded SymPy expression."""
    if num_vars(poly) > len(syms):
        raise ValueError(
            f"Polynomial uses {num_vars(poly)} variables, got {len(syms)} symbols"
        )
    return expand(_to_sympy(poly, syms, 0))


def _to_sympy(p: Poly, syms: Sequence[Symbol], level: int) -> Expr:
    if isinstance(p, Const):
        return sympy.Integer(p.value)
    return sympy.Add(*[
        _to_sympy(m.poly, syms, level + 1) * syms[level] ** m.exp
        for m in p.monos
    ])


def from_sympy(expr, syms: Sequence[Symbol]) -> Poly:
    """Convert a SymPy expression (or string) with integer coefficients.

    Raises ValueError if the expression is not a polynomial in `syms` with
    integer coefficients.  Coefficients are wrapped to 64 bits.
    """
    expr = expand(sympy.sympify(expr))
    if expr.is_number:
        if not expr.is_Integer:
            raise ValueError(f"Non-integer constant {expr}")
        return Const(int(expr))
    if not syms:
        raise ValueError(f"Expression {expr} needs at least one symbol")
    try:
        sp = sympy.Poly(expr, *syms, domain=ZZ)
    except BasePolynomialError as e:
        raise ValueError(f"Not an integer polynomial in {list(syms)}: {expr}") from e
    terms = [(monom, int(coeff)) for monom, coeff in sp.terms()]
    return _from_terms(terms)


def _from_terms(terms: List[Tuple[Tuple[int, ...], int]]) -> Poly:
    if not terms:
        return Const(0)
    if not terms[0][0]:
        return Const(sum(c for _, c in terms))
    groups = defaultdict(list)
    for monom, coeff in terms:
        groups[monom[0]].append((monom[1:], coeff))
    return own_monos([Mono(exp, _from_terms(sub)) for exp, sub in groups.items()])
