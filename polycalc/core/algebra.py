"""Normalization and arithmetic on canonical polynomials.

Every function here returns a canonical value (see poly.py).  Normalization
and addition are mutually recursive: own_monos merges equal exponents with
add, and add/mul rely on the collapse rule applied by normalization.

  own_monos   -- destructive normalization (takes ownership of the list)
  add_monos   -- takes ownership of the coefficients, not of the list
  clone_monos -- non-destructive, deep-clones the input first
  add / neg / sub / mul / power
  neg_in_place / scale_in_place  -- the only mutating operations

Operands of the non-mutating operations are never modified and never
aliased by the result.
"""

from __future__ import annotations

from operator import attrgetter
from typing import Iterable, List

from .poly import Const, Mono, Poly, Sum, clone_mono, wrap_coeff

_by_exp = attrgetter("exp")


def _collapse(monos: List[Mono]) -> Poly:
    """Wrap a sorted, zero-free monomial list, applying the collapse rule."""
    if not monos:
        return Const(0)
    if len(monos) == 1 and monos[0].exp == 0 and monos[0].poly.is_coeff():
        return monos[0].poly
    return Sum(monos)


# ---- Normalization ----

def own_monos(monos: List[Mono]) -> Poly:
    """Build a canonical polynomial from an arbitrary monomial list.

    Sorts by exponent, merges monomials sharing an exponent by adding their
    coefficients, drops zero coefficients and collapses a lone exponent-0
    constant.  The list and every coefficient in it become owned by the
    result; the caller must not use them afterwards.
    """
    if not monos:
        return Const(0)

    monos.sort(key=_by_exp)
    kept = 0
    acc_exp = monos[0].exp
    acc = monos[0].poly
    for m in monos[1:]:
        if m.exp == acc_exp:
            acc = add(acc, m.poly)
            continue
        if not acc.is_zero():
            monos[kept] = Mono(acc_exp, acc)
            kept += 1
        acc_exp, acc = m.exp, m.poly
    if not acc.is_zero():
        monos[kept] = Mono(acc_exp, acc)
        kept += 1
    del monos[kept:]
    return _collapse(monos)


def add_monos(monos: Iterable[Mono]) -> Poly:
    """Normalize monomials whose coefficients the caller hands over.

    The caller's sequence itself is left untouched.
    """
    return own_monos(list(monos))


def clone_monos(monos: Iterable[Mono]) -> Poly:
    """Normalize a deep copy of `monos`; the input stays valid."""
    return own_monos([clone_mono(m) for m in monos])


# ---- Addition ----

def _add_coeff(p: Sum, c: Const) -> List[Mono]:
    if c.is_zero():
        return [clone_mono(m) for m in p.monos]

    head = p.monos[0]
    rest = [clone_mono(m) for m in p.monos[1:]]
    if head.exp != 0:
        return [Mono(0, Const(c.value))] + [clone_mono(head)] + rest

    at_zero = add(head.poly, c)
    if at_zero.is_zero():
        return rest
    return [Mono(0, at_zero)] + rest


def _add_sums(p: Sum, q: Sum) -> List[Mono]:
    pm, qm = p.monos, q.monos
    out: List[Mono] = []
    i = j = 0
    while i < len(pm) and j < len(qm):
        a, b = pm[i], qm[j]
        if a.exp < b.exp:
            out.append(clone_mono(a))
            i += 1
        elif a.exp > b.exp:
            out.append(clone_mono(b))
            j += 1
        else:
            s = add(a.poly, b.poly)
            if not s.is_zero():
                out.append(Mono(a.exp, s))
            i += 1
            j += 1
    out.extend([clone_mono(m) for m in pm[i:]])
    out.extend([clone_mono(m) for m in qm[j:]])
    return out


def add(p: Poly, q: Poly) -> Poly:
    """Return p + q."""
    if isinstance(p, Const) and isinstance(q, Const):
        return Const(p.value + q.value)
    if isinstance(p, Const):
        p, q = q, p
    if isinstance(q, Const):
        return _collapse(_add_coeff(p, q))
    return _collapse(_add_sums(p, q))


# ---- Negation / subtraction ----

def neg(p: Poly) -> Poly:
    """Return -p.  Negation never changes which monomials are present."""
    if isinstance(p, Const):
        return Const(-p.value)
    return Sum([Mono(m.exp, neg(m.poly)) for m in p.monos])


def neg_in_place(p: Poly) -> None:
    """Negate every coefficient of p in place."""
    if isinstance(p, Const):
        p.value = wrap_coeff(-p.value)
        return
    for m in p.monos:
        neg_in_place(m.poly)


def sub(p: Poly, q: Poly) -> Poly:
    """Return p - q."""
    return add(p, neg(q))


# ---- Multiplication ----

def mul(p: Poly, q: Poly) -> Poly:
    """Return p * q.

    Sum x Sum distributes every pair of monomials (|p|*|q| candidates) and
    lets own_monos merge the coinciding exponents.
    """
    if isinstance(p, Const) and isinstance(q, Const):
        return Const(p.value * q.value)
    if isinstance(p, Const):
        p, q = q, p
    if isinstance(q, Const):
        if q.is_zero():
            return Const(0)
        return own_monos([Mono(m.exp, mul(m.poly, q)) for m in p.monos])

    return own_monos([
        Mono(a.exp + b.exp, mul(a.poly, b.poly))
        for a in p.monos
        for b in q.monos
    ])


def scale_in_place(p: Poly, c: int) -> Poly:
    """Multiply every coefficient of p by the scalar c, in place.

    Returns the resulting root, which is p itself unless p had to collapse.
    Wrap-around can turn a non-zero coefficient into zero (2**32 * 2**32),
    so emptied monomials are pruned on the way back up.  p must not be used
    through any other reference after the call.
    """
    c = wrap_coeff(c)
    if c == 0:
        return Const(0)
    if isinstance(p, Const):
        p.value = wrap_coeff(p.value * c)
        return p

    kept = []
    for m in p.monos:
        m.poly = scale_in_place(m.poly, c)
        if not m.poly.is_zero():
            kept.append(m)
    p.monos[:] = kept
    if not kept:
        return Const(0)
    if len(kept) == 1 and kept[0].exp == 0 and kept[0].poly.is_coeff():
        return kept[0].poly
    return p


# ---- Exponentiation ----

def power(p: Poly, exp: int) -> Poly:
    """Return p**exp by square-and-multiply; p**0 is 1 for every p.

    mul never aliases its operands, so p itself can seed the squarings.
    """
    if exp < 0:
        raise ValueError(f"Negative exponent {exp}")
    result: Poly = Const(1)
    base = p
    while exp:
        if exp & 1:
            result = mul(result, base)
        exp >>= 1
        if exp:
            base = mul(base, base)
    return result
