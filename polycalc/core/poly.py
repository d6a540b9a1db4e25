"""Sparse multivariate polynomials as nested recursive trees.

A polynomial is either a constant or a sum of monomials, and every monomial
carries a polynomial over the remaining variables as its coefficient:

  Poly  =  Const(value)                    value: signed 64-bit integer
        |  Sum([Mono(exp, Poly), ...])     exponents strictly increasing

Variables are eliminated left to right, one per nesting level, so x0 is the
variable of the outermost Sum, x1 the variable of its coefficients, and so on.

Example (2 variables x0, x1):
  3*x0^2 + 2*x1  ->  Sum([Mono(0, Sum([Mono(1, Const(2))])),
                          Mono(2, Const(3))])
  printed as        ((2,1),0)+(3,2)

Canonical form (every value returned by the engine satisfies it):
  * exponents inside a Sum are strictly increasing,
  * every coefficient is itself canonical and non-zero,
  * a Sum is never a single exponent-0 monomial with a Const coefficient
    (that value is the Const itself),
  * zero is always Const(0).

Coefficient arithmetic wraps modulo 2**64 into the signed range, like machine
integers.  Exponents are plain non-negative ints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

# Coefficients are signed 64-bit integers with two's-complement wrap-around.
COEFF_BITS = 64
COEFF_MIN = -(1 << (COEFF_BITS - 1))
COEFF_MAX = (1 << (COEFF_BITS - 1)) - 1
_COEFF_MOD = 1 << COEFF_BITS

# Largest exponent accepted from text input (32-bit signed exponent type).
EXP_MAX = (1 << 31) - 1


def wrap_coeff(value: int) -> int:
    """Reduce an integer into the signed 64-bit coefficient range."""
    return ((int(value) - COEFF_MIN) % _COEFF_MOD) + COEFF_MIN


def coeff_pow(base: int, exp: int) -> int:
    """Return base**exp with coefficient wrap-around (square-and-multiply)."""
    if exp < 0:
        raise ValueError(f"Negative exponent {exp}")
    return wrap_coeff(pow(int(base), exp, _COEFF_MOD))


class Poly:
    """Base of the two polynomial variants, Const and Sum.

    Operators delegate to the engine functions in algebra and queries, so
    `p + q`, `p - q`, `-p`, `p * q`, `p ** e` and `p == q` all produce or
    compare canonical values.  Plain ints are promoted to Const.
    """

    __slots__ = ()

    def is_coeff(self) -> bool:
        """True iff this polynomial is a Const."""
        raise NotImplementedError

    def is_zero(self) -> bool:
        """True iff this polynomial is Const(0)."""
        raise NotImplementedError

    # ---- Arithmetic ----

    def __add__(self, other):
        from .algebra import add
        other = _as_poly(other)
        if other is None:
            return NotImplemented
        return add(self, other)

    __radd__ = __add__

    def __sub__(self, other):
        from .algebra import sub
        other = _as_poly(other)
        if other is None:
            return NotImplemented
        return sub(self, other)

    def __rsub__(self, other):
        from .algebra import sub
        other = _as_poly(other)
        if other is None:
            return NotImplemented
        return sub(other, self)

    def __neg__(self):
        from .algebra import neg
        return neg(self)

    def __mul__(self, other):
        from .algebra import mul
        other = _as_poly(other)
        if other is None:
            return NotImplemented
        return mul(self, other)

    __rmul__ = __mul__

    def __pow__(self, exp):
        from .algebra import power
        if isinstance(exp, bool) or not isinstance(exp, int):
            return NotImplemented
        return power(self, exp)

    # ---- Comparison ----

    def __eq__(self, other) -> bool:
        from .queries import is_eq
        other = _as_poly(other)
        if other is None:
            return NotImplemented
        return is_eq(self, other)

    __hash__ = None  # mutable through the in-place operations

    def __str__(self) -> str:
        return format_poly(self)


class Const(Poly):
    """Constant polynomial holding one wrapped integer coefficient."""

    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = wrap_coeff(value)

    def is_coeff(self) -> bool:
        return True

    def is_zero(self) -> bool:
        return self.value == 0

    def __repr__(self) -> str:
        return f"Const({self.value})"


class Sum(Poly):
    """Sum of monomials.

    The constructor stores the list as given.  Use algebra.own_monos (or the
    other normalizing constructors) to build a canonical value from an
    arbitrary monomial collection.
    """

    __slots__ = ("monos",)

    def __init__(self, monos: List[Mono]):
        self.monos = monos

    def is_coeff(self) -> bool:
        return False

    def is_zero(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Sum({self.monos!r})"


@dataclass
class Mono:
    """One monomial: the current variable raised to `exp`, times `poly`.

    Attributes:
        exp:  Exponent of the variable at this nesting level (>= 0).
        poly: Coefficient, a polynomial over the remaining variables.
    """

    exp: int
    poly: Poly


def _as_poly(value) -> Poly | None:
    if isinstance(value, Poly):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Const(value)
    return None


# ---- Constructors ----

def zero() -> Const:
    """Return the zero polynomial."""
    return Const(0)


def const(value: int) -> Const:
    """Return the constant polynomial `value` (wrapped to 64 bits)."""
    return Const(value)


def mono(exp: int, poly: Poly) -> Mono:
    """Return a monomial, rejecting negative exponents."""
    if exp < 0:
        raise ValueError(f"Invalid exponent {exp}")
    if not isinstance(poly, Poly):
        raise TypeError(f"Monomial coefficient must be a Poly, got {type(poly).__name__}")
    return Mono(exp, poly)


def var(idx: int) -> Poly:
    """Return the polynomial x_idx (the variable at nesting level idx)."""
    if idx < 0:
        raise ValueError(f"Invalid variable index {idx}")
    result: Poly = Sum([Mono(1, Const(1))])
    for _ in range(idx):
        result = Sum([Mono(0, result)])
    return result


def clone(p: Poly) -> Poly:
    """Return a fully independent deep copy of p."""
    if isinstance(p, Const):
        return Const(p.value)
    return Sum([clone_mono(m) for m in p.monos])


def clone_mono(m: Mono) -> Mono:
    return Mono(m.exp, clone(m.poly))


# ---- Predicates ----

def is_zero(p: Poly) -> bool:
    """True iff p is the constant 0."""
    return isinstance(p, Const) and p.value == 0


def is_coeff(p: Poly) -> bool:
    """True iff p is a constant (any value)."""
    return isinstance(p, Const)


def is_canonical(p: Poly) -> bool:
    """Recursively verify the canonical-form invariant.

    Used for verification only; engine operations never call it on their
    production path.
    """
    if isinstance(p, Const):
        return COEFF_MIN <= p.value <= COEFF_MAX
    if not isinstance(p, Sum) or not p.monos:
        return False
    prev_exp = -1
    for m in p.monos:
        if not isinstance(m, Mono) or m.exp <= prev_exp:
            return False
        if is_zero(m.poly) or not is_canonical(m.poly):
            return False
        prev_exp = m.exp
    if len(p.monos) == 1 and p.monos[0].exp == 0 and is_coeff(p.monos[0].poly):
        return False
    return True


def num_vars(p: Poly) -> int:
    """Number of variable levels used by p (0 for a constant)."""
    if isinstance(p, Const):
        return 0
    depth = 0
    for m in p.monos:
        depth = max(depth, num_vars(m.poly))
    return 1 + depth


# ---- Text form ----

def format_poly(p: Poly) -> str:
    """Return the canonical text form.

    A constant prints as its decimal value; a sum prints as
    `(coef,exp)+(coef,exp)+...` in increasing exponent order.
    """
    if isinstance(p, Const):
        return str(p.value)
    return "+".join([f"({format_poly(m.poly)},{m.exp})" for m in p.monos])
