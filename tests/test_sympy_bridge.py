"""Tests for SymPy conversions, using SymPy as an independent oracle."""

import pytest
import sympy

from polycalc.core.algebra import add, mul, power
from polycalc.core.poly import Const, Mono, Sum, var
from polycalc.core.queries import compose
from polycalc.core.sympy_bridge import create_variables, from_sympy, to_sympy


class TestConversion:
    def setup_method(self):
        self.syms = create_variables(3)
        self.x0, self.x1, self.x2 = self.syms

    def test_create_variables(self):
        assert [str(s) for s in self.syms] == ["x0", "x1", "x2"]
        assert create_variables(0) == []

    def test_to_sympy(self):
        assert to_sympy(Const(7), self.syms) == 7
        assert to_sympy(var(1), self.syms) == self.x1
        p = Sum([Mono(0, var(0)), Mono(2, Const(3))])
        assert sympy.expand(to_sympy(p, self.syms) - (3 * self.x0**2 + self.x1)) == 0

    def test_from_sympy(self):
        p = from_sympy(self.x0**2 * self.x1 + 3, self.syms)
        assert p == Sum([Mono(0, Const(3)), Mono(2, var(0))])

    def test_from_string(self):
        assert from_sympy("(x0 + 1)**2 - x0**2 - 2*x0", self.syms) == 1
        assert from_sympy("x2", self.syms) == var(2)

    def test_round_trip(self, random_polys):
        for p in random_polys(30, depth=3, seed=12):
            assert from_sympy(to_sympy(p, self.syms), self.syms) == p

    def test_too_few_symbols(self):
        with pytest.raises(ValueError):
            to_sympy(var(2), self.syms[:2])

    def test_rejects_non_integer(self):
        with pytest.raises(ValueError):
            from_sympy(sympy.Rational(1, 2), self.syms)
        with pytest.raises(ValueError):
            from_sympy(self.x0 / 2, self.syms)


class TestAgainstSympy:
    def setup_method(self):
        self.syms = create_variables(2)

    def _check(self, ours, expected_expr):
        assert sympy.expand(to_sympy(ours, self.syms) - expected_expr) == 0

    def test_add_mul(self, random_polys):
        polys = random_polys(20, depth=2, seed=13)
        for p, q in zip(polys, polys[1:]):
            sp, sq = to_sympy(p, self.syms), to_sympy(q, self.syms)
            self._check(add(p, q), sp + sq)
            self._check(mul(p, q), sp * sq)

    def test_power(self, random_polys):
        for p in random_polys(8, depth=2, seed=14, low=-2, high=2):
            self._check(power(p, 4), to_sympy(p, self.syms) ** 4)

    def test_compose(self, random_polys):
        x0, x1 = self.syms
        polys = random_polys(12, depth=2, seed=15, max_exp=2, low=-3, high=3)
        for p, q0, q1 in zip(polys, polys[1:], polys[2:]):
            expected = to_sympy(p, self.syms).subs(
                {x0: to_sympy(q0, self.syms), x1: to_sympy(q1, self.syms)},
                simultaneous=True,
            )
            self._check(compose(p, [q0, q1]), expected)
