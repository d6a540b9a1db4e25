"""Tests for numpy batch evaluation of polynomials."""

import numpy as np
import pytest

from polycalc.core.algebra import add, mul
from polycalc.core.fingerprints import eval_distance, eval_poly_points, sample_eval_points
from polycalc.core.poly import COEFF_MAX, COEFF_MIN, Const, Mono, Sum, var
from polycalc.core.queries import at


def _eval_by_at(p, point):
    for x in point:
        p = at(p, int(x))
    assert p.is_coeff()
    return p.value


class TestSampling:
    def test_shape_and_range(self):
        rng = np.random.default_rng(0)
        pts = sample_eval_points(rng, 3, 16, low=-2, high=2)
        assert pts.shape == (16, 3)
        assert pts.dtype == np.int64
        assert pts.min() >= -2
        assert pts.max() <= 2

    def test_reproducible(self):
        a = sample_eval_points(np.random.default_rng(42), 2, 8)
        b = sample_eval_points(np.random.default_rng(42), 2, 8)
        np.testing.assert_array_equal(a, b)


class TestEvalPolyPoints:
    def setup_method(self):
        self.points = sample_eval_points(np.random.default_rng(1), 3, 12)

    def test_constant(self):
        vals = eval_poly_points(Const(-4), self.points)
        np.testing.assert_array_equal(vals, np.full(12, -4))

    def test_variable_picks_column(self):
        np.testing.assert_array_equal(eval_poly_points(var(1), self.points), self.points[:, 1])

    def test_matches_repeated_at(self, random_polys):
        for p in random_polys(25, depth=3, seed=10):
            vals = eval_poly_points(p, self.points)
            for row, value in zip(self.points, vals):
                assert int(value) == _eval_by_at(p, row)

    def test_ring_homomorphism(self, random_polys):
        polys = random_polys(20, depth=3, seed=11)
        for p, q in zip(polys, polys[1:]):
            fp, fq = eval_poly_points(p, self.points), eval_poly_points(q, self.points)
            np.testing.assert_array_equal(eval_poly_points(add(p, q), self.points), fp + fq)
            np.testing.assert_array_equal(eval_poly_points(mul(p, q), self.points), fp * fq)

    def test_wraps_like_coefficients(self):
        p = Sum([Mono(63, Const(1))])
        vals = eval_poly_points(p, [[2], [3]])
        assert int(vals[0]) == _eval_by_at(p, [2])
        assert int(vals[1]) == _eval_by_at(p, [3])

    def test_too_few_columns(self):
        with pytest.raises(ValueError):
            eval_poly_points(var(3), self.points)

    def test_rejects_flat_points(self):
        with pytest.raises(ValueError):
            eval_poly_points(var(0), [1, 2, 3])


class TestEvalDistance:
    def test_distance(self):
        assert eval_distance([1, -2, 3], [1, 2, 0]) == 7
        assert eval_distance(np.array([5, 5]), np.array([5, 5])) == 0

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            eval_distance([1], [1, 2])

    def test_extreme_values_do_not_overflow(self):
        a = np.array([COEFF_MIN], dtype=np.int64)
        b = np.array([COEFF_MAX], dtype=np.int64)
        assert eval_distance(a, b) == (1 << 64) - 1
