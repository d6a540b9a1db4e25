"""Fingerprints: a polynomial's values on a fixed matrix of integer points.

The whole batch is evaluated in one walk of the tree on int64 numpy arrays.
int64 arithmetic wraps modulo 2**64 exactly like the engine's coefficients,
so entry i of a fingerprint equals the result of applying `at` with the
coordinates of point i, one variable at a time.  Equal polynomials always
have equal fingerprints; distinct ones almost never do when the points are
random (Schwartz-Zippel), which makes the vector a quick identity check
independent of how the trees were built.

  sample_eval_points  -- random int64 point matrix, shape (m, n_vars)
  eval_poly_points    -- fingerprint of one polynomial, shape (m,)
  eval_distance       -- how far apart two fingerprints are
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .poly import Const, Poly, num_vars


def sample_eval_points(
    rng: np.random.Generator,
    n_vars: int,
    m: int,
    low: int = -3,
    high: int = 3,
) -> np.ndarray:
    """Draw an (m, n_vars) int64 matrix of points with entries in [low, high].

    Row i is one point; column k feeds the variable at nesting level k.  The
    same generator state always yields the same matrix, so fingerprints taken
    in different runs can be compared.
    """
    if n_vars < 0 or m < 0:
        raise ValueError(f"Invalid point sample shape ({m}, {n_vars})")
    return rng.integers(low, high, size=(m, n_vars), endpoint=True, dtype=np.int64)


def eval_poly_points(poly: Poly, points) -> np.ndarray:
    """Evaluate a polynomial at each row of `points`.

    Column k of `points` is the value of the variable at nesting level k.
    Returns an int64 vector with one (wrapped) value per point.
    """
    pts = np.asarray(points, dtype=np.int64)
    if pts.ndim != 2:
        raise ValueError(f"Points must be a 2-d array, got shape {pts.shape}")
    if num_vars(poly) > pts.shape[1]:
        raise ValueError(
            f"Polynomial uses {num_vars(poly)} variables, points have {pts.shape[1]}"
        )
    return _eval(poly, pts, 0)


def _eval(p: Poly, pts: np.ndarray, level: int) -> np.ndarray:
    if isinstance(p, Const):
        return np.full(pts.shape[0], p.value, dtype=np.int64)
    column = pts[:, level]
    total = np.zeros(pts.shape[0], dtype=np.int64)
    for m in p.monos:
        total += _eval(m.poly, pts, level + 1) * np.power(column, m.exp)
    return total


def eval_distance(a: Sequence[int], b: Sequence[int]) -> int:
    """Sum of |a[i] - b[i]| over two fingerprints, as an unbounded Python int.

    Entries are converted before subtracting, so wrapped int64 values near
    the ends of the range do not overflow again.  0 means agreement at every
    sampled point.
    """
    if len(a) != len(b):
        raise ValueError(f"Fingerprints differ in length: {len(a)} != {len(b)}")
    return sum(abs(int(x) - int(y)) for x, y in zip(a, b))
