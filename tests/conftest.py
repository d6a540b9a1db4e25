import random

import pytest

from polycalc.core.algebra import own_monos
from polycalc.core.poly import Const, Mono


def _random_poly(rng, depth, max_terms=3, max_exp=3, low=-5, high=5):
    if depth == 0 or rng.random() < 0.25:
        return Const(rng.randint(low, high))
    monos = [
        Mono(rng.randint(0, max_exp),
             _random_poly(rng, depth - 1, max_terms, max_exp, low, high))
        for _ in range(rng.randint(1, max_terms))
    ]
    return own_monos(monos)


@pytest.fixture
def random_polys():
    """Factory for reproducible lists of random canonical polynomials."""
    def make(n, depth=2, seed=0, **kwargs):
        rng = random.Random(seed)
        return [_random_poly(rng, depth, **kwargs) for _ in range(n)]
    return make
