from .poly import (
    Poly, Const, Sum, Mono, COEFF_MIN, COEFF_MAX, EXP_MAX,
    zero, const, mono, var, clone, is_zero, is_coeff, is_canonical,
    num_vars, format_poly, wrap_coeff, coeff_pow,
)
from .algebra import (
    own_monos, add_monos, clone_monos, add, neg, sub, mul, power,
    neg_in_place, scale_in_place,
)
from .queries import is_eq, deg, deg_by, at, at_in_place, compose
from .fingerprints import sample_eval_points, eval_poly_points, eval_distance
