"""Central configuration dataclass for the polynomial calculator.

All calculator settings live in a single frozen dataclass so that a run is
fully described by one object that can be passed down to the parser, the
command table and the driver.  Numeric bounds default to the engine's
fixed-width types (see core/poly.py).
"""

from __future__ import annotations

from dataclasses import dataclass

from .core.poly import COEFF_MAX, COEFF_MIN, EXP_MAX

# Upper bound of DEG_BY / COMPOSE arguments (unsigned 64-bit).
_DEFAULT_INDEX_MAX: int = (1 << 64) - 1


@dataclass(frozen=True)
class Config:
    """Frozen settings for parsing and executing calculator input.

    Groups:
        Numeric bounds:  exp_max, coeff_min, coeff_max, index_max
        Driver:          comment_prefix, check_invariants, recursion_limit
        Logging:         log_level
    """
    # --- Numeric bounds ---
    exp_max: int = EXP_MAX        # largest exponent in a literal
    coeff_min: int = COEFF_MIN    # literal coefficients and AT arguments
    coeff_max: int = COEFF_MAX
    index_max: int = _DEFAULT_INDEX_MAX  # DEG_BY / COMPOSE arguments

    # --- Driver ---
    comment_prefix: str = "#"
    check_invariants: bool = False  # verify the whole stack after each line
    recursion_limit: int = 100_000  # frame budget while handling one line

    # --- Logging ---
    log_level: str = "WARNING"

    @property
    def coeff_range(self) -> range:
        """Accepted coefficient values, as a range for membership tests."""
        return range(self.coeff_min, self.coeff_max + 1)
