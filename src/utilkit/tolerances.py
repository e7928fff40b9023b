from __future__ import annotations

import math

# below this length a vector has no direction
ZERO_LENGTH_ABS_TOL = 1e-10
ZERO_LENGTH_REL_TOL = 1e-12


def near_zero(val: float) -> bool:
    return math.isclose(val, 0.0, rel_tol=ZERO_LENGTH_REL_TOL, abs_tol=ZERO_LENGTH_ABS_TOL)
