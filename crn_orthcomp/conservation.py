"""Conservation laws from the orthogonal-complement basis.

Each column v of the orthogonal-complement basis satisfies v^T s = 0 for
every reaction vector s, so v^T x is constant along any trajectory.

Columns are floats (entries of an RREF); for integer stoichiometry they are
rationals with small denominators. We provide:
- primitive_integer_basis(): scale each column to a primitive integer vector
- conservation_laws(): the same, paired with the nonpivot label of each column

NOTE: The rational conversion bounds denominators, so it is meant for
networks with integer or simple fractional coefficients.
"""

from __future__ import annotations

from fractions import Fraction

import numpy as np
from numpy.typing import NDArray

from .utils import FLOAT_TOL, _gcd_list, _lcm_list


def primitive_integer_basis(
    basis: NDArray[np.float64],
    *,
    max_den: int = 1_000_000,
    tol: float = FLOAT_TOL,
) -> list[NDArray[np.int64]]:
    """Return each column of basis as a primitive integer vector.

    For each column:
    - convert each entry to a Fraction with bounded denominator
    - scale by lcm of denominators
    - divide by gcd

    The nonpivot entry of each column is 1, so the sign is kept and the
    scaled column stays positive on its label species.

    Args:
      basis: (m, d) matrix, one vector per column
      max_den: bound denominators when converting to Fraction
      tol: entries below tol in magnitude are treated as 0

    Returns:
      list of d primitive integer vectors (m,)
    """
    basis = np.asarray(basis, dtype=float)
    if basis.ndim != 2:
        raise ValueError(f"basis must be 2D, got shape {basis.shape}")

    out: list[NDArray[np.int64]] = []
    for col in basis.T:
        fr = [Fraction(0) if abs(x) < tol else Fraction(float(x)).limit_denominator(max_den) for x in col]
        L = _lcm_list([f.denominator for f in fr])
        ints = np.array([int(f * L) for f in fr], dtype=np.int64)
        out.append(ints // _gcd_list(ints.tolist()))
    return out


def conservation_laws(result, *, max_den: int = 1_000_000) -> list[tuple[str, NDArray[np.int64]]]:
    """(nonpivot label, primitive integer law) for each complement column of a PipelineResult."""
    laws = primitive_integer_basis(result.basis, max_den=max_den)
    return list(zip(result.nonpivot, laws))
