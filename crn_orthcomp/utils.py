"""Shared utilities for the orthogonal-complement computations.

This module provides:
- Tolerance constants
- Default RREF tolerance
- Integer helpers (gcd, lcm) for primitive integer vectors
- Read-only array copies for result containers
"""

from __future__ import annotations

from math import gcd, lcm

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# Tolerance constants
# =============================================================================
FLOAT_TOL = 1e-12

# Accepted pivots within this factor of the tolerance raise an advisory warning.
TOLERANCE_AMBIGUITY_FACTOR = 100.0


def rref_tolerance(A: NDArray[np.float64]) -> float:
    """Default zero tolerance for row reduction of A.

    tol = max(rows, cols) * eps * ||A||_inf

    Returns 0.0 for an empty or all-zero matrix.
    """
    A = np.asarray(A, dtype=float)
    if A.size == 0:
        return 0.0
    norm_inf = float(np.max(np.sum(np.abs(A), axis=1)))
    return max(A.shape) * float(np.finfo(float).eps) * norm_inf


# =============================================================================
# Helper functions for integer operations
# =============================================================================
def _lcm_list(xs: list[int]) -> int:
    """Least common multiple of positive denominators; 1 for an empty list."""
    return lcm(*xs) if xs else 1


def _gcd_list(xs: list[int]) -> int:
    """Largest divisor shared by all entries; 1 when every entry is 0."""
    return gcd(*xs) or 1


# =============================================================================
# Read-only arrays for result containers
# =============================================================================
def frozen_copy(A) -> np.ndarray:
    """Float copy of A that cannot be written to."""
    out = np.array(A, dtype=float, copy=True)
    out.setflags(write=False)
    return out
