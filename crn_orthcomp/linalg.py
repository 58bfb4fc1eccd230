"""Reduced row-echelon form with pivot bookkeeping.

rref() is the single row-reduction routine used by both passes of the
pipeline (row-space basis extraction and the orthogonal complement), so
both see the same pivot order and the same zero test.

Algorithm (Gauss-Jordan with partial pivoting):
  for each column j, left to right, with current row i:
    p = max |A[i:, j]|
    if p <= tol: zero A[i:, j], next column
    else: swap the row holding p into row i, scale it to a leading 1,
          eliminate column j from every other row, record j as a pivot
"""

from __future__ import annotations

import warnings

import numpy as np
from numpy.typing import NDArray

from .errors import NumericToleranceAmbiguity
from .utils import TOLERANCE_AMBIGUITY_FACTOR, rref_tolerance


def rref(
    A: NDArray[np.float64],
    tol: float | None = None,
) -> tuple[NDArray[np.float64], list[int]]:
    """Row-reduce A.

    Args:
        A: (n, m) matrix, not modified
        tol: zero tolerance; default rref_tolerance(A)

    Returns:
        (reduced, pivots): reduced row-echelon form (n, m) and the pivot
        column indices in ascending order. len(pivots) is the rank of A.
    """
    A = np.array(A, dtype=float, copy=True)
    if A.ndim != 2:
        raise ValueError(f"rref expects a 2D matrix, got shape {A.shape}")
    if tol is None:
        tol = rref_tolerance(A)

    n, m = A.shape
    pivots: list[int] = []
    i = 0
    j = 0
    while i < n and j < m:
        k = i + int(np.argmax(np.abs(A[i:, j])))
        p = abs(A[k, j])
        if p <= tol:
            A[i:, j] = 0.0
            j += 1
            continue

        if tol > 0 and p <= TOLERANCE_AMBIGUITY_FACTOR * tol:
            warnings.warn(
                f"pivot {p:.3e} in column {j} is within a factor "
                f"{TOLERANCE_AMBIGUITY_FACTOR:g} of the zero tolerance {tol:.3e}",
                NumericToleranceAmbiguity,
                stacklevel=2,
            )

        pivots.append(j)
        if k != i:
            A[[i, k], j:] = A[[k, i], j:]
        A[i, j:] = A[i, j:] / A[i, j]
        for r in range(n):
            if r != i and A[r, j] != 0.0:
                A[r, j:] = A[r, j:] - A[r, j] * A[i, j:]
        i += 1
        j += 1

    return A, pivots


def rank(A: NDArray[np.float64], tol: float | None = None) -> int:
    """Rank as the number of RREF pivots."""
    return len(rref(A, tol)[1])
