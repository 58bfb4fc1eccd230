"""Stoichiometric subspace and its orthogonal complement.

Given the reaction-vector matrix R (r x m), rows = expanded reactions:

1) Row-space basis. Row-reduce R^T (m x r). Its pivot columns are rows of R
   that are linearly independent and span the row space, so

     basis_R = R[pivot_rows, :]      (k x m, k = rank R)

   consists of actual reaction vectors, never combinations of them.

2) Orthogonal complement. Row-reduce basis_R to B with pivot columns P.
   The other columns N (nonpivots) are free variables of basis_R x = 0.
   Row i of B reads

     x[P_i] + sum_{j in N} B[i, j] x[j] = 0

   so setting x[j] = 1 for one nonpivot j, zero for the rest, gives

     v_j[j] = 1,   v_j[P_i] = -B[i, j]

   The m - k vectors v_j, stacked as columns in ascending j, span the
   complement; column j is labeled by species[j].
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from .linalg import rref
from .utils import frozen_copy, rref_tolerance


@dataclass(frozen=True)
class RowSpaceBasis:
    basis: NDArray[np.float64]  # (k, m) rows of R
    rows: tuple[int, ...]       # indices into R, ascending

    def __post_init__(self):
        object.__setattr__(self, "basis", frozen_copy(self.basis))
        object.__setattr__(self, "rows", tuple(self.rows))

    @property
    def rank(self) -> int:
        return len(self.rows)


@dataclass(frozen=True)
class OrthogonalComplement:
    basis: NDArray[np.float64]   # (m, m-k) one column per nonpivot
    pivots: tuple[int, ...]      # species indices, ascending
    nonpivots: tuple[int, ...]   # species indices, ascending
    labels: tuple[str, ...]      # species[nonpivots]

    def __post_init__(self):
        object.__setattr__(self, "basis", frozen_copy(self.basis))

    @property
    def dimension(self) -> int:
        return len(self.nonpivots)


def row_space_basis(R: NDArray[np.float64], tol: float | None = None) -> RowSpaceBasis:
    """Select a maximal linearly independent subset of the rows of R.

    Zero rows and rows repeating an earlier row (up to scaling) are never
    selected.
    """
    R = np.asarray(R, dtype=float)
    if R.ndim != 2:
        raise ValueError(f"R must be 2D, got shape {R.shape}")

    _, pivot_rows = rref(R.T, tol)
    rows = tuple(pivot_rows)
    return RowSpaceBasis(basis=R[list(rows), :].copy(), rows=rows)


def orthogonal_complement_basis(
    basis_R: NDArray[np.float64],
    species: Sequence[str],
    tol: float | None = None,
) -> OrthogonalComplement:
    """Basis of {x : basis_R x = 0}, one column per nonpivot species.

    Args:
        basis_R: (k, m) matrix with linearly independent rows
        species: (m,) column labels
        tol: zero tolerance for both the reduction and the entries of B;
             default rref_tolerance(basis_R)

    Returns:
        OrthogonalComplement with basis of shape (m, m-k)
    """
    basis_R = np.asarray(basis_R, dtype=float)
    species = tuple(species)
    m = len(species)
    if basis_R.ndim != 2 or basis_R.shape[1] != m:
        raise ValueError(f"basis_R must have shape (k, {m}), got {basis_R.shape}")

    if tol is None:
        tol = rref_tolerance(basis_R)

    B, pivots = rref(basis_R, tol)
    pivot_set = set(pivots)
    nonpivots = [j for j in range(m) if j not in pivot_set]

    basis = np.zeros((m, len(nonpivots)))
    for col, j in enumerate(nonpivots):
        basis[j, col] = 1.0
        for i, p in enumerate(pivots):
            if abs(B[i, j]) > tol:
                basis[p, col] = -B[i, j]

    return OrthogonalComplement(
        basis=basis,
        pivots=tuple(pivots),
        nonpivots=tuple(nonpivots),
        labels=tuple(species[j] for j in nonpivots),
    )
