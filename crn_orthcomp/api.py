"""Public API for the orthogonal-complement pipeline.

Input: a Network (reactions; species are derived).

Pipeline:
1) resolve species (sorted union over all complexes)
2) build reaction vectors R, reversible reactions expanded to +/- rows
3) row-space basis basis_R = R[pivot rows of rref(R^T)]
4) orthogonal complement of span(basis_R), one column per nonpivot species

This module defines:
- PipelineResult dataclass
- run_pipeline() entrypoint
- compute_orthogonal_complement_basis(): (species, basis, nonpivot labels)
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from .network import Network, Reaction
from .subspace import OrthogonalComplement, RowSpaceBasis, orthogonal_complement_basis, row_space_basis
from .vectors import ReactionVectors, build_reaction_vectors


@dataclass(frozen=True)
class PipelineResult:
    species: tuple[str, ...]
    reactions: tuple[Reaction, ...]
    vectors: ReactionVectors
    row_space: RowSpaceBasis
    complement: OrthogonalComplement

    @property
    def basis(self) -> NDArray[np.float64]:
        """(m, m-k) orthogonal-complement basis, columns labeled by `nonpivot`."""
        return self.complement.basis

    @property
    def nonpivot(self) -> tuple[str, ...]:
        return self.complement.labels

    @property
    def pivot(self) -> tuple[str, ...]:
        return tuple(self.species[j] for j in self.complement.pivots)

    @property
    def n_species(self) -> int:
        return len(self.species)

    @property
    def stoichiometric_rank(self) -> int:
        return self.row_space.rank

    @property
    def complement_rank(self) -> int:
        return self.complement.dimension

    def as_tuple(self) -> tuple[tuple[str, ...], NDArray[np.float64], tuple[str, ...]]:
        return self.species, self.basis, self.nonpivot


def run_pipeline(network: Network, *, tol: float | None = None) -> PipelineResult:
    """Run the full pipeline on a network.

    Args:
      network: the CRN
      tol: zero tolerance used by both row reductions; if None each
           reduction uses rref_tolerance() of its own input

    Returns:
      PipelineResult

    Raises:
      MalformedNetworkError: a complex lists a species twice
    """
    vectors = build_reaction_vectors(network.reactions, network.species)
    row_space = row_space_basis(vectors.R, tol)
    complement = orthogonal_complement_basis(row_space.basis, network.species, tol)

    return PipelineResult(
        species=network.species,
        reactions=network.reactions,
        vectors=vectors,
        row_space=row_space,
        complement=complement,
    )


def compute_orthogonal_complement_basis(
    network: Network,
    *,
    tol: float | None = None,
) -> tuple[tuple[str, ...], NDArray[np.float64], tuple[str, ...]]:
    """Return (species, basis_matrix, nonpivot_labels) for a network."""
    return run_pipeline(network, tol=tol).as_tuple()


basis_orth_comp = compute_orthogonal_complement_basis
