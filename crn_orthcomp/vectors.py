from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .errors import MalformedNetworkError
from .network import Complex, Reaction, resolve_species
from .utils import frozen_copy


@dataclass(frozen=True)
class ReactionVectors:
    """Rows of R, one per reaction direction.

    Reaction rho contributes the row y'_rho - y_rho (product minus reactant).
    A reversible reaction contributes a second row right after it, the exact
    negation. row_to_reaction[i] is the reaction behind row i and row_sign[i]
    is +1 for the forward row, -1 for the negated one.

    Shapes:
      R: (r, m)  rows are expanded reactions, columns follow `species`
    """

    R: np.ndarray
    species: tuple[str, ...]
    row_to_reaction: np.ndarray  # (r,) int
    row_sign: np.ndarray         # (r,) in {+1,-1}

    def __post_init__(self):
        object.__setattr__(self, "R", frozen_copy(self.R))
        for name in ("row_to_reaction", "row_sign"):
            arr = np.array(getattr(self, name), dtype=int, copy=True)
            arr.setflags(write=False)
            object.__setattr__(self, name, arr)
        object.__setattr__(self, "species", tuple(self.species))

    @property
    def n_rows(self) -> int:
        return int(self.R.shape[0])

    @property
    def n_species(self) -> int:
        return int(self.R.shape[1])


def complex_vector(cplx: Complex, species: Sequence[str], *, reaction_id: str = "?") -> np.ndarray:
    """Dense coefficient vector of a complex over the species order."""
    index = {s: i for i, s in enumerate(species)}
    vec = np.zeros(len(species))
    seen = set()
    for name, coeff in cplx:
        if name in seen:
            raise MalformedNetworkError(
                f"reaction {reaction_id!r}: species {name!r} appears twice in one complex"
            )
        seen.add(name)
        try:
            vec[index[name]] = coeff
        except KeyError:
            raise MalformedNetworkError(
                f"reaction {reaction_id!r}: species {name!r} is not in the species list"
            ) from None
    return vec


def reaction_vector(rxn: Reaction, species: Sequence[str]) -> np.ndarray:
    """product - reactant for one reaction (forward direction)."""
    y = complex_vector(rxn.reactant, species, reaction_id=rxn.id)
    y_prime = complex_vector(rxn.product, species, reaction_id=rxn.id)
    return y_prime - y


def build_reaction_vectors(
    reactions: Sequence[Reaction],
    species: Sequence[str] | None = None,
) -> ReactionVectors:
    """Assemble R, one row per reaction plus one negated row per reversible reaction.

    Parameters
    - reactions: the network's reactions, in order
    - species: column order; if None, resolve_species(reactions)

    Notes
    - The reversed row is an exact sign flip of the forward row.
    """
    reactions = tuple(reactions)
    species = resolve_species(reactions) if species is None else tuple(species)
    m = len(species)

    rows = []
    row_to_reaction = []
    row_sign = []

    for rho, rxn in enumerate(reactions):
        v = reaction_vector(rxn, species)
        rows.append(v)
        row_to_reaction.append(rho)
        row_sign.append(+1)

        if rxn.reversible:
            rows.append(-v)
            row_to_reaction.append(rho)
            row_sign.append(-1)

    R = np.stack(rows, axis=0) if rows else np.zeros((0, m))

    return ReactionVectors(
        R=R,
        species=species,
        row_to_reaction=np.asarray(row_to_reaction, dtype=int),
        row_sign=np.asarray(row_sign, dtype=int),
    )
