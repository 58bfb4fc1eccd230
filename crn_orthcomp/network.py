"""Network model: species, complexes, reactions.

A complex is stored as a tuple of (species, coefficient) pairs. The species
list of a Network is derived from its reactions when the Network is built
and is never set independently:

  species = sorted(set(reactant species) | set(product species))

The sorted order fixes the column order of every matrix downstream and
therefore the pivot tie-breaking of the row reductions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from math import isfinite
from typing import Iterable, Mapping, Sequence, Union

from .errors import MalformedNetworkError

Complex = tuple[tuple[str, float], ...]
ComplexLike = Union[Mapping[str, float], Sequence[tuple[str, float]]]


def as_complex(cplx: ComplexLike | None) -> Complex:
    """Normalize a mapping or sequence of (species, coeff) pairs to a Complex."""
    if cplx is None:
        return ()
    items = cplx.items() if isinstance(cplx, Mapping) else cplx
    out = []
    for entry in items:
        if isinstance(entry, (str, bytes)) or not isinstance(entry, Sequence) or len(entry) != 2:
            raise MalformedNetworkError(f"complex entry must be a (species, coefficient) pair, got {entry!r}")
        name, coeff = entry
        if not isinstance(name, str):
            raise MalformedNetworkError(f"species name must be a string, got {name!r}")
        try:
            c = float(coeff)
        except (TypeError, ValueError) as e:
            raise MalformedNetworkError(f"coefficient of {name!r} is not a real number: {coeff!r}") from e
        if not isfinite(c):
            raise MalformedNetworkError(f"coefficient of {name!r} is not finite: {coeff!r}")
        out.append((str(name), c))
    return tuple(out)


@dataclass(frozen=True)
class Reaction:
    """One reaction reactant -> product.

    ``kinetic`` is carried along for callers (e.g. kinetic orders) and is
    never read by the stoichiometric computations.
    """

    id: str
    reactant: Complex = ()
    product: Complex = ()
    reversible: bool = False
    kinetic: object | None = None

    def __post_init__(self):
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(self, "reactant", as_complex(self.reactant))
        object.__setattr__(self, "product", as_complex(self.product))
        object.__setattr__(self, "reversible", bool(self.reversible))

    @property
    def reactant_species(self) -> tuple[str, ...]:
        return tuple(s for s, _ in self.reactant)

    @property
    def product_species(self) -> tuple[str, ...]:
        return tuple(s for s, _ in self.product)


def resolve_species(reactions: Iterable[Reaction]) -> tuple[str, ...]:
    """Sorted, deduplicated species of all reactant and product complexes."""
    reactions = tuple(reactions)
    names = [s for rxn in reactions for s in rxn.reactant_species]
    names += [s for rxn in reactions for s in rxn.product_species]
    return tuple(sorted(set(names)))


@dataclass(frozen=True)
class Network:
    """A chemical reaction network.

    Shapes downstream:
      R: (r, m) with r = len(reactions) + number of reversible reactions
      m = len(species)
    """

    id: str = "network"
    reactions: tuple[Reaction, ...] = ()
    species: tuple[str, ...] = field(init=False)

    def __post_init__(self):
        reactions = tuple(self.reactions)
        for rxn in reactions:
            if not isinstance(rxn, Reaction):
                raise TypeError(f"reactions must be Reaction instances, got {type(rxn).__name__}")
        object.__setattr__(self, "reactions", reactions)
        object.__setattr__(self, "species", resolve_species(reactions))

    @property
    def n_species(self) -> int:
        return len(self.species)

    @property
    def n_reactions(self) -> int:
        return len(self.reactions)

    def species_index(self, name: str) -> int:
        try:
            return self.species.index(name)
        except ValueError:
            raise KeyError(f"species {name!r} is not in network {self.id!r}") from None
