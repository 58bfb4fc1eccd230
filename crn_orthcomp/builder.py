"""Convenience constructors for Network values.

Two ways to enter a network:
- add_reaction(): append one reaction given parallel species/stoichiometry lists
- parse_reaction() / network_from_strings(): reaction strings like

    "R1: A + 2 B <-> C"
    "0 -> X"
    "0.5 O2 + H2 -> H2O"

Arrows: "->" (irreversible), "<->" and "<=>" (reversible).
The empty complex is written "0" or "∅".

Every function returns a new Network; nothing is modified in place.
"""

from __future__ import annotations

import re
from typing import Iterable, Sequence

from .errors import MalformedNetworkError
from .network import Network, Reaction

_ARROW = re.compile(r"<->|<=>|->")
_TERM = re.compile(r"^\s*(?P<coeff>[0-9]*\.?[0-9]+(?:[eE][-+]?[0-9]+)?)?\s*\*?\s*(?P<name>[A-Za-z_\[(][^\s+]*)\s*$")
_EMPTY = {"", "0", "∅"}


def _pair_up(species: Sequence[str], stoichiometry: Sequence[float], side: str, reaction_id: str):
    species = list(species)
    stoichiometry = list(stoichiometry)
    if len(species) != len(stoichiometry):
        raise MalformedNetworkError(
            f"reaction {reaction_id!r}: {side} has {len(species)} species "
            f"but {len(stoichiometry)} stoichiometric coefficients"
        )
    return tuple(zip(species, stoichiometry))


def add_reaction(
    network: Network,
    reaction_id: str,
    reactant_species: Sequence[str],
    reactant_stoichiometry: Sequence[float],
    product_species: Sequence[str],
    product_stoichiometry: Sequence[float],
    *,
    reversible: bool = False,
    kinetic: object | None = None,
) -> Network:
    """Return a copy of network with one more reaction appended.

    The species lists and stoichiometry lists are position-aligned.
    """
    rxn = Reaction(
        id=reaction_id,
        reactant=_pair_up(reactant_species, reactant_stoichiometry, "reactant", reaction_id),
        product=_pair_up(product_species, product_stoichiometry, "product", reaction_id),
        reversible=reversible,
        kinetic=kinetic,
    )
    return Network(id=network.id, reactions=network.reactions + (rxn,))


def _parse_complex(text: str, source: str) -> tuple[tuple[str, float], ...]:
    text = text.strip()
    if text in _EMPTY:
        return ()
    out = []
    for term in text.split("+"):
        m = _TERM.match(term)
        if m is None:
            raise MalformedNetworkError(f"cannot parse term {term.strip()!r} in reaction: {source}")
        coeff = float(m.group("coeff")) if m.group("coeff") else 1.0
        out.append((m.group("name"), coeff))
    return tuple(out)


def parse_reaction(text: str, reaction_id: str | None = None) -> Reaction:
    """Parse a reaction string into a Reaction.

    An "id:" prefix sets the reaction id unless reaction_id is given.
    Without either, the id is the reaction text itself.
    """
    body = text.strip()
    prefix, sep, rest = body.partition(":")
    if sep and _ARROW.search(prefix) is None:
        if reaction_id is None:
            reaction_id = prefix.strip()
        body = rest.strip()

    arrows = _ARROW.findall(body)
    if len(arrows) != 1:
        raise MalformedNetworkError(f"reaction must contain exactly one of '->', '<->', '<=>': {text}")
    left, right = _ARROW.split(body)

    return Reaction(
        id=body if reaction_id is None else reaction_id,
        reactant=_parse_complex(left, text),
        product=_parse_complex(right, text),
        reversible=arrows[0] != "->",
    )


def network_from_strings(lines: Iterable[str], network_id: str = "network") -> Network:
    """Build a Network from reaction strings; blank lines and '#' comments are skipped."""
    reactions = []
    for line in lines:
        line = line.split("#", 1)[0].strip()
        if not line:
            continue
        reactions.append(parse_reaction(line))
    return Network(id=network_id, reactions=tuple(reactions))
