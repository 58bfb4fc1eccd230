"""Network model and species resolution."""

from __future__ import annotations

import dataclasses
import math

import pytest

from crn_orthcomp.errors import MalformedNetworkError
from crn_orthcomp.network import Network, Reaction, resolve_species


def test_species_sorted_and_deduplicated():
    net = Network(reactions=(
        Reaction("r1", reactant=[("B", 1)], product=[("A", 1)]),
        Reaction("r2", reactant=[("C", 1), ("A", 1)], product=[("D", 2)]),
    ))
    assert net.species == ("A", "B", "C", "D")
    assert net.n_species == 4
    assert net.n_reactions == 2


def test_species_order_is_codepoint_order():
    # uppercase sorts before lowercase; "A" < "A2" < "AB"
    rxns = [Reaction("r", reactant=[("a", 1), ("AB", 1)], product=[("A2", 1), ("A", 1)])]
    assert resolve_species(rxns) == ("A", "A2", "AB", "a")


def test_empty_network():
    net = Network(id="empty")
    assert net.species == ()
    assert net.reactions == ()
    assert resolve_species([]) == ()


def test_complex_accepts_mapping_and_coerces_floats():
    rxn = Reaction("r", reactant={"A": 2}, product=[("B", "0.5")], reversible=1)
    assert rxn.reactant == (("A", 2.0),)
    assert rxn.product == (("B", 0.5),)
    assert rxn.reversible is True
    assert rxn.reactant_species == ("A",)


def test_kinetic_is_carried_unchanged():
    kin = {"reactant_order": [1.0]}
    rxn = Reaction("r", reactant=[("A", 1)], kinetic=kin)
    assert rxn.kinetic is kin


@pytest.mark.parametrize("coeff", [math.nan, math.inf, "x", None])
def test_bad_coefficient_rejected(coeff):
    with pytest.raises(MalformedNetworkError):
        Reaction("r", reactant=[("A", coeff)])


@pytest.mark.parametrize("entry", ["A", "X2", ("A",), ("A", 1, 2), 7, (3, 1.0)])
def test_bad_complex_entry_rejected(entry):
    with pytest.raises(MalformedNetworkError):
        Reaction("r", reactant=[entry], product=[("Y", 1)])


def test_network_requires_reactions():
    with pytest.raises(TypeError):
        Network(reactions=("A -> B",))


def test_network_is_frozen():
    net = Network(reactions=(Reaction("r", reactant=[("A", 1)]),))
    with pytest.raises(dataclasses.FrozenInstanceError):
        net.species = ("Z",)


def test_species_index():
    net = Network(reactions=(Reaction("r", reactant=[("B", 1)], product=[("A", 1)]),))
    assert net.species_index("B") == 1
    with pytest.raises(KeyError):
        net.species_index("C")
