import numpy as np
import pytest

from crn_orthcomp.builder import network_from_strings
from crn_orthcomp.errors import MalformedNetworkError
from crn_orthcomp.network import Reaction
from crn_orthcomp.vectors import build_reaction_vectors, complex_vector, reaction_vector


def test_reversible_rows_and_mapping():
    net = network_from_strings(["E + S <-> ES", "ES -> E + P"])
    out = build_reaction_vectors(net.reactions, net.species)

    # species: E, ES, P, S
    assert out.species == ("E", "ES", "P", "S")
    assert out.R.shape == (3, 4)
    assert out.row_to_reaction.tolist() == [0, 0, 1]
    assert out.row_sign.tolist() == [1, -1, 1]

    assert np.allclose(out.R[0], [-1, 1, 0, -1])
    assert np.array_equal(out.R[1], -out.R[0])
    assert np.allclose(out.R[2], [1, -1, 1, 0])


def test_species_default_to_resolved():
    rxns = [Reaction("r", reactant=[("B", 2)], product=[("A", 0.5)])]
    out = build_reaction_vectors(rxns)
    assert out.species == ("A", "B")
    assert np.allclose(out.R, [[0.5, -2.0]])


def test_no_reactions():
    out = build_reaction_vectors([])
    assert out.R.shape == (0, 0)
    assert out.n_rows == 0
    assert out.row_to_reaction.tolist() == []


def test_species_on_both_sides_cancels():
    rxn = Reaction("r", reactant=[("A", 1), ("B", 1)], product=[("A", 2)])
    assert np.allclose(reaction_vector(rxn, ("A", "B")), [1, -1])


def test_complex_vector():
    v = complex_vector((("C", 3.0), ("A", 1.0)), ("A", "B", "C"))
    assert v.tolist() == [1.0, 0.0, 3.0]


def test_duplicate_species_in_complex():
    rxn = Reaction("dup", reactant=[("A", 1), ("A", 2)], product=[("B", 1)])
    with pytest.raises(MalformedNetworkError, match="twice"):
        build_reaction_vectors([rxn])


def test_species_missing_from_list():
    rxn = Reaction("r", reactant=[("A", 1)], product=[("B", 1)])
    with pytest.raises(MalformedNetworkError, match="not in the species list"):
        build_reaction_vectors([rxn], species=("A",))
