"""Stoichiometric subspace and orthogonal-complement basis of a CRN.

Core contract:
- input: Network (reactions; species derived, sorted)
- workflow: reaction vectors -> row-space basis -> orthogonal complement
- output: (species, basis matrix (m, m-k), nonpivot species labels)
"""

from .errors import MalformedNetworkError, NumericToleranceAmbiguity
from .network import Network, Reaction, resolve_species
from .builder import add_reaction, network_from_strings, parse_reaction
from .api import PipelineResult, basis_orth_comp, compute_orthogonal_complement_basis, run_pipeline
