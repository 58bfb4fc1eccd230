"""Text rendering of a PipelineResult.

Layout of format_report():

  We have a vector subspace of R3
  Rank of the stoichiometric subspace: 2
  Rank of its orthogonal complement: 1

  Species        C
  -------  -------
  A         1.0000
  B         1.0000
  C         1.0000

Rendering only; values are formatted, never changed.
"""

from __future__ import annotations

from .api import PipelineResult


def summary_lines(result: PipelineResult) -> list[str]:
    return [
        f"We have a vector subspace of R{result.n_species}",
        f"Rank of the stoichiometric subspace: {result.stoichiometric_rank}",
        f"Rank of its orthogonal complement: {result.complement_rank}",
    ]


def format_basis_table(result: PipelineResult, *, precision: int = 4) -> str:
    """Species column followed by one column per nonpivot species."""
    header = ["Species", *result.nonpivot]
    body = [
        [name, *(f"{x:.{precision}f}" for x in row)]
        for name, row in zip(result.species, result.basis)
    ]
    widths = [max(len(r[c]) for r in [header, *body]) for c in range(len(header))]

    def line(cells):
        first = cells[0].ljust(widths[0])
        rest = [c.rjust(w) for c, w in zip(cells[1:], widths[1:])]
        return "  ".join([first, *rest]).rstrip()

    out = [line(header), line(["-" * w for w in widths])]
    out += [line(r) for r in body]
    return "\n".join(out)


def format_report(result: PipelineResult, *, precision: int = 4) -> str:
    return "\n".join(summary_lines(result)) + "\n\n" + format_basis_table(result, precision=precision)
