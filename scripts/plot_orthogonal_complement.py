"""Plot the orthogonal-complement basis of a network as a heatmap.

Rows are species, columns are the nonpivot species labeling each basis
vector. Cell text shows the entry.

Usage:
  python scripts/plot_orthogonal_complement.py --out notes/orth_comp.png \
    --reaction "E + S <-> ES" --reaction "ES -> E + P"
"""

from __future__ import annotations

import argparse
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt

from crn_orthcomp import network_from_strings, run_pipeline


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--out", required=True)
    ap.add_argument("--reaction", action="append", required=True)
    ap.add_argument("--svg", action="store_true", help="Also save SVG")
    args = ap.parse_args()

    result = run_pipeline(network_from_strings(args.reaction))
    basis = result.basis
    if basis.size == 0:
        raise RuntimeError("orthogonal complement is trivial; nothing to plot")

    lim = float(np.max(np.abs(basis)))
    fig, ax = plt.subplots(figsize=(1.2 + 0.9 * basis.shape[1], 1.0 + 0.5 * basis.shape[0]))
    im = ax.imshow(basis, cmap="RdBu_r", vmin=-lim, vmax=lim, aspect="auto")

    for i in range(basis.shape[0]):
        for j in range(basis.shape[1]):
            ax.text(j, i, f"{basis[i, j]:g}", ha="center", va="center", fontsize=9)

    ax.set_xticks(range(basis.shape[1]), labels=result.nonpivot)
    ax.set_yticks(range(basis.shape[0]), labels=result.species)
    ax.set_xlabel("nonpivot species")
    ax.set_title(
        f"rank S = {result.stoichiometric_rank}, "
        f"dim S$^\\perp$ = {result.complement_rank}",
        fontsize=11,
    )
    fig.colorbar(im, ax=ax, shrink=0.8)

    Path(args.out).parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(args.out, dpi=150, bbox_inches="tight")
    print(f"Saved: {args.out}")

    if args.svg:
        svg_out = str(Path(args.out).with_suffix(".svg"))
        plt.savefig(svg_out, format="svg", bbox_inches="tight")
        print(f"Saved: {svg_out}")

    plt.close(fig)


if __name__ == "__main__":
    main()
