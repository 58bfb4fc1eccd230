#!/usr/bin/env python3
"""
Demo 1: Orthogonal complement of the stoichiometric subspace
=============================================================

Networks:
  enzyme:     E + S <-> ES -> E + P
  chain:      A -> B -> C
  dimer:      2 A <-> A2,  A + B <-> AB

For each network we print the rank of the stoichiometric subspace, the rank
of its orthogonal complement, and the complement basis labeled by nonpivot
species, followed by the primitive integer conservation laws.

Usage:
  python demos/demo_01_orthogonal_complement.py
  python demos/demo_01_orthogonal_complement.py --network enzyme
  python demos/demo_01_orthogonal_complement.py --reaction "A + B -> C" --reaction "C <-> D"
"""

import argparse

from crn_orthcomp import network_from_strings, run_pipeline
from crn_orthcomp.conservation import conservation_laws
from crn_orthcomp.report import format_report

NETWORKS = {
    'enzyme': [
        'R1: E + S <-> ES',
        'R2: ES -> E + P',
    ],
    'chain': [
        'R1: A -> B',
        'R2: B -> C',
    ],
    'dimer': [
        'R1: 2 A <-> A2',
        'R2: A + B <-> AB',
    ],
}


def show(name, lines, precision):
    network = network_from_strings(lines, network_id=name)
    result = run_pipeline(network)

    print("=" * 60)
    print(f"Network: {name}")
    print("=" * 60)
    for line in lines:
        print(f"  {line}")
    print()
    print(format_report(result, precision=precision))

    laws = conservation_laws(result)
    if laws:
        print("\nConservation laws:")
        for label, r in laws:
            terms = " + ".join(
                f"{c}*{s}" if c != 1 else s
                for s, c in zip(result.species, r.tolist()) if c != 0
            )
            print(f"  [{label}]  {terms} = const")
    print()


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--network', choices=sorted(NETWORKS), help='Run a single built-in network')
    parser.add_argument('--reaction', action='append', default=[],
                        help='Reaction string, e.g. "A + 2 B <-> C" (repeatable)')
    parser.add_argument('--precision', type=int, default=4)
    args = parser.parse_args()

    if args.reaction:
        show('custom', args.reaction, args.precision)
        return

    names = [args.network] if args.network else sorted(NETWORKS)
    for name in names:
        show(name, NETWORKS[name], args.precision)


if __name__ == '__main__':
    main()
