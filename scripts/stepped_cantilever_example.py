#!/usr/bin/env python3
"""Solve both stepped cantilever formulations and compare volumes.

1. continuous: x1, x2 integer (machined to the nearest cm), rest real.
2. discrete: sections 2 and 3 additionally chosen from standard sizes
   [2.4, 2.6, 2.8, 3.1] cm x [45, 50, 55, 60] cm.

Thanedar & Vanderplaats (J. Struct. Eng. 121(3), 1995) report a minimum
volume of about 64558 cm^3 for the discrete problem.
"""

from __future__ import annotations

import argparse

import numpy as np

from cantilever.cli.run_ga import run_ga
from cantilever.core.config import default_config, merge_config

REFERENCE_VOLUME = 64558.0


def main():
    parser = argparse.ArgumentParser(description="Stepped cantilever GA example")
    parser.add_argument("--pop", type=int, default=150, help="Population size")
    parser.add_argument("--gen", type=int, default=200, help="Number of generations")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    args = parser.parse_args()

    base = merge_config(
        default_config(), {"ga": {"pop_size": args.pop, "n_gen": args.gen, "seed": args.seed}}
    )

    results = {}
    for variant in ("continuous", "discrete"):
        summary = run_ga(base.model_copy(update={"variant": variant}))
        results[variant] = summary
        print(f"\n[{variant}]")
        print(f"  xbest = {np.round(summary['x_decoded'], 4).tolist()}")
        print(f"  Cost function returned by ga = {summary['volume']:g}")
        print(f"  feasible = {summary['is_feasible']}")

    disc = results["discrete"]["volume"]
    cont = results["continuous"]["volume"]
    print(f"\nDiscrete penalty over continuous: {disc - cont:+.1f} cm^3")
    print(f"Reference (discrete): {REFERENCE_VOLUME:g} cm^3, found {disc:g} cm^3")


if __name__ == "__main__":
    main()
