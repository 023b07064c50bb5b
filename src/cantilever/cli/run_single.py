"""Single candidate evaluation CLI.

Usage:
    python -m cantilever.cli.run_single --variant discrete --x "[3,50,2,3,2,3,3,55,3,55]"

Outputs JSON with F, G, decoded x and per-constraint records to stdout.
"""

from __future__ import annotations

import argparse
import json

import numpy as np

from ..core.errors import CantileverError
from ..core.logging import get_logger

log = get_logger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Run single candidate evaluation.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success, 1 = evaluation error).
    """
    parser = argparse.ArgumentParser(description="Evaluate a single cantilever design")
    parser.add_argument(
        "--variant", type=str, default="continuous", choices=["continuous", "discrete"]
    )
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--x", type=str, default=None, help="Candidate vector as JSON array")
    parser.add_argument("--random", action="store_true", help="Use random candidate")

    args = parser.parse_args(argv)

    from ..core.evaluator import evaluate_candidate
    from ..core.variants import check_bounds, get_variant, mid_bounds_candidate, random_candidate

    variant = get_variant(args.variant)

    # Get candidate
    if args.x is not None:
        x = np.array(json.loads(args.x), dtype=np.float64)
    elif args.random:
        rng = np.random.default_rng(args.seed)
        x = random_candidate(variant, rng)
    else:
        x = mid_bounds_candidate(variant)

    try:
        result = evaluate_candidate(x, variant)
    except CantileverError as e:
        log.error("Evaluation failed", variant=variant.name, error=str(e), details=e.details)
        return 1

    output = {
        "x": x.tolist(),
        "x_decoded": result.diag["x_decoded"],
        "out_of_domain": check_bounds(x, variant),
        "F": result.F.tolist(),
        "G": result.G.tolist(),
        "is_feasible": result.is_feasible,
        "max_violation": result.max_violation,
        "constraints": result.diag["constraints"],
        "timings": result.diag["timings"],
    }

    print(json.dumps(output, indent=2))

    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
