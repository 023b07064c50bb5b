"""Mixed integer GA runner.

Usage:
    python -m cantilever.cli.run_ga --variant discrete --outdir ./results
    python -m cantilever.cli.run_ga --variant all --pop 150 --gen 200 --seed 0
    python -m cantilever.cli.run_ga --config beam.yaml

Outputs (per variant, under <outdir>/<variant>):
    best_X.npy    - Best design, engineering units
    best_F.npy    - Best volume
    best_G.npy    - Constraint residuals of the best design
    summary.json  - Run metadata and statistics
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import Any

import numpy as np

from ..core.archive_io import save_archive
from ..core.config import CantileverConfig, default_config, load_config, merge_config
from ..core.errors import CantileverError
from ..core.logging import get_logger, set_log_level
from ..paths import OUTPUT_DIR

log = get_logger(__name__)

# Exit flags reported in the summary
EXIT_FEASIBLE = 1
EXIT_INFEASIBLE = -2


def run_ga(config: CantileverConfig) -> dict[str, Any]:
    """Solve the configured variant with pymoo's GA.

    Population size, generations, seed and function tolerance come from
    config.ga. The elite count is the number of parents kept when each
    generation produces pop_size - elite_count offspring under pymoo's
    elitist (mu + lambda) survival.

    Returns:
        Summary dict with coded and decoded best x, volume, residuals,
        feasibility and exit flag.
    """
    # Import here to avoid loading pymoo at module level
    from pymoo.algorithms.soo.nonconvex.ga import GA
    from pymoo.config import Config
    from pymoo.optimize import minimize
    from pymoo.termination.default import DefaultSingleObjectiveTermination

    from ..adapters.pymoo_problem import CantileverProblem
    from ..core.evaluator import evaluate_candidate

    # Keep stdout clean for the JSON summary
    Config.warnings["not_compiled"] = False

    variant = config.to_variant()
    params = config.beam.to_params()
    ga_cfg = config.ga

    problem = CantileverProblem(variant=variant, params=params)
    n_offsprings = ga_cfg.pop_size - ga_cfg.elite_count

    algorithm = GA(
        pop_size=ga_cfg.pop_size,
        n_offsprings=n_offsprings,
        repair=problem.make_repair(),
        eliminate_duplicates=True,
        return_least_infeasible=True,
    )
    termination = DefaultSingleObjectiveTermination(
        ftol=ga_cfg.ftol,
        n_max_gen=ga_cfg.n_gen,
        n_max_evals=ga_cfg.pop_size + ga_cfg.n_gen * n_offsprings,
    )

    log.info(
        "Starting GA",
        variant=variant.name,
        pop_size=ga_cfg.pop_size,
        n_gen=ga_cfg.n_gen,
        elite_count=ga_cfg.elite_count,
        seed=ga_cfg.seed,
    )

    t_start = time.perf_counter()
    with log.timer("ga_solve"):
        result = minimize(problem, algorithm, termination, seed=ga_cfg.seed, verbose=False)
    t_elapsed = time.perf_counter() - t_start

    if result.X is None:
        raise CantileverError(f"GA returned no solution for variant {variant.name!r}")

    x_best = np.asarray(result.X, dtype=np.float64).reshape(-1)
    best = evaluate_candidate(x_best, variant, params)

    summary = {
        "variant": variant.name,
        "x_coded": x_best.tolist(),
        "x_decoded": best.diag["x_decoded"],
        "volume": best.volume,
        "G": best.G.tolist(),
        "is_feasible": best.is_feasible,
        "max_violation": best.max_violation,
        "exit_flag": EXIT_FEASIBLE if best.is_feasible else EXIT_INFEASIBLE,
        "n_evals": problem.n_evals,
        "n_gen": int(result.algorithm.n_iter),
        "elapsed_s": t_elapsed,
        "pop_size": ga_cfg.pop_size,
        "elite_count": ga_cfg.elite_count,
        "ftol": ga_cfg.ftol,
        "seed": ga_cfg.seed,
        "integer_vars": list(variant.integer_vars),
    }

    log.info(
        "GA finished",
        variant=variant.name,
        volume=summary["volume"],
        feasible=summary["is_feasible"],
        n_evals=summary["n_evals"],
    )
    return summary


def main(argv: list[str] | None = None) -> int:
    """Run GA optimization.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success).
    """
    parser = argparse.ArgumentParser(description="Solve the stepped cantilever with a GA")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument(
        "--variant",
        type=str,
        default=None,
        choices=["continuous", "discrete", "all"],
        help="Problem variant (overrides config)",
    )
    parser.add_argument("--pop", type=int, default=None, help="Population size")
    parser.add_argument("--gen", type=int, default=None, help="Number of generations")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--output",
        "--outdir",
        type=str,
        default=str(OUTPUT_DIR),
        dest="output",
        help="Output directory",
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose output")

    args = parser.parse_args(argv)
    set_log_level("DEBUG" if args.verbose else "INFO")

    base = load_config(args.config) if args.config else default_config()
    ga_overrides = {
        k: v
        for k, v in (("pop_size", args.pop), ("n_gen", args.gen), ("seed", args.seed))
        if v is not None
    }
    config = merge_config(base, {"ga": ga_overrides}) if ga_overrides else base

    variant = args.variant or config.variant
    variants = ["continuous", "discrete"] if variant == "all" else [variant]

    output_dir = Path(args.output)
    summaries = {}
    for name in variants:
        cfg = config.model_copy(update={"variant": name})
        try:
            summary = run_ga(cfg)
        except CantileverError as e:
            log.error("GA run failed", variant=name, error=str(e), details=e.details)
            return 1

        archive_dir = output_dir / name
        save_archive(
            archive_dir,
            np.array(summary["x_decoded"]),
            np.array([summary["volume"]]),
            np.array(summary["G"]),
            summary,
        )
        log.info("Archive saved", variant=name, path=str(archive_dir))
        summaries[name] = summary

    print(json.dumps(summaries, indent=2))
    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
