"""Archive IO with version guards."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import numpy as np

from .constants import ENCODING_VERSION, N_VARS
from .constraints import get_constraint_names

META_FILENAME = "summary.json"


def save_archive(
    outdir: Path,
    X: np.ndarray,
    F: np.ndarray,
    G: np.ndarray,
    summary: dict[str, Any],
) -> None:
    """Save best-solution arrays plus metadata with guards."""
    outdir.mkdir(parents=True, exist_ok=True)
    np.save(outdir / "best_X.npy", np.atleast_2d(X))
    np.save(outdir / "best_F.npy", np.atleast_2d(F))
    np.save(outdir / "best_G.npy", np.atleast_2d(G))

    summary = {
        **summary,
        "encoding_version": ENCODING_VERSION,
        "constraint_names": get_constraint_names(),
        "n_var": N_VARS,
    }
    with open(outdir / META_FILENAME, "w") as f:
        json.dump(summary, f, indent=2)


def load_archive(outdir: Path) -> tuple[np.ndarray, np.ndarray, np.ndarray, dict]:
    """Load archive with version validation. Raises on incompatible encoding."""
    summary_path = outdir / META_FILENAME
    if not summary_path.exists():
        raise FileNotFoundError(f"Missing {META_FILENAME} in {outdir}")

    with open(summary_path) as f:
        summary = json.load(f)

    enc = summary.get("encoding_version")
    if enc != ENCODING_VERSION:
        raise ValueError(f"Encoding version mismatch: archive {enc}, expected {ENCODING_VERSION}")

    X = np.load(outdir / "best_X.npy", allow_pickle=False)
    F = np.load(outdir / "best_F.npy", allow_pickle=False)
    G = np.load(outdir / "best_G.npy", allow_pickle=False)

    if X.size and X.shape[1] != summary.get("n_var", N_VARS):
        raise ValueError(f"n_var mismatch: {X.shape[1]} vs {summary.get('n_var')}")

    return X, F, G, summary
