"""Tests for GA runs, archive metadata and version stamping."""

import json
from pathlib import Path

import numpy as np
import pytest

from cantilever.cli.run_ga import EXIT_FEASIBLE, EXIT_INFEASIBLE, main as ga_main
from cantilever.core.archive_io import load_archive, save_archive
from cantilever.core.constants import ENCODING_VERSION


def test_summary_contains_versions(tmp_path):
    """Run a tiny GA job per variant and verify metadata is stamped."""
    exit_code = ga_main(
        ["--variant", "all", "--pop", "20", "--gen", "3", "--seed", "11", "--outdir", str(tmp_path)]
    )
    assert exit_code == 0

    for variant in ("continuous", "discrete"):
        summary_path = Path(tmp_path) / variant / "summary.json"
        assert summary_path.exists(), f"summary.json missing for {variant}"

        with open(summary_path) as f:
            summary = json.load(f)

        assert summary["encoding_version"] == ENCODING_VERSION
        assert summary["variant"] == variant
        assert summary["n_var"] == 10
        assert len(summary["constraint_names"]) == 11
        assert summary["exit_flag"] in (EXIT_FEASIBLE, EXIT_INFEASIBLE)
        assert summary["exit_flag"] == (EXIT_FEASIBLE if summary["is_feasible"] else EXIT_INFEASIBLE)
        assert summary["n_evals"] > 0

        X, F, G, _ = load_archive(Path(tmp_path) / variant)
        assert X.shape == (1, 10)
        assert F[0, 0] == pytest.approx(summary["volume"])
        assert G.shape == (1, 11)


def test_archive_path_logged(tmp_path, capsys):
    ga_main(["--variant", "continuous", "--pop", "20", "--gen", "2", "--outdir", str(tmp_path)])
    err = capsys.readouterr().err
    records = [json.loads(line) for line in err.splitlines() if line.startswith("{")]

    saved = [r for r in records if r["message"] == "Archive saved"]
    assert len(saved) == 1
    assert saved[0]["variant"] == "continuous"
    assert saved[0]["path"] == str(tmp_path / "continuous")


def test_discrete_run_reports_engineering_units(tmp_path):
    ga_main(["--variant", "discrete", "--pop", "20", "--gen", "2", "--outdir", str(tmp_path)])
    with open(tmp_path / "discrete" / "summary.json") as f:
        summary = json.load(f)

    coded = summary["x_coded"]
    decoded = summary["x_decoded"]
    assert all(float(c).is_integer() and 1 <= c <= 4 for c in coded[2:6])
    assert {decoded[2], decoded[4]} <= {2.4, 2.6, 2.8, 3.1}
    assert {decoded[3], decoded[5]} <= {45.0, 50.0, 55.0, 60.0}
    assert float(coded[0]).is_integer() and float(coded[1]).is_integer()


def test_load_archive_rejects_other_encoding(tmp_path):
    save_archive(tmp_path, np.ones(10), np.array([500.0]), np.zeros(11), {})
    summary_path = tmp_path / "summary.json"
    summary = json.loads(summary_path.read_text())
    summary["encoding_version"] = "0.0"
    summary_path.write_text(json.dumps(summary))

    with pytest.raises(ValueError, match="Encoding version mismatch"):
        load_archive(tmp_path)


def test_load_archive_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_archive(tmp_path)
