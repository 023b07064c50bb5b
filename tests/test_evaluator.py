"""Test decoding adapter and candidate evaluation."""

from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from cantilever.core.constraints import beam_constraints
from cantilever.core.encoding import DISCRETE_MAP, IDENTITY_MAP
from cantilever.core.errors import DimensionMismatchError, IndexOutOfRangeError
from cantilever.core.evaluator import (
    DiscreteProblemAdapter,
    evaluate_candidate,
    evaluate_candidate_batch,
    with_decoding,
)
from cantilever.core.objective import beam_volume
from cantilever.core.types import BeamParams
from cantilever.core.variants import CONTINUOUS, DISCRETE, random_candidate


def test_adapter_volume_matches_decoded(coded_discrete, decoded_discrete):
    adapter = DiscreteProblemAdapter(encoding_map=DISCRETE_MAP)
    assert adapter.volume(coded_discrete) == beam_volume(decoded_discrete)
    assert adapter.volume(coded_discrete) == pytest.approx(76600.0)


def test_adapter_constraints_match_decoded(coded_discrete, decoded_discrete):
    adapter = DiscreteProblemAdapter.for_variant(DISCRETE)
    c, ceq = adapter.constraints(coded_discrete)
    c_ref, _ = beam_constraints(decoded_discrete)
    np.testing.assert_array_equal(c, c_ref)
    assert ceq.size == 0


def test_identity_adapter_is_transparent():
    adapter = DiscreteProblemAdapter(encoding_map=IDENTITY_MAP)
    x = np.array([3, 60, 3.1, 55, 2.6, 50, 2.2, 45, 1.8, 35], dtype=float)
    assert adapter.volume(x) == beam_volume(x)
    np.testing.assert_array_equal(adapter.constraints(x)[0], beam_constraints(x)[0])


def test_adapter_binds_params(ones):
    adapter = DiscreteProblemAdapter(encoding_map=IDENTITY_MAP, params=BeamParams(section_length=10.0))
    assert adapter.volume(ones) == 50.0


def test_adapter_decode(coded_discrete, decoded_discrete):
    adapter = DiscreteProblemAdapter.for_variant(DISCRETE)
    np.testing.assert_array_equal(adapter.decode(coded_discrete), decoded_discrete)


def test_adapter_propagates_bad_code(coded_discrete):
    adapter = DiscreteProblemAdapter.for_variant(DISCRETE)
    coded_discrete[2] = 0
    with pytest.raises(IndexOutOfRangeError):
        adapter.volume(coded_discrete)


def test_with_decoding_wraps_any_function(coded_discrete, decoded_discrete):
    seen = []

    def capture(x):
        seen.append(x.copy())
        return float(x.sum())

    wrapped = with_decoding(capture, DISCRETE_MAP)
    assert wrapped(coded_discrete) == pytest.approx(decoded_discrete.sum())
    np.testing.assert_array_equal(seen[0], decoded_discrete)
    assert wrapped.__name__ == "capture"


def test_evaluate_candidate_shapes(coded_discrete):
    result = evaluate_candidate(coded_discrete, DISCRETE)

    assert result.F.shape == (1,)
    assert result.G.shape == (11,)
    assert result.H.shape == (0,)
    assert result.volume == pytest.approx(76600.0)
    assert result.diag["variant"] == "discrete"
    assert result.diag["x_decoded"][2] == 2.6
    assert len(result.diag["constraints"]) == 11
    assert result.diag["timings"]["total_ms"] >= 0


def test_upper_bounds_feasible_in_both_variants():
    for variant in (CONTINUOUS, DISCRETE):
        _, xu = variant.bounds()
        result = evaluate_candidate(xu, variant)
        assert result.is_feasible, f"{variant.name}: {result.G}"
        assert result.max_violation == 0.0


def test_max_violation_property(ones):
    result = evaluate_candidate(ones, CONTINUOUS)
    assert not result.is_feasible
    assert result.max_violation == float(np.max(np.maximum(result.G, 0)))


def test_evaluate_wrong_length():
    with pytest.raises(DimensionMismatchError):
        evaluate_candidate(np.ones(12), CONTINUOUS)


def test_batch_matches_single():
    rng = np.random.default_rng(3)
    X = np.stack([random_candidate(DISCRETE, rng) for _ in range(8)])
    F_all, G_all, diags = evaluate_candidate_batch(X, DISCRETE)

    assert F_all.shape == (8, 1)
    assert G_all.shape == (8, 11)
    assert len(diags) == 8
    for i, x in enumerate(X):
        single = evaluate_candidate(x, DISCRETE)
        np.testing.assert_array_equal(F_all[i], single.F)
        np.testing.assert_array_equal(G_all[i], single.G)


def test_batch_empty_population():
    F_all, G_all, diags = evaluate_candidate_batch(np.zeros((0, 10)), DISCRETE)
    assert F_all.shape == (0, 1)
    assert G_all.shape == (0, 11)
    assert diags == []


def test_determinism_same_inputs(coded_discrete):
    r1 = evaluate_candidate(coded_discrete, DISCRETE)
    r2 = evaluate_candidate(coded_discrete, DISCRETE)
    np.testing.assert_array_equal(r1.F, r2.F)
    np.testing.assert_array_equal(r1.G, r2.G)


def test_concurrent_evaluation_matches_serial():
    """Evaluations share no state, so a thread pool gives the serial answers."""
    rng = np.random.default_rng(11)
    X = [random_candidate(DISCRETE, rng) for _ in range(64)]
    adapter = DiscreteProblemAdapter.for_variant(DISCRETE)

    serial = [adapter.volume(x) for x in X]
    with ThreadPoolExecutor(max_workers=8) as pool:
        parallel = list(pool.map(adapter.volume, X))

    assert parallel == serial
