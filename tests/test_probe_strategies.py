"""
Tests for the probe-position strategies (interpolation, exponential, jump,
Fibonacci) and their agreement with binary search and linear scan.
"""

import math
import os
import sys

import numpy as np
import pytest

# Ensure local src/ is importable before any installed package named ordsearch
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))
from ordsearch import (
    SearchResult,
    Strategy,
    exact_search,
    exponential_search,
    fibonacci_search,
    interpolation_search,
    jump_search,
    linear_scan,
    search,
)
from tests.utils import (
    ORDERED_STRATEGIES,
    make_sorted_ints,
    probe_targets,
    reference_result,
)
from tests.visualization_utils import (
    initialize_test_run,
    print_artifact_summary,
    save_probe_artifacts,
)


def test_all_strategies_agree_on_random_integers():
    rng = np.random.RandomState(42)
    for size in [0, 1, 2, 3, 5, 8, 13, 50, 127, 500]:
        data = make_sorted_ints(rng, size, 0, 60)
        for target in probe_targets(data) or [0]:
            expected = reference_result(data, target)
            for strategy in ORDERED_STRATEGIES:
                assert search(data, target, strategy) == expected, (strategy, size, target)


def test_all_strategies_agree_on_random_floats():
    rng = np.random.RandomState(7)
    data = np.sort(rng.uniform(-50.0, 50.0, size=400))
    targets = list(data[::7]) + list(rng.uniform(-60.0, 60.0, size=50))
    for target in targets:
        expected = reference_result(data, target)
        for strategy in ORDERED_STRATEGIES:
            assert search(data, target, strategy) == expected


def test_presence_agrees_with_linear_scan():
    rng = np.random.RandomState(5)
    data = make_sorted_ints(rng, 120, 0, 40).tolist()
    for target in range(-1, 42):
        scan = linear_scan(data, target)
        for strategy in ORDERED_STRATEGIES:
            result = search(data, target, strategy)
            assert result.found == scan.found
            if scan.found:
                assert result.index == scan.index


def test_fibonacci_exhaustive_small_sizes():
    for size in range(0, 35):
        data = list(range(0, 2 * size, 2))
        for target in range(-1, 2 * size + 1):
            assert fibonacci_search(data, target) == reference_result(data, target)


def test_exponential_target_at_front():
    data = [3, 3, 4, 9, 12]
    assert exponential_search(data, 3) == SearchResult.found_at(0)
    assert exponential_search(data, 3).probes == 1
    assert exponential_search(data, 1) == SearchResult.not_found(0)
    assert exponential_search(data, 13) == SearchResult.not_found(5)


def test_interpolation_equal_boundaries_do_not_divide_by_zero():
    data = [5] * 20
    assert interpolation_search(data, 5) == SearchResult.found_at(0)
    assert interpolation_search(data, 4) == SearchResult.not_found(0)
    assert interpolation_search(data, 6) == SearchResult.not_found(20)

    plateau = [1] + [5] * 18 + [9]
    assert interpolation_search(plateau, 5) == SearchResult.found_at(1)
    assert interpolation_search(plateau, 7) == SearchResult.not_found(19)


def test_interpolation_on_skewed_data_is_still_correct():
    data = [2**i for i in range(60)]
    for target in [1, 2, 3, 2**30, 2**30 + 1, 2**59, 2**60]:
        assert interpolation_search(data, target) == reference_result(data, target)


def test_interpolation_linear_data_few_probes():
    data = np.arange(0, 300_000, 3)
    for target in [0, 3, 150_000, 299_997, 151]:
        result = interpolation_search(data, target)
        assert result == reference_result(data, target)
        assert result.probes <= 10


def test_jump_search_custom_step():
    data = list(range(100))
    for step in [1, 2, 7, 10, 99, 100, 250]:
        for target in [-1, 0, 42, 99, 100]:
            assert jump_search(data, target, step=step) == reference_result(data, target)


def test_jump_search_rejects_bad_step():
    with pytest.raises(ValueError):
        jump_search([1, 2, 3], 2, step=0)


def test_jump_search_overshoot_at_end():
    # last block is short; overshoot detection must clamp to the final element
    data = list(range(10))
    assert jump_search(data, 9, step=4) == SearchResult.found_at(9)
    assert jump_search(data, 10, step=4) == SearchResult.not_found(10)


def test_strategies_work_on_strings():
    words = sorted(["kiwi", "apple", "fig", "banana", "cherry", "date", "fig"])
    for strategy in (Strategy.BINARY, Strategy.EXPONENTIAL, Strategy.JUMP, Strategy.FIBONACCI):
        assert search(words, "fig", strategy).index == words.index("fig")
        assert search(words, "grape", strategy) == SearchResult.not_found(6)


def test_probe_counts_within_bounds():
    initialize_test_run()
    series = {s.value: [] for s in ORDERED_STRATEGIES}
    rng = np.random.RandomState(0)

    for size in [2, 10, 100, 1000, 10_000, 100_000]:
        data = np.arange(size) * 2
        targets = rng.randint(-1, 2 * size + 1, size=40)
        log_n = math.log2(size)
        root = math.isqrt(size)

        for strategy in ORDERED_STRATEGIES:
            probes = [search(data, int(t), strategy).probes for t in targets]
            series[strategy.value].append((size, float(np.mean(probes))))

            worst = max(probes)
            if strategy is Strategy.BINARY:
                assert worst <= math.ceil(math.log2(size + 1))
            elif strategy is Strategy.FIBONACCI:
                assert worst <= 1.5 * log_n + 5
            elif strategy is Strategy.EXPONENTIAL:
                assert worst <= 2 * math.ceil(log_n) + 4
            elif strategy is Strategy.JUMP:
                assert worst <= 2 * root + 3

    artifacts = save_probe_artifacts(series, test_name="probe_counts_linear_data")
    print_artifact_summary(artifacts)


def test_idempotent_results():
    rng = np.random.RandomState(9)
    data = make_sorted_ints(rng, 64, 0, 20)
    for strategy in Strategy:
        first = search(data, 10, strategy)
        second = search(data, 10, strategy)
        assert first == second
        assert first.probes == second.probes


def test_exact_search_matches_probe_family():
    data = [1, 3, 3, 3, 5, 7]
    for target in range(0, 9):
        expected = exact_search(data, target)
        assert interpolation_search(data, target) == expected
        assert exponential_search(data, target) == expected
        assert jump_search(data, target) == expected
        assert fibonacci_search(data, target) == expected


def test_interpolation_requires_numeric_values():
    with pytest.raises(ValueError, match="requires numeric values"):
        interpolation_search(["apple", "banana", "cherry"], "b")
    # strings are still fine for the comparison-only strategies
    assert exponential_search(["apple", "banana", "cherry"], "b") == SearchResult.not_found(1)


def test_artifact_directory_created_once_per_run(tmp_path, monkeypatch):
    import tests.visualization_utils as viz

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(viz, "_CURRENT_TEST_RUN_TIMESTAMP", None)
    stamp = viz.initialize_test_run()
    assert viz.initialize_test_run() == stamp

    run_dir = tmp_path / "test_artifacts" / stamp
    assert (run_dir / "test_run_info.txt").read_text().startswith("Started: ")
    assert viz.create_test_artifacts_dir("example") == run_dir.relative_to(tmp_path) / "example"
    assert (run_dir / "example").is_dir()
