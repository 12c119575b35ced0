import numpy as np
import pytest

from resampling.components.splitters.strata import make_strata


def test_numeric_column_is_cut_into_quartiles():
    codes = make_strata(np.arange(100, dtype=float))
    assert np.bincount(codes).tolist() == [25, 25, 25, 25]


def test_few_distinct_values_become_levels():
    codes = make_strata([1, 1, 2, 2, 3, 3, 3, 1, 2, 3])
    assert sorted(np.unique(codes).tolist()) == [0, 1, 2]


def test_small_numeric_bin_merges_into_a_neighbour():
    values = [1] * 40 + [2] * 45 + [3] * 3 + [4] * 12
    codes = make_strata(values, breaks=4, pool=0.1)
    counts = np.bincount(codes).tolist()
    assert len(counts) == 3
    assert sum(counts) == 100
    assert min(counts) >= 10


def test_rare_level_is_pooled():
    values = ["a"] * 50 + ["b"] * 45 + ["c"] * 5
    codes = make_strata(values, pool=0.1)
    assert sorted(np.bincount(codes).tolist()) == [50, 50]


def test_missing_values_are_rejected():
    with pytest.raises(ValueError):
        make_strata([1.0, None, 2.0])
