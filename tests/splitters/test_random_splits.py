import numpy as np
import pytest

from resampling.components.splitters.strata import make_strata
from resampling.errors import InvalidConfiguration
from resampling.registries.splitters import make_resamples


class TestMonteCarlo:
    def test_sizes_and_disjointness(self):
        splits = make_resamples(40, strategy="montecarlo", proportion=0.75, times=5, seed=1)
        assert len(splits) == 5
        assert splits.ids == ["Resample1", "Resample2", "Resample3", "Resample4", "Resample5"]
        for s in splits:
            assert s.n_analysis == 30
            assert s.n_assessment == 10
            assert np.intersect1d(s.analysis, s.assessment).size == 0
            assert sorted(np.concatenate([s.analysis, s.assessment]).tolist()) == list(range(40))

    def test_assessment_sets_overlap_across_draws(self):
        splits = make_resamples(30, strategy="montecarlo", proportion=0.5, times=10, seed=4)
        assessed = np.concatenate([s.assessment for s in splits])
        assert np.unique(assessed).shape[0] < assessed.shape[0]

    def test_rounds_half_up(self):
        splits = make_resamples(10, strategy="montecarlo", proportion=0.25, times=1, seed=1)
        assert splits[0].n_analysis == 3

    @pytest.mark.parametrize("proportion", [0.0, 1.0, 1.5, -0.2])
    def test_proportion_outside_unit_interval(self, proportion):
        with pytest.raises(InvalidConfiguration):
            make_resamples(10, strategy="montecarlo", proportion=proportion)

    def test_empty_analysis_is_rejected(self):
        with pytest.raises(InvalidConfiguration, match="empty analysis"):
            make_resamples(10, strategy="montecarlo", proportion=0.01)

    def test_empty_assessment_is_rejected(self):
        with pytest.raises(InvalidConfiguration, match="empty assessment"):
            make_resamples(10, strategy="montecarlo", proportion=0.99)

    def test_stratified_draw_keeps_stratum_shares(self, housing):
        splits = make_resamples(
            housing, strategy="montecarlo", proportion=0.8, times=3, seed=2, strata_field="price"
        )
        strata = make_strata(housing.frame["price"])
        for s in splits:
            for code in np.unique(strata):
                members = np.flatnonzero(strata == code)
                drawn = np.isin(s.analysis, members).sum()
                assert abs(drawn - 0.8 * members.shape[0]) <= 1


class TestValidation:
    def test_single_split(self):
        splits = make_resamples(100, strategy="validation", proportion=0.75, seed=9)
        assert len(splits) == 1
        assert splits[0].id == "validation"
        assert splits[0].n_analysis == 75
        assert splits[0].n_assessment == 25


class TestBootstrap:
    def test_draws_n_rows_with_out_of_bag_assessment(self):
        splits = make_resamples(50, strategy="bootstrap", times=20, seed=5)
        assert len(splits) == 20
        assert splits.ids[0] == "Bootstrap01"
        for s in splits:
            assert s.n_analysis == 50
            assert np.unique(s.analysis).shape[0] <= 50
            expected = np.setdiff1d(np.arange(50), np.unique(s.analysis))
            assert np.array_equal(s.assessment, expected)
            assert np.intersect1d(s.analysis, s.assessment).size == 0

    def test_out_of_bag_fraction_is_about_e_inverse(self):
        splits = make_resamples(100, strategy="bootstrap", times=200, seed=11)
        oob = np.mean([s.n_assessment / 100 for s in splits])
        assert 0.33 < oob < 0.41

    def test_stratified_draws_stay_within_strata(self, housing):
        splits = make_resamples(housing, strategy="bootstrap", times=5, seed=2, strata_field="price")
        strata = make_strata(housing.frame["price"])
        for s in splits:
            assert s.n_analysis == 100
            drawn = np.bincount(strata[s.analysis], minlength=strata.max() + 1)
            assert drawn.tolist() == np.bincount(strata).tolist()

    def test_times_must_be_positive(self):
        with pytest.raises(InvalidConfiguration):
            make_resamples(10, strategy="bootstrap", times=0)
