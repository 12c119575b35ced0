import pytest

from resampling.errors import InvalidConfiguration
from resampling.registries.splitters import make_resamples


class TestRollingOrigin:
    def test_sliding_window(self):
        splits = make_resamples(15, strategy="rolling_origin", initial=8, assess=3, skip=0, cumulative=False)
        assert len(splits) == 5
        for k, s in enumerate(splits):
            assert s.analysis.tolist() == list(range(k, k + 8))
            assert s.assessment.tolist() == list(range(k + 8, k + 11))
        assert splits.ids == ["Slice1", "Slice2", "Slice3", "Slice4", "Slice5"]

    def test_cumulative_window_grows(self):
        splits = make_resamples(15, strategy="rolling_origin", initial=8, assess=3, cumulative=True)
        assert [s.n_analysis for s in splits] == [8, 9, 10, 11, 12]
        assert all(s.analysis[0] == 0 for s in splits)

    def test_skip_thins_the_origins(self):
        splits = make_resamples(15, strategy="rolling_origin", initial=8, assess=3, skip=1, cumulative=False)
        assert [s.assessment[0] for s in splits] == [8, 10, 12]

    def test_lag_overlaps_assessment_with_analysis_tail(self):
        splits = make_resamples(12, strategy="rolling_origin", initial=5, assess=2, lag=2, cumulative=False)
        first = splits[0]
        assert first.analysis.tolist() == [0, 1, 2, 3, 4]
        assert first.assessment.tolist() == [3, 4, 5, 6]

    def test_window_larger_than_data(self):
        with pytest.raises(InvalidConfiguration, match="no rolling-origin splits"):
            make_resamples(10, strategy="rolling_origin", initial=8, assess=3)

    def test_exact_fit_gives_one_split(self):
        splits = make_resamples(11, strategy="rolling_origin", initial=8, assess=3)
        assert len(splits) == 1

    def test_lag_cannot_exceed_initial(self):
        with pytest.raises(InvalidConfiguration):
            make_resamples(20, strategy="rolling_origin", initial=3, assess=2, lag=4)
