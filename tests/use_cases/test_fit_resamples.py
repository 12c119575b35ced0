import logging
import threading
import warnings

import numpy as np
import pandas as pd
import pytest
from sklearn.linear_model import LinearRegression

from resampling.components.execution.executors import JoblibExecutor, ThreadExecutor
from resampling.components.predictors import NullModel, SklearnPredictor
from resampling.components.predictors.null_model import FittedNullModel
from resampling.core.progress import LogProgress
from resampling.errors import AggregationWarning, InvalidConfiguration
from resampling.registries.splitters import make_resamples
from resampling.use_cases.resampling import fit_resamples, run_resampling


class FailWithoutRowZero:
    """Fails whenever row 0 is held out of the analysis set."""

    def fit(self, data, outcome):
        if 0 not in set(data["row_id"]):
            raise ValueError("row 0 missing from analysis")
        return NullModel().fit(data, outcome)


class OneValuePredictor:
    def fit(self, data, outcome):
        return self

    def predict(self, new_data):
        return np.array([1.0])


@pytest.fixture
def folds(housing):
    return make_resamples(housing, strategy="kfold", v=10, seed=55)


def test_metric_summary_matches_per_split_values(housing, folds):
    res = fit_resamples(NullModel(), folds, housing, metrics=["mae"])

    assert len(res) == 10
    assert [r.id for r in res] == folds.ids
    values = np.array([r.metrics["mae"] for r in res])

    with warnings.catch_warnings():
        warnings.simplefilter("error")
        summary = res.collect_metrics()

    mae = summary.get("mae")
    assert mae.n == 10
    assert mae.mean == pytest.approx(values.mean())
    assert mae.std_err == pytest.approx(values.std(ddof=1) / np.sqrt(10))
    assert summary.warnings == []


def test_per_split_sizes_are_recorded(housing, folds):
    res = fit_resamples(NullModel(), folds, housing, metrics=["mae"])
    for r, s in zip(res, folds):
        assert (r.n_analysis, r.n_assessment) == (s.n_analysis, s.n_assessment)


def test_failed_fit_is_isolated(housing, folds):
    res = fit_resamples(FailWithoutRowZero(), folds, housing, metrics=["mae"])

    assert len(res) == 10
    assert res.n_failed == 1
    failed = [r for r in res if r.failed][0]
    assert failed.metrics == {}
    assert failed.errors[0]["where"] == "fit"
    assert "row 0 missing" in failed.notes[0]
    assert any(n.startswith(failed.label + ": fit: ValueError") for n in res.show_notes())

    with pytest.warns(AggregationWarning, match="only 9 of 10"):
        summary = res.collect_metrics()
    assert summary.get("mae").n == 9
    assert len(summary.warnings) == 1


def test_wrong_prediction_length_fails_the_split(housing, folds):
    res = fit_resamples(OneValuePredictor(), folds, housing, metrics=["mae"])
    assert res.n_failed == 10
    assert all(r.errors[0]["where"] == "predict" for r in res)
    assert "1 values for 10 assessment rows" in res[0].notes[0]


def test_saved_predictions_cover_every_row_once(housing, folds):
    res = fit_resamples(NullModel(), folds, housing, metrics=["mae"], control={"save_predictions": True})

    raw = res.collect_predictions()
    assert list(raw.columns) == ["id", "id2", "row", "observed", "predicted"]
    assert len(raw) == 100
    assert sorted(raw["row"]) == list(range(100))
    assert raw["id"].tolist() == sorted(raw["id"].tolist())

    summary = res.collect_predictions(summarize=True)
    assert summary["row"].tolist() == list(range(100))
    np.testing.assert_allclose(summary["observed"].to_numpy(dtype=float), housing.frame["price"].to_numpy())


def test_predictions_not_saved(housing, folds):
    res = fit_resamples(NullModel(), folds, housing, metrics=["mae"])
    with pytest.raises(ValueError, match="not saved"):
        res.collect_predictions()


def test_repeated_predictions_are_averaged_per_row(housing):
    reps = make_resamples(housing, strategy="repeated_kfold", v=5, repeats=3, seed=8)
    res = fit_resamples(
        NullModel(),
        reps,
        housing,
        metrics=["rmse"],
        control={"save_predictions": True, "summarize_predictions": True},
    )
    raw = res.collect_predictions(summarize=False)
    assert len(raw) == 300
    assert set(raw["id"]) == {"Repeat1", "Repeat2", "Repeat3"}

    summary = res.collect_predictions()
    expected = raw.groupby("row")["predicted"].mean()
    assert len(summary) == 100
    np.testing.assert_allclose(summary["predicted"].to_numpy(), expected.to_numpy())


def test_extract_is_kept_per_split(housing, folds):
    res = fit_resamples(NullModel(), folds, housing, metrics=["mae"], extract=lambda fitted: fitted.value)
    table = res.collect_extracts()
    assert list(table.columns) == ["id", "id2", "extract"]
    assert table["id"].tolist() == folds.ids
    assert all(isinstance(v, float) for v in table["extract"])


def test_extract_failure_keeps_metrics(housing, folds):
    def broken(fitted):
        raise KeyError("coef")

    res = fit_resamples(NullModel(), folds, housing, metrics=["mae"], extract=broken)
    assert res.n_failed == 0
    assert all("mae" in r.metrics for r in res)
    assert all(r.extracts is None for r in res)
    assert res[0].notes[0].startswith("extract: KeyError")


def test_sklearn_estimator_with_coefficient_extract(housing, folds):
    res = fit_resamples(
        SklearnPredictor(LinearRegression(), predictors=["sqft", "age"]),
        folds,
        housing,
        extract=lambda fitted: fitted.model.coef_.tolist(),
    )
    assert res.metric_names == ["rmse", "rsq"]
    summary = res.collect_metrics()
    assert summary.get("rmse").mean < 10_000
    assert summary.get("rsq").mean > 0.9
    coefs = np.array(res.collect_extracts()["extract"].tolist())
    assert coefs.shape == (10, 2)
    assert np.all(np.abs(coefs[:, 0] - 120.0) < 10.0)


def test_bare_estimator_and_callable_are_adapted(housing_frame):
    folds = make_resamples(len(housing_frame), strategy="kfold", v=5, seed=1)
    res = fit_resamples(LinearRegression(), folds, housing_frame, outcome="price", metrics=["rmse"])
    assert res.n_failed == 0

    def fit_mean(data, outcome):
        return FittedNullModel(value=float(data[outcome].mean()))

    res = fit_resamples(fit_mean, folds, housing_frame, outcome="price", metrics=["rmse"])
    assert res.n_failed == 0


@pytest.mark.parametrize(
    "executor",
    [ThreadExecutor(worker_count=4), JoblibExecutor(worker_count=3, backend="threading")],
    ids=["threads", "joblib-threading"],
)
def test_parallel_results_keep_split_order(housing, folds, executor):
    serial = fit_resamples(NullModel(), folds, housing, metrics=["mae"])
    parallel = fit_resamples(NullModel(), folds, housing, metrics=["mae"], executor=executor)
    assert [r.id for r in parallel] == folds.ids
    assert [r.metrics for r in parallel] == [r.metrics for r in serial]


def test_control_selects_a_worker_pool(housing, folds):
    res = fit_resamples(
        NullModel(), folds, housing, metrics=["mae"], control={"worker_count": 2, "backend": "threading"}
    )
    assert [r.id for r in res] == folds.ids


def test_progress_and_cancellation(housing, folds, progress_recorder):
    cancel = threading.Event()
    progress = progress_recorder(on_update=lambda current: cancel.set() if current == 3 else None)

    res = fit_resamples(NullModel(), folds, housing, metrics=["mae"], progress=progress, cancel=cancel)

    assert progress.total == 10
    assert [c for c, _ in progress.updates] == [1, 2, 3]
    assert progress.finalized
    assert len(res) == 3
    assert res.abandoned == folds.ids[3:]
    assert "7 of 10 split(s) abandoned" in res.show_notes()[-1]
    assert res.collect_metrics(summarize=True).get("mae").n == 3


def test_default_metrics_for_a_class_outcome(classes_frame):
    folds = make_resamples(len(classes_frame), strategy="kfold", v=5, seed=2)
    res = fit_resamples(NullModel(), folds, classes_frame, outcome="label")
    assert res.metric_names == ["accuracy"]
    assert res.collect_metrics().get("accuracy").mean == pytest.approx(2 / 3)


def test_undefined_metric_values_are_excluded(housing, folds):
    res = fit_resamples(NullModel(), folds, housing)
    with pytest.warns(AggregationWarning, match="rsq"):
        summary = res.collect_metrics()
    assert summary.get("rsq").n == 0
    assert np.isnan(summary.get("rsq").mean)
    assert summary.get("rmse").n == 10


def test_resamples_must_match_the_data(housing):
    with pytest.raises(InvalidConfiguration, match="made for 50 rows"):
        fit_resamples(NullModel(), make_resamples(50, v=5), housing)
    with pytest.raises(InvalidConfiguration):
        fit_resamples(NullModel(), [], housing)


def test_run_resampling_from_a_config_payload(housing_frame):
    res = run_resampling(
        NullModel(),
        housing_frame,
        outcome="price",
        metrics=["mae"],
        config={
            "resampling": {"strategy": "montecarlo", "times": 5, "proportion": 0.8, "seed": 1},
            "control": {"save_predictions": True},
        },
    )
    assert res.strategy == "montecarlo"
    assert [r.id for r in res] == ["Resample1", "Resample2", "Resample3", "Resample4", "Resample5"]
    assert len(res.collect_predictions()) == 5 * 20
    frame = res.metrics_frame()
    assert isinstance(frame, pd.DataFrame)
    assert frame["metric"].tolist() == ["mae"]


def test_log_progress_reports_through_logging(housing, folds, caplog):
    caplog.set_level(logging.INFO, logger="resampling.progress")
    fit_resamples(NullModel(), folds, housing, metrics=["mae"], progress=LogProgress(every=5))
    messages = [r.getMessage() for r in caplog.records if r.name == "resampling.progress"]
    assert messages[0].startswith("Starting kfold resamples (10)")
    assert [m.split(" ")[0] for m in messages[1:-1]] == ["5/10", "10/10"]
    assert messages[-1] == "Finished: 10/10 splits"


def test_default_process_backend_keeps_split_order(housing, folds):
    serial = fit_resamples(NullModel(), folds, housing, metrics=["mae", "rmse"])
    ctrl = {"worker_count": 2, "backend": "loky", "save_predictions": True}
    res = fit_resamples(NullModel(), folds, housing, metrics=["mae", "rmse"], control=ctrl)

    assert [r.id for r in res] == folds.ids
    for a, b in zip(res, serial):
        assert a.metrics == pytest.approx(b.metrics)
    assert sorted(res.collect_predictions()["row"]) == list(range(100))
