# scripts/run_kfold_local.py
from __future__ import annotations

import logging

import numpy as np
import pandas as pd
from sklearn.linear_model import Ridge

from resampling.api import (
    ControlModel,
    Dataset,
    LogProgress,
    SklearnPredictor,
    fit_resamples,
    make_resamples,
    metric_set,
)

# ==== EDIT THESE AS YOU LIKE ==================================================
N_ROWS = 200
SEED = 55

SPLIT = dict(
    strategy="kfold",     # kfold | repeated_kfold | loo | montecarlo | bootstrap | rolling_origin | validation
    v=10,
    strata_field="price", # numeric outcome -> quartile strata; None to disable
)

CONTROL = ControlModel(
    save_predictions=True,
    worker_count=4,
    backend="threading",  # "loky" needs everything picklable
    verbose=False,        # True logs every split at INFO
)

METRICS = metric_set("rmse", "rsq", "mae")
# ============================================================================


def make_data(n: int, seed: int) -> pd.DataFrame:
    rng = np.random.default_rng(seed)
    sqft = rng.uniform(500, 3500, size=n)
    age = rng.integers(0, 80, size=n).astype(float)
    price = 50_000 + 120.0 * sqft - 800.0 * age + rng.normal(0, 15_000, size=n)
    return pd.DataFrame({"sqft": sqft, "age": age, "price": price})


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    ds = Dataset(frame=make_data(N_ROWS, SEED), outcome="price")
    folds = make_resamples(ds, seed=SEED, **SPLIT)
    res = fit_resamples(
        SklearnPredictor(Ridge(alpha=1.0)),
        folds,
        ds,
        metrics=METRICS,
        control=CONTROL,
        progress=LogProgress(every=5),
        extract=lambda fitted: fitted.model.coef_.round(2).tolist(),
    )

    print("\n=== RESAMPLING RESULT ===")
    print(f"Strategy: {res.strategy} ({len(res)} splits, {res.n_failed} failed)")
    print(res.metrics_frame().to_string(index=False))

    preds = res.collect_predictions(summarize=True)
    print(f"\nHeld-out predictions: {len(preds)} rows")
    print(preds.head().to_string(index=False))

    print("\nCoefficients per split:")
    print(res.collect_extracts().to_string(index=False))

    notes = res.show_notes()
    if notes:
        print("Notes:")
        for n in notes:
            print(f"- {n}")


if __name__ == "__main__":
    main()
