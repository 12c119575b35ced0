import numpy as np
import pandas as pd
import pytest

from resampling.components.data.dataset import Dataset


@pytest.fixture
def housing_frame():
    """100 rows of a small synthetic sale-price table."""
    rng = np.random.default_rng(0)
    n = 100
    sqft = rng.uniform(500, 3500, size=n)
    age = rng.integers(0, 80, size=n).astype(float)
    price = 50_000 + 120.0 * sqft - 800.0 * age + rng.normal(0, 5_000, size=n)
    return pd.DataFrame(
        {
            "row_id": np.arange(n),
            "sqft": sqft,
            "age": age,
            "price": price,
        }
    )


@pytest.fixture
def housing(housing_frame):
    return Dataset(frame=housing_frame, outcome="price")


@pytest.fixture
def classes_frame():
    rng = np.random.default_rng(3)
    n = 60
    return pd.DataFrame(
        {
            "x": rng.normal(size=n),
            "label": np.where(np.arange(n) % 3 == 0, "yes", "no"),
        }
    )


class RecordingProgress:
    def __init__(self, on_update=None):
        self.total = None
        self.updates = []
        self.finalized = False
        self._on_update = on_update

    def init(self, *, total, label=None):
        self.total = total

    def update(self, *, current, label=None):
        self.updates.append((current, label))
        if self._on_update is not None:
            self._on_update(current)

    def finalize(self, *, label=None):
        self.finalized = True


@pytest.fixture
def progress_recorder():
    return RecordingProgress
