from __future__ import annotations

from typing import Any, Optional, Tuple

import numpy as np

from resampling.components.data.dataset import Dataset
from resampling.errors import InvalidConfiguration

from .strata import make_strata


def resolve_rows(data: Any) -> Tuple[int, Optional[Dataset]]:
    """Accept a :class:`Dataset`, a row count, or anything with ``len()``."""
    if isinstance(data, Dataset):
        return len(data), data
    if isinstance(data, (int, np.integer)):
        n = int(data)
    else:
        try:
            n = len(data)
        except TypeError as e:
            raise InvalidConfiguration(
                f"Cannot determine the number of rows of {type(data).__name__}."
            ) from e
    if n < 0:
        raise InvalidConfiguration(f"Row count must be non-negative; got {n}.")
    return n, None


def resolve_strata(cfg: Any, dataset: Optional[Dataset], n: int) -> Optional[np.ndarray]:
    field = getattr(cfg, "strata_field", None)
    if field is None:
        return None
    if dataset is None:
        raise InvalidConfiguration(
            f"strata_field={field!r} requires a Dataset, not a bare row count."
        )
    try:
        codes = make_strata(
            dataset.column(field),
            breaks=int(getattr(cfg, "breaks", 4)),
            pool=float(getattr(cfg, "pool", 0.1)),
        )
    except ValueError as e:
        raise InvalidConfiguration(f"Cannot stratify on {field!r}: {e}") from e
    if codes.shape[0] != n:  # pragma: no cover
        raise InvalidConfiguration("Strata length does not match the dataset.")
    return codes
