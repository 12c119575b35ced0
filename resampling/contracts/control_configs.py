from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from .choices import BackendName


class ControlModel(BaseModel):
    """Knobs for a resampling run, on top of the split config."""

    model_config = ConfigDict(extra="forbid")

    save_predictions: bool = False
    # Default for ``collect_predictions(summarize=...)``
    summarize_predictions: bool = False
    worker_count: int = Field(1, ge=1)
    backend: BackendName = "loky"
    # Wall-clock budget for the whole run; unfinished splits are abandoned.
    timeout: Optional[float] = Field(None, gt=0)
    verbose: bool = False
