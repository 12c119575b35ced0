from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from resampling.errors import InvalidConfiguration

from .control_configs import ControlModel
from .split_configs import KFoldModel, SplitConfig


class ResampleRunConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    resampling: SplitConfig = Field(default_factory=KFoldModel)
    control: ControlModel = Field(default_factory=ControlModel)


def parse_run_config(cfg: Any) -> ResampleRunConfig:
    """Validate a run config payload, mapping validation failures to
    :class:`~resampling.errors.InvalidConfiguration`."""
    if isinstance(cfg, ResampleRunConfig):
        return cfg
    try:
        return ResampleRunConfig.model_validate(cfg)
    except ValidationError as e:
        raise InvalidConfiguration(str(e)) from e
