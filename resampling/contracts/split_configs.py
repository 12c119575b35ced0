"""Resampling strategy configurations.

One pydantic model per strategy, discriminated on ``strategy``. Static
parameter checks live here; checks that need the dataset size (``v > n``,
rolling windows larger than the data) are done by the splitters.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

from resampling.errors import InvalidConfiguration


class _SplitModel(BaseModel):
    # unknown options are rejected
    model_config = ConfigDict(extra="forbid")


class _StrataMixin(_SplitModel):
    # Column used to stratify random draws (numeric columns are binned)
    strata_field: Optional[str] = None
    breaks: int = Field(4, ge=2)
    pool: float = Field(0.1, ge=0.0, lt=0.5)


class KFoldModel(_StrataMixin):
    strategy: Literal["kfold"] = "kfold"
    v: int = Field(10, ge=2)
    seed: Optional[int] = None


class RepeatedKFoldModel(_StrataMixin):
    strategy: Literal["repeated_kfold"] = "repeated_kfold"
    v: int = Field(10, ge=2)
    repeats: int = Field(1, ge=1)
    seed: Optional[int] = None


class LooModel(_SplitModel):
    strategy: Literal["loo"] = "loo"
    # ignored: leave-one-out is deterministic
    seed: Optional[int] = None


class MonteCarloModel(_StrataMixin):
    strategy: Literal["montecarlo"] = "montecarlo"
    proportion: float = Field(0.75, gt=0.0, lt=1.0)
    times: int = Field(25, ge=1)
    seed: Optional[int] = None


class BootstrapModel(_StrataMixin):
    strategy: Literal["bootstrap"] = "bootstrap"
    times: int = Field(25, ge=1)
    seed: Optional[int] = None


class ValidationModel(_StrataMixin):
    strategy: Literal["validation"] = "validation"
    proportion: float = Field(0.75, gt=0.0, lt=1.0)
    seed: Optional[int] = None


class RollingOriginModel(_SplitModel):
    strategy: Literal["rolling_origin"] = "rolling_origin"
    initial: int = Field(5, ge=1)
    assess: int = Field(1, ge=1)
    skip: int = Field(0, ge=0)
    cumulative: bool = True
    # Rows of the analysis tail repeated at the head of each assessment window
    lag: int = Field(0, ge=0)
    # ignored: rolling origin is deterministic
    seed: Optional[int] = None

    @model_validator(mode="after")
    def _lag_within_initial(self) -> "RollingOriginModel":
        if self.lag > self.initial:
            raise ValueError(f"lag ({self.lag}) must not exceed initial ({self.initial}).")
        return self


SplitConfig = Annotated[
    Union[
        KFoldModel,
        RepeatedKFoldModel,
        LooModel,
        MonteCarloModel,
        BootstrapModel,
        RollingOriginModel,
        ValidationModel,
    ],
    Field(discriminator="strategy"),
]

_SPLIT_ADAPTER: TypeAdapter = TypeAdapter(SplitConfig)


def parse_split_config(cfg: Any = None, **overrides: Any) -> SplitConfig:
    """Validate ``cfg`` (a model, a dict, or keyword options) into a split config.

    Raises
    ------
    InvalidConfiguration
        If the payload names an unknown strategy or holds out-of-range values.
    """
    if isinstance(cfg, BaseModel):
        payload = cfg.model_dump()
    elif cfg is None:
        payload = {}
    elif isinstance(cfg, dict):
        payload = dict(cfg)
    else:
        raise InvalidConfiguration(
            f"Split config must be a dict or a config model; got {type(cfg).__name__}."
        )
    payload.update(overrides)
    payload.setdefault("strategy", "kfold")

    try:
        return _SPLIT_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise InvalidConfiguration(str(e)) from e
