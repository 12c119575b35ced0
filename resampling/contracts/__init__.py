"""Configuration and result contracts.

Pydantic models used to validate resampling configuration payloads and to carry
run outputs.

Export policy:
- Keep module imports explicit in most of the codebase:
    from resampling.contracts.split_configs import KFoldModel
- The names re-exported here are a small set of convenience imports.
"""

from .choices import BackendName, StrategyName
from .control_configs import ControlModel
from .run_config import ResampleRunConfig, parse_run_config
from .split_configs import (
    BootstrapModel,
    KFoldModel,
    LooModel,
    MonteCarloModel,
    RepeatedKFoldModel,
    RollingOriginModel,
    SplitConfig,
    ValidationModel,
    parse_split_config,
)

__all__ = [
    "BackendName",
    "StrategyName",
    "ControlModel",
    "ResampleRunConfig",
    "parse_run_config",
    "SplitConfig",
    "KFoldModel",
    "RepeatedKFoldModel",
    "LooModel",
    "MonteCarloModel",
    "BootstrapModel",
    "RollingOriginModel",
    "ValidationModel",
    "parse_split_config",
]
