"""Result contracts for resampling runs.

These models represent *outputs* produced by the evaluation runner and the
aggregator and are intended to be stable for callers that persist them.

Design goals:
- Plain field types (lists, dicts, scalars) at the contract boundary.
- Strict top-level validation (extra fields forbidden) to prevent silent drift.

Note: contracts should only depend on stdlib + pydantic.
"""

from __future__ import annotations

from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict

# Outcomes are allowed to be numbers, strings or booleans.
Label = Union[bool, int, float, str]


class ResultModel(BaseModel):
    """Base class for result contracts (strict by default)."""

    model_config = ConfigDict(extra="forbid")


JSONDict = Dict[str, Any]