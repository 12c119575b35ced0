from .common import ResultModel
from .resamples import MetricSummary, PredictionRow, SplitResult, SummaryResult

__all__ = ["ResultModel", "MetricSummary", "PredictionRow", "SplitResult", "SummaryResult"]
