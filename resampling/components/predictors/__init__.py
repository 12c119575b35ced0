from .null_model import NullModel
from .sklearn import FittedSklearnPredictor, SklearnPredictor
from .functional import FunctionPredictor, as_predictor

__all__ = [
    "NullModel",
    "SklearnPredictor",
    "FittedSklearnPredictor",
    "FunctionPredictor",
    "as_predictor",
]
