from .prediction_table import build_prediction_rows, to_python_scalar

__all__ = ["build_prediction_rows", "to_python_scalar"]
