from .types import ResampleCollection, Split
from .vfold import KFoldSplitter, LooSplitter, RepeatedKFoldSplitter
from .random_splits import BootstrapSplitter, MonteCarloSplitter, ValidationSplitter
from .rolling import RollingOriginSplitter

__all__ = [
    "Split",
    "ResampleCollection",
    "KFoldSplitter",
    "RepeatedKFoldSplitter",
    "LooSplitter",
    "MonteCarloSplitter",
    "BootstrapSplitter",
    "ValidationSplitter",
    "RollingOriginSplitter",
]
