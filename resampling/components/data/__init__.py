from .dataset import Dataset, as_dataset

__all__ = ["Dataset", "as_dataset"]
