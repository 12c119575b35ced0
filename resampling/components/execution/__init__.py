from .executors import JoblibExecutor, SequentialExecutor, ThreadExecutor, make_executor

__all__ = ["SequentialExecutor", "ThreadExecutor", "JoblibExecutor", "make_executor"]
