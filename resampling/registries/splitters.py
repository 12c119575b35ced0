from __future__ import annotations

from typing import Any, Callable

from resampling.components.interfaces import Splitter
from resampling.components.splitters.base import resolve_rows
from resampling.components.splitters.types import ResampleCollection
from resampling.contracts.split_configs import SplitConfig, parse_split_config
from resampling.errors import InvalidConfiguration
from resampling.registries.base import Registry
from resampling.runtime.random.rng import SeedLike

SplitterFactory = Callable[[SplitConfig, SeedLike], Splitter]

_SPLITTERS: Registry[str, SplitterFactory] = Registry(_name="splitters")

_BUILTINS_LOADED = False


def register_splitter(strategy: str, *, replace: bool = False) -> Callable[[SplitterFactory], SplitterFactory]:
    return _SPLITTERS.register(strategy.lower(), replace=replace)


def _ensure_builtins() -> None:
    global _BUILTINS_LOADED
    if _BUILTINS_LOADED:
        return
    from resampling.registries.builtins import splitters as _  # noqa: F401
    _BUILTINS_LOADED = True


def make_splitter(cfg: Any, *, seed: SeedLike = None) -> Splitter:
    """Build the splitter for ``cfg``.

    ``seed`` overrides ``cfg.seed`` when given (an int or a numpy Generator).
    """
    _ensure_builtins()
    cfg = parse_split_config(cfg)
    strategy = str(getattr(cfg, "strategy")).lower()
    factory = _SPLITTERS.try_get(strategy)
    if factory is None:
        raise InvalidConfiguration(f"Unknown resampling strategy: {strategy!r}")
    if seed is None:
        seed = getattr(cfg, "seed", None)
    return factory(cfg, seed)


def make_resamples(data: Any, cfg: Any = None, *, seed: SeedLike = None, **options: Any) -> ResampleCollection:
    """Generate the full, immutable collection of splits for ``data``.

    ``data`` is a :class:`~resampling.components.data.Dataset` (required for
    stratification) or a row count. ``options`` override fields of ``cfg``,
    e.g. ``make_resamples(ds, strategy="kfold", v=5, seed=1)``.
    """
    cfg = parse_split_config(cfg, **options)
    n, _ = resolve_rows(data)
    splitter = make_splitter(cfg, seed=seed)
    splits = tuple(splitter.split(data))
    return ResampleCollection(splits=splits, n=n, strategy=cfg.strategy, config=cfg)


def list_strategies() -> list[str]:
    _ensure_builtins()
    return _SPLITTERS.names()
