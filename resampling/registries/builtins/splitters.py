"""Built-in resampling strategy registrations."""

from __future__ import annotations

from resampling.registries.splitters import register_splitter
from resampling.runtime.random.rng import SeedLike

from resampling.components.splitters.random_splits import (
    BootstrapSplitter,
    MonteCarloSplitter,
    ValidationSplitter,
)
from resampling.components.splitters.rolling import RollingOriginSplitter
from resampling.components.splitters.vfold import KFoldSplitter, LooSplitter, RepeatedKFoldSplitter


@register_splitter("kfold")
def _kfold(cfg, seed: SeedLike):
    return KFoldSplitter(cfg=cfg, seed=seed)


@register_splitter("repeated_kfold")
def _repeated_kfold(cfg, seed: SeedLike):
    return RepeatedKFoldSplitter(cfg=cfg, seed=seed)


@register_splitter("loo")
def _loo(cfg, seed: SeedLike):
    return LooSplitter(cfg=cfg, seed=seed)


@register_splitter("montecarlo")
def _montecarlo(cfg, seed: SeedLike):
    return MonteCarloSplitter(cfg=cfg, seed=seed)


@register_splitter("bootstrap")
def _bootstrap(cfg, seed: SeedLike):
    return BootstrapSplitter(cfg=cfg, seed=seed)


@register_splitter("rolling_origin")
def _rolling_origin(cfg, seed: SeedLike):
    return RollingOriginSplitter(cfg=cfg, seed=seed)


@register_splitter("validation")
def _validation(cfg, seed: SeedLike):
    return ValidationSplitter(cfg=cfg, seed=seed)
