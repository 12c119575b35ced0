from .rng import RngManager, SeedLike

__all__ = ["RngManager", "SeedLike"]
