from __future__ import annotations

import hashlib
from typing import Union

import numpy as np
from numpy.random import Generator

SeedLike = Union[None, int, Generator]

_MASK32 = 0xFFFFFFFF


def _root_from(seed: SeedLike) -> int:
    if isinstance(seed, Generator):
        # one draw from the caller's stream
        return int(seed.integers(0, _MASK32 + 1))
    if seed is None:
        return int(np.random.SeedSequence().entropy) & _MASK32
    return int(seed) & _MASK32


class RngManager:
    """Named seeds for split generation.

    Every splitter asks for its own seed by name (``"kfold"``,
    ``"bootstrap_2"``, ...) and hands it to scikit-learn as ``random_state``.
    A seed is derived from the root seed and the name alone, so adding or
    reordering requests never shifts another splitter's draws.

    ``seed`` is an int (reproducible), a numpy Generator (one root value is
    drawn from it) or None (fresh OS entropy).
    """

    def __init__(self, seed: SeedLike = None):
        self._root = _root_from(seed)

    @property
    def root(self) -> int:
        return self._root

    def child_seed(self, name: str) -> int:
        digest = hashlib.sha256(f"{self._root}:{name}".encode("utf-8")).digest()
        # uint32, the widest seed every consumer accepts
        return int.from_bytes(digest[:4], "little", signed=False)

    def child_seeds(self, n: int, base_name: str) -> list[int]:
        """One independent seed per draw: ``<base_name>_0 .. _{n-1}``."""
        return [self.child_seed(f"{base_name}_{i}") for i in range(int(n))]
