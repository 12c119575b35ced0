from __future__ import annotations


def names0(n: int, prefix: str) -> list[str]:
    """``prefix`` + 1..n, zero-padded to the width of ``n`` (Fold01..Fold10)."""
    width = len(str(int(n)))
    return [f"{prefix}{i:0{width}d}" for i in range(1, int(n) + 1)]


def round_half_up(x: float) -> int:
    return int(x + 0.5)
