"""
neatpond module: evolution/selection.py

Selection helpers: what an evolvable individual looks like, and the
rank-biased mating pool.
"""

from __future__ import annotations
import random
from typing import List, Optional, Protocol, Sequence, TypeVar


class ReproductionError(RuntimeError):
    """Reproduction cannot proceed (empty population, no mating pool)."""


class Individual(Protocol):
    genes: Sequence[float]
    fitness_score: Optional[float]

    def fitness(self) -> float: ...

    def reset(self) -> None: ...

    def update(self) -> None: ...


T = TypeVar("T", bound=Individual)


def inclusion_probability(rank: int, n: int) -> float:
    """Rank 0 is the worst; the best rank is always included."""
    return min(1.0, (rank + 1) / n * 2)


def build_mating_pool(ranked: Sequence[T], rng: random.Random, max_attempts: int = 100) -> List[T]:
    """
    Scan ``ranked`` (ascending fitness) and keep each individual with its
    inclusion probability. Rescans while the pool is empty.
    """
    n = len(ranked)
    if n == 0:
        raise ReproductionError("cannot build a mating pool from an empty population")

    for _ in range(max_attempts):
        pool = [ind for rank, ind in enumerate(ranked) if rng.random() < inclusion_probability(rank, n)]
        if pool:
            return pool

    raise ReproductionError(f"mating pool still empty after {max_attempts} scans")
