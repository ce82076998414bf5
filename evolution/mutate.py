"""
neatpond module: evolution/mutate.py

Genetic operators on flat genomes.
"""

from __future__ import annotations
import random
from typing import Sequence

from organism.genome import Genes


def cross_over(genes_a: Sequence[float], genes_b: Sequence[float], rng: random.Random) -> Genes:
    """
    Single-point crossover.

    Genes after a random midpoint come from ``genes_a``, the rest (midpoint
    included) from ``genes_b``.
    """
    if len(genes_a) != len(genes_b):
        raise ValueError(f"cannot cross genomes of length {len(genes_a)} and {len(genes_b)}")
    midpoint = rng.randrange(len(genes_a))
    return tuple(a if i > midpoint else b for i, (a, b) in enumerate(zip(genes_a, genes_b)))


def mutate(genes: Sequence[float], rate: float, rng: random.Random) -> Genes:
    """Replace each gene with a fresh draw with probability ``rate``."""
    return tuple(rng.random() if rng.random() < rate else g for g in genes)
