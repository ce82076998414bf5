"""
neatpond module: organism/genome.py

Genome layout.

A genome is a flat tuple of floats in [0, 1]:
- the first NUM_TRAITS genes are phenotypic traits (see ``Trait``)
- the rest are network weights, decoded by ``Brain.set_weights``

Genomes are never edited in place; reproduction builds new ones.
"""

from __future__ import annotations
from enum import IntEnum
import random
from typing import Sequence, Tuple

from neural.brain import Brain

Genes = Tuple[float, ...]


class Trait(IntEnum):
    """Trait gene positions."""
    CLOCK_SPEED = 0
    CLOCK_SPEED_2 = 1
    FOV = 2
    RED = 3
    GREEN = 4
    BLUE = 5
    BIRTH_X = 6
    BIRTH_Y = 7


NUM_TRAITS = len(Trait)


def genome_length(topology: Sequence[int]) -> int:
    return NUM_TRAITS + Brain.weight_count(topology)


def random_genome(length: int, rng: random.Random) -> Genes:
    return tuple(rng.random() for _ in range(length))


def weight_genes(genes: Sequence[float]) -> Genes:
    return tuple(genes[NUM_TRAITS:])


def color(genes: Sequence[float]) -> Tuple[int, int, int]:
    return (
        int(genes[Trait.RED] * 255),
        int(genes[Trait.GREEN] * 255),
        int(genes[Trait.BLUE] * 255),
    )
