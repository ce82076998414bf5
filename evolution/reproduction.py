"""
Generation-boundary reproduction: score, rank, select, cross over, mutate.
"""

from __future__ import annotations
import random
from typing import Callable, List, Sequence

from evolution.mutate import cross_over, mutate
from evolution.selection import ReproductionError, T, build_mating_pool

__all__ = ["ReproductionError", "reproduce"]


def reproduce(
    population: List[T],
    mutation_rate: float,
    rng: random.Random,
    build: Callable[[Sequence[float]], T],
    max_pool_attempts: int = 100,
) -> float:
    """
    Replace ``population`` with a new generation of the same size.

    Fitness is computed and cached on every individual first; the returned
    value is the mean of those scores. Offspring are collected into a fresh
    list and swapped in only once all of them are built, so a failure leaves
    the old population untouched.
    """
    if not population:
        raise ReproductionError("cannot reproduce an empty population")

    fitness_sum = 0.0
    for ind in population:
        ind.fitness_score = ind.fitness()
        fitness_sum += ind.fitness_score
    average_fitness = fitness_sum / len(population)

    ranked = sorted(population, key=lambda ind: ind.fitness_score)
    pool = build_mating_pool(ranked, rng, max_attempts=max_pool_attempts)

    offspring: List[T] = []
    for _ in range(len(population)):
        a = rng.choice(pool)
        b = rng.choice(pool)
        genes = mutate(cross_over(a.genes, b.genes, rng), mutation_rate, rng)
        offspring.append(build(genes))

    population[:] = offspring
    return average_fitness
