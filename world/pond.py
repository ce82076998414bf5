"""
neatpond module: world/pond.py

The pond owns the population and the food, advances the simulation one step
at a time, and runs reproduction at generation boundaries.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import random
from typing import List, Optional, Sequence, Tuple

from config import PondConfig
from evolution.reproduction import reproduce
from organism.genome import random_genome
from organism.organism import Organism, OrganismSnapshot
from world.food import Food, FoodField
from world.geometry import Vector2D

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PondSnapshot:
    generation: int
    time: int
    organisms: Tuple[OrganismSnapshot, ...]
    foods: Tuple[Tuple[float, float], ...]


class Pond:
    def __init__(
        self,
        config: Optional[PondConfig] = None,
        rng: Optional[random.Random] = None,
        genomes: Optional[Sequence[Sequence[float]]] = None,
    ):
        self.config = config or PondConfig()
        self.rng = rng or random.Random()
        self.generation = 0
        self.time = 0

        if genomes is None:
            genomes = [random_genome(self.config.dna_length, self.rng) for _ in range(self.config.population_size)]
        self.organisms: List[Organism] = [self._build_organism(g) for g in genomes]

        self.food = FoodField(self.config.world_size, self.rng)
        self.food.reseed(self.config.food_amount)
        for organism in self.organisms:
            organism.reset()

    def _build_organism(self, genes: Sequence[float]) -> Organism:
        return Organism(genes, self.config, self.rng)

    @property
    def foods(self) -> List[Food]:
        return self.food.foods

    @property
    def generation_over(self) -> bool:
        return self.time >= self.config.lifespan

    def update(self) -> None:
        """One simulation step: everyone senses and moves, then everyone feeds."""
        for organism in self.organisms:
            organism.perceive(self.food.foods)
            organism.update()

        self._feed()
        self.food.sweep()
        self.time += 1

    def _feed(self) -> None:
        cfg = self.config
        reach2 = cfg.food_radius * cfg.food_radius
        consumed = set()

        for organism in self.organisms:
            if organism.dead:
                continue
            mouth = organism.mouth()
            for idx, food in enumerate(self.food.foods):
                if idx in consumed:
                    continue
                if (food.position - mouth).length_squared() > reach2:
                    continue
                if self.rng.random() <= cfg.food_eat_difficulty:
                    continue
                if organism.eat():
                    consumed.add(idx)
                    if self.rng.random() < cfg.food_respawn_rate:
                        self.food.relocate(food)
                    else:
                        food.eaten = True

    def spawn_food(self, position: Vector2D) -> List[Food]:
        return self.food.spawn_near(position, count=self.config.food_spawn_count, jitter=self.config.food_spawn_jitter)

    def reset(self) -> float:
        """
        End the generation: breed the next population, reseed food, and
        respawn everyone. Returns the outgoing generation's average fitness.
        """
        cfg = self.config
        average_fitness = reproduce(
            self.organisms,
            cfg.mutation_rate,
            self.rng,
            self._build_organism,
            max_pool_attempts=cfg.mating_pool_attempts,
        )

        self.food.reseed(cfg.food_amount)
        for organism in self.organisms:
            organism.reset()

        logger.debug(
            "generation %d ended after %d steps, average fitness %.5f",
            self.generation, self.time, average_fitness,
        )
        self.time = 0
        self.generation += 1
        return average_fitness

    def snapshot(self) -> PondSnapshot:
        return PondSnapshot(
            generation=self.generation,
            time=self.time,
            organisms=tuple(o.snapshot() for o in self.organisms),
            foods=tuple(f.position.as_tuple() for f in self.food.foods),
        )
