"""
neatpond module: world/food.py

Food system:
- pellets are scattered uniformly over the arena at generation start
- an operator can drop extra pellets anywhere (small jitter around the point)
- eaten pellets are either recycled to a new random spot or flagged and
  swept out once per step
"""

from __future__ import annotations
from dataclasses import dataclass, field
import random
from typing import List

from world.geometry import Vector2D
from world.physics import wrap_world


@dataclass
class Food:
    position: Vector2D
    eaten: bool = False


@dataclass
class FoodField:
    world_size: float
    rng: random.Random
    foods: List[Food] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.foods)

    def __iter__(self):
        return iter(self.foods)

    def random_position(self) -> Vector2D:
        return Vector2D(self.rng.random() * self.world_size, self.rng.random() * self.world_size)

    def reseed(self, amount: int) -> None:
        self.foods = [Food(self.random_position()) for _ in range(amount)]

    def spawn_near(self, position: Vector2D, count: int = 1, jitter: float = 0.0) -> List[Food]:
        spawned: List[Food] = []
        for _ in range(count):
            p = position.copy()
            if jitter > 0:
                p.x += self.rng.uniform(-jitter, jitter)
                p.y += self.rng.uniform(-jitter, jitter)
            wrap_world(p, self.world_size)
            spawned.append(Food(p))
        self.foods.extend(spawned)
        return spawned

    def relocate(self, food: Food) -> None:
        food.position = self.random_position()
        food.eaten = False

    def sweep(self) -> int:
        """Drop eaten pellets; returns how many were removed."""
        before = len(self.foods)
        self.foods = [f for f in self.foods if not f.eaten]
        return before - len(self.foods)
