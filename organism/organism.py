"""
neatpond module: organism/organism.py

A fish-like organism: genome-built brain + kinematic body + energy budget.

Per step the pond calls ``perceive`` then ``update``; feeding goes through
``eat``. Once energy runs out the organism is dead until the next ``reset``:
it neither senses nor moves, but stays in the population and is scored.
"""

from __future__ import annotations
from dataclasses import dataclass
import math
import random
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

from config import PondConfig
from neural.brain import Brain, NeuronView
from organism.genome import Genes, Trait, weight_genes
from organism.sensors import eye_direction, in_sight_box, ray_strength
from world.geometry import TAU, Vector2D, mod_angle
from world.physics import approach_speed, mouth_position, smooth, wrap_world

if TYPE_CHECKING:
    from world.food import Food

OUTPUT_DIRECTION = 0
OUTPUT_SPEED = 1


@dataclass(frozen=True)
class OrganismSnapshot:
    position: Tuple[float, float]
    angle: float
    fov: float
    genes: Genes
    alive: bool
    energy: float
    food_collected: int
    sensors: Tuple[float, ...]
    brain: Tuple[Tuple[NeuronView, ...], ...]


class Organism:
    def __init__(self, genes: Sequence[float], config: PondConfig, rng: random.Random):
        self.genes: Genes = tuple(genes)
        self.config = config
        self.rng = rng

        self.brain = Brain.from_genes(config.topology, weight_genes(self.genes))
        self.fov = self.genes[Trait.FOV] * math.pi

        self.inputs: List[float] = [0.0] * config.num_inputs
        self.outputs: List[float] = [0.0] * config.topology[-1]

        self.position = Vector2D()
        self.angle = 0.0
        self.speed = 0.0
        self.turn_rate = 0.0
        self.energy = config.start_energy
        self.age = 0
        self.food_collected = 0
        self.dead = False
        self.fitness_score: Optional[float] = None

    # ---- input layout ----

    @property
    def input_direction(self) -> int:
        return self.config.num_eyes

    @property
    def alive(self) -> bool:
        return not self.dead

    @property
    def sensors(self) -> List[float]:
        return self.inputs[:self.config.num_eyes]

    # ---- lifecycle ----

    def reset(self) -> None:
        cfg = self.config
        self.angle = self.rng.random() * TAU
        if cfg.inherit_birth_location:
            self.position = Vector2D(
                self.genes[Trait.BIRTH_X] * cfg.world_size,
                self.genes[Trait.BIRTH_Y] * cfg.world_size,
            )
        else:
            self.position = Vector2D(self.rng.random() * cfg.world_size, self.rng.random() * cfg.world_size)
        self.speed = 0.0
        self.turn_rate = 0.0
        self.energy = cfg.start_energy
        self.age = 0
        self.food_collected = 0
        self.dead = False
        self.inputs = [0.0] * cfg.num_inputs

    def fitness(self) -> float:
        return (self.food_collected / self.config.food_amount) ** 2

    def perceive(self, foods: Sequence["Food"]) -> None:
        if self.dead:
            return
        cfg = self.config

        for eye in range(cfg.num_eyes):
            direction = eye_direction(self.angle, self.fov, eye, cfg.num_eyes)
            self.inputs[eye] = ray_strength(self.position, direction, foods, cfg.sight_length, cfg.food_radius)

        i = self.input_direction
        self.inputs[i] = mod_angle(self.angle) / TAU
        self.inputs[i + 1] = self.speed / cfg.max_speed
        self.inputs[i + 2] = max(0.0, min(self.energy / cfg.start_energy, 1.0))
        self.inputs[i + 3] = math.fmod(self.age * self.genes[Trait.CLOCK_SPEED], 1.0)
        self.inputs[i + 4] = math.fmod(self.age * self.genes[Trait.CLOCK_SPEED_2], cfg.lifespan) / cfg.lifespan

    def update(self) -> None:
        if self.dead:
            return
        cfg = self.config

        self.brain.feed_forward(self.inputs)
        self.outputs = self.brain.get_results()

        target_turn = self.outputs[OUTPUT_DIRECTION] * 2.0 - 1.0
        target_speed = self.outputs[OUTPUT_SPEED] * cfg.max_speed

        self.turn_rate = smooth(self.turn_rate, target_turn, cfg.turn_smoothing)
        self.angle += self.turn_rate * cfg.turn_speed
        self.speed = approach_speed(self.speed, target_speed, cfg.acceleration, cfg.deceleration)

        # no metabolic cost after the generation's lifespan
        if self.age <= cfg.lifespan:
            self.energy -= (target_speed * cfg.movement_cost) ** 2

        self.position += Vector2D.from_angle(self.angle, self.speed)
        wrap_world(self.position, cfg.world_size)
        self.age += 1

        if self.energy <= 0.0:
            self.dead = True

    def eat(self) -> bool:
        """
        Offer one food item. Returns True when the organism takes it; the
        reward is only paid within the lifespan.
        """
        if self.dead:
            return False
        if self.age <= self.config.lifespan:
            self.food_collected += 1
            self.energy += self.config.food_energy
        return True

    # ---- geometry helpers ----

    def mouth(self) -> Vector2D:
        return mouth_position(self.position, self.angle, self.config.mouth_offset)

    def can_see(self, food: "Food") -> bool:
        return in_sight_box(self.position, food.position, self.config.sight_length)

    def snapshot(self) -> OrganismSnapshot:
        return OrganismSnapshot(
            position=self.position.as_tuple(),
            angle=self.angle,
            fov=self.fov,
            genes=self.genes,
            alive=self.alive,
            energy=self.energy,
            food_collected=self.food_collected,
            sensors=tuple(self.sensors),
            brain=self.brain.snapshot(),
        )
