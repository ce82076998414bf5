"""
Simulation tuning knobs.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List

from organism.genome import genome_length

# World
WORLD_SIZE = 1000
GRID_SIZE = 10  # checkerboard cells per world edge (render only)

# Generations
GENERATION_LIFESPAN = 800  # steps
POPULATION_SIZE = 100
MUTATION_RATE = 0.005
INHERIT_BIRTH_LOCATION = False

# Organism body
MAX_SPEED = 5.0
TURN_SPEED = 0.2
TURN_SMOOTHING = 0.5
ACCELERATION = 1.0
DECELERATION = 0.01
MOUTH_OFFSET = 8.0

# Energy
START_ENERGY = 1000.0
FOOD_ENERGY = 100.0
MOVEMENT_COST = 0.25

# Senses
NUM_EYES = 10
SIGHT_LENGTH = 300.0

# Food
FOOD_AMOUNT = 100
FOOD_RADIUS = 16.0
FOOD_RESPAWN_RATE = 0.05
FOOD_EAT_DIFFICULTY = 0.0
FOOD_SPAWN_COUNT = 1
FOOD_SPAWN_JITTER = 4.0

# Brain
HIDDEN_LAYERS = 1
HIDDEN_NODES = 2

# Reproduction
MATING_POOL_ATTEMPTS = 100

# Runtime / window
SCREEN_W, SCREEN_H = 960, 720
HUD_HEIGHT = 100
FPS = 60

# heading, speed, energy, clock A, clock B
NUM_EXTRA_INPUTS = 5
NUM_OUTPUTS = 2


@dataclass(frozen=True)
class PondConfig:
    """
    Everything a Pond needs, with defaults taken from the module constants.

    Use ``dataclasses.replace`` to derive a variant (tests, CLI overrides).
    """
    world_size: float = WORLD_SIZE
    lifespan: int = GENERATION_LIFESPAN
    population_size: int = POPULATION_SIZE
    mutation_rate: float = MUTATION_RATE
    inherit_birth_location: bool = INHERIT_BIRTH_LOCATION

    max_speed: float = MAX_SPEED
    turn_speed: float = TURN_SPEED
    turn_smoothing: float = TURN_SMOOTHING
    acceleration: float = ACCELERATION
    deceleration: float = DECELERATION
    mouth_offset: float = MOUTH_OFFSET

    start_energy: float = START_ENERGY
    food_energy: float = FOOD_ENERGY
    movement_cost: float = MOVEMENT_COST

    num_eyes: int = NUM_EYES
    sight_length: float = SIGHT_LENGTH

    food_amount: int = FOOD_AMOUNT
    food_radius: float = FOOD_RADIUS
    food_respawn_rate: float = FOOD_RESPAWN_RATE
    food_eat_difficulty: float = FOOD_EAT_DIFFICULTY
    food_spawn_count: int = FOOD_SPAWN_COUNT
    food_spawn_jitter: float = FOOD_SPAWN_JITTER

    hidden_layers: int = HIDDEN_LAYERS
    hidden_nodes: int = HIDDEN_NODES
    mating_pool_attempts: int = MATING_POOL_ATTEMPTS

    @property
    def topology(self) -> List[int]:
        return [self.num_inputs] + [self.hidden_nodes] * self.hidden_layers + [NUM_OUTPUTS]

    @property
    def num_inputs(self) -> int:
        return self.num_eyes + NUM_EXTRA_INPUTS

    @property
    def dna_length(self) -> int:
        return genome_length(self.topology)
