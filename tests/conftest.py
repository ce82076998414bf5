import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from config import PondConfig  # noqa: E402
from neural.brain import Brain  # noqa: E402
from organism.genome import NUM_TRAITS, Trait  # noqa: E402


def make_genes(
    config: PondConfig,
    weight: float = 0.5,
    fov: float = 0.5,
    clock: float = 0.0,
    clock_2: float = 0.0,
    birth: tuple = (0.5, 0.5),
    rgb: tuple = (0.2, 0.4, 0.6),
) -> tuple:
    traits = [0.0] * NUM_TRAITS
    traits[Trait.CLOCK_SPEED] = clock
    traits[Trait.CLOCK_SPEED_2] = clock_2
    traits[Trait.FOV] = fov
    traits[Trait.RED], traits[Trait.GREEN], traits[Trait.BLUE] = rgb
    traits[Trait.BIRTH_X], traits[Trait.BIRTH_Y] = birth
    return tuple(traits) + (weight,) * Brain.weight_count(config.topology)


@pytest.fixture
def config():
    return PondConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def genes():
    return make_genes
