import dataclasses
import math

import pytest

from organism.organism import Organism
from world.food import Food
from world.geometry import Vector2D


def place(org, x, y, angle=0.0):
    org.position = Vector2D(x, y)
    org.angle = angle
    return org


@pytest.fixture
def fish(config, rng, genes):
    org = Organism(genes(config), config, rng)
    org.reset()
    return place(org, 500.0, 500.0)


def test_brain_built_from_weight_genes(config, rng, genes):
    org = Organism(genes(config, weight=0.5), config, rng)
    assert list(org.brain.topology) == config.topology
    assert all(w == 0.0 for layer in org.brain.layers for n in layer for w in n.weights)
    assert org.fov == pytest.approx(0.5 * math.pi)


def test_food_straight_ahead_hits_centre_eye(fish, config):
    fish.perceive([Food(Vector2D(600.0, 500.0))])
    centre = config.num_eyes // 2
    assert fish.sensors[centre] == pytest.approx(1 - 100.0 / config.sight_length)
    # outermost eye looks 45 degrees away: misses by ~70 units
    assert fish.sensors[0] == 0.0


def test_food_behind_is_invisible(fish):
    fish.perceive([Food(Vector2D(400.0, 500.0))])
    assert fish.sensors == [0.0] * len(fish.sensors)


def test_food_out_of_range_is_invisible(fish, config):
    fish.perceive([Food(Vector2D(500.0 + config.sight_length + 50, 500.0))])
    assert max(fish.sensors) == 0.0


def test_strongest_food_wins(fish, config):
    fish.perceive([Food(Vector2D(650.0, 500.0)), Food(Vector2D(550.0, 500.0))])
    assert fish.sensors[config.num_eyes // 2] == pytest.approx(1 - 50.0 / config.sight_length)


def test_no_food_reads_zero(fish):
    fish.perceive([])
    assert fish.sensors == [0.0] * len(fish.sensors)


def test_internal_inputs(config, rng, genes):
    org = Organism(genes(config, clock=0.25, clock_2=0.5), config, rng)
    org.reset()
    org.angle = -math.pi / 2
    org.speed = config.max_speed / 2
    org.energy = config.start_energy * 2
    org.age = 10
    org.perceive([])

    i = config.num_eyes
    assert org.inputs[i] == pytest.approx(0.75)
    assert org.inputs[i + 1] == pytest.approx(0.5)
    assert org.inputs[i + 2] == pytest.approx(1.0)
    assert org.inputs[i + 3] == pytest.approx(0.5)
    assert org.inputs[i + 4] == pytest.approx(5.0 / config.lifespan)


def test_update_with_neutral_brain(fish, config):
    # all weights 0 -> both outputs 0.5: no turning, half throttle
    fish.perceive([])
    fish.update()

    target_speed = 0.5 * config.max_speed
    assert fish.outputs == [pytest.approx(0.5), pytest.approx(0.5)]
    assert fish.turn_rate == pytest.approx(0.0)
    assert fish.angle == pytest.approx(0.0)
    assert fish.speed == pytest.approx(target_speed)
    assert fish.position.x == pytest.approx(500.0 + target_speed)
    assert fish.energy == pytest.approx(config.start_energy - (target_speed * config.movement_cost) ** 2)
    assert fish.age == 1


def test_turn_rate_is_smoothed(config, rng, genes):
    # all weights -20 -> outputs ~0: full left turn, no throttle
    org = place(Organism(genes(config, weight=0.0), config, rng), 500.0, 500.0)
    org.perceive([])
    org.update()
    assert org.turn_rate == pytest.approx(-config.turn_smoothing, abs=1e-6)
    org.update()
    assert org.turn_rate == pytest.approx(-0.75, abs=1e-6)
    assert org.speed < 1e-6


def test_slow_deceleration(fish, config):
    fish.speed = config.max_speed
    fish.perceive([])
    fish.update()
    expected = config.max_speed + (0.5 * config.max_speed - config.max_speed) * config.deceleration
    assert fish.speed == pytest.approx(expected)


def test_position_wraps_to_opposite_edge(fish, config):
    place(fish, config.world_size - 1.0, 300.0)
    fish.perceive([])
    fish.update()
    assert fish.position.x == pytest.approx(0.5 * config.max_speed - 1.0)
    assert fish.position.y == pytest.approx(300.0)


def test_energy_runs_out_and_stays_dead(fish):
    fish.energy = 1.0
    previous = fish.energy
    steps = 0
    while fish.alive:
        fish.perceive([])
        fish.update()
        assert fish.energy < previous
        previous = fish.energy
        steps += 1
        assert steps < 10
    assert fish.energy <= 0.0

    frozen = fish.position.copy()
    age = fish.age
    for _ in range(5):
        fish.perceive([Food(fish.position.copy())])
        fish.update()
    assert fish.dead
    assert fish.position == frozen
    assert fish.age == age
    assert fish.eat() is False

    fish.reset()
    assert fish.alive
    assert fish.energy == fish.config.start_energy


def test_no_energy_cost_after_lifespan(fish, config):
    fish.age = config.lifespan + 1
    fish.perceive([])
    fish.update()
    assert fish.energy == config.start_energy


def test_eat_rewards_only_within_lifespan(fish, config):
    assert fish.eat() is True
    assert fish.food_collected == 1
    assert fish.energy == config.start_energy + config.food_energy

    fish.age = config.lifespan + 1
    assert fish.eat() is True
    assert fish.food_collected == 1


def test_fitness(fish, config):
    assert fish.fitness() == 0.0
    fish.food_collected = 10
    assert fish.fitness() == pytest.approx((10 / config.food_amount) ** 2)


def test_reset_clears_generation_state(fish, config):
    fish.food_collected = 4
    fish.age = 99
    fish.speed = 3.0
    fish.dead = True
    fish.reset()
    assert (fish.food_collected, fish.age, fish.speed, fish.dead) == (0, 0, 0.0, False)
    assert 0.0 <= fish.position.x < config.world_size
    assert 0.0 <= fish.angle < 2 * math.pi


def test_birth_location_gene(config, rng, genes):
    cfg = dataclasses.replace(config, inherit_birth_location=True)
    org = Organism(genes(cfg, birth=(0.25, 0.75)), cfg, rng)
    org.reset()
    assert org.position == Vector2D(0.25 * cfg.world_size, 0.75 * cfg.world_size)


def test_brain_is_kept_across_resets(fish):
    brain = fish.brain
    fish.reset()
    assert fish.brain is brain


def test_mouth_and_sight(fish, config):
    mouth = fish.mouth()
    assert mouth.x == pytest.approx(500.0 + config.mouth_offset)
    assert fish.can_see(Food(Vector2D(700.0, 650.0)))
    assert not fish.can_see(Food(Vector2D(500.0 + config.sight_length + 1, 500.0)))


def test_snapshot(fish, config):
    fish.perceive([Food(Vector2D(600.0, 500.0))])
    snap = fish.snapshot()
    assert snap.position == (500.0, 500.0)
    assert snap.alive
    assert len(snap.sensors) == config.num_eyes
    assert len(snap.brain) == len(config.topology)
