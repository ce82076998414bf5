"""
neatpond module: organism/sensors.py

Eyes: a fan of fixed-length rays centered on the heading. Each ray reports
the closest food it touches as ``1 - distance / sight_length`` (0 when it
sees nothing).
"""

from __future__ import annotations
from typing import Iterable, TYPE_CHECKING

from world.geometry import Vector2D, line_circle_collide

if TYPE_CHECKING:
    from world.food import Food


def eye_direction(heading: float, fov: float, eye: int, num_eyes: int) -> float:
    return heading + (eye - num_eyes // 2) * (fov / num_eyes)


def in_sight_box(position: Vector2D, target: Vector2D, sight_length: float) -> bool:
    return abs(position.x - target.x) < sight_length and abs(position.y - target.y) < sight_length


def ray_strength(
    position: Vector2D,
    direction: float,
    foods: Iterable["Food"],
    sight_length: float,
    food_radius: float,
) -> float:
    end = position + Vector2D.from_angle(direction, sight_length)
    strongest = 0.0
    for food in foods:
        if not in_sight_box(position, food.position, sight_length):
            continue
        if line_circle_collide(position, end, food.position, food_radius):
            strength = 1.0 - position.distance_to(food.position) / sight_length
            if strength > strongest:
                strongest = strength
    return strongest
