"""
neatpond module: world/physics.py

Top-down kinematics for organisms:
- steering and throttle are low-pass filtered toward the brain's targets
- the arena is a torus: leaving one edge re-enters at the opposite one
- the mouth sits a little ahead of the body along the heading
"""

from __future__ import annotations

from world.geometry import Vector2D


def smooth(current: float, target: float, factor: float) -> float:
    return current + (target - current) * factor


def approach_speed(speed: float, target: float, acceleration: float, deceleration: float) -> float:
    """
    Asymmetric smoothing: speeding up uses ``acceleration``, slowing down
    ``deceleration`` (organisms coast).
    """
    factor = acceleration if target > speed else deceleration
    return smooth(speed, target, factor)


def wrap_world(position: Vector2D, size: float) -> None:
    """Toroidal wrap, in place."""
    position.x %= size
    position.y %= size


def mouth_position(position: Vector2D, angle: float, offset: float) -> Vector2D:
    return position + Vector2D.from_angle(angle, offset)
