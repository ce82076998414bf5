"""
neatpond module: render/renderer.py

Pygame rendering of pond snapshots (top-down). Nothing here touches live
simulation state.
"""

from __future__ import annotations
import math
from typing import Optional, Sequence, Tuple

import pygame

from neural.brain import NeuronView
from organism.genome import color
from organism.organism import OrganismSnapshot
from organism.sensors import eye_direction, in_sight_box
from render import colors
from world.geometry import Vector2D
from world.pond import PondSnapshot

Camera = Tuple[float, float]

BODY_RADIUS = 7
TAIL_LENGTH = 12
RAY_LENGTH = 60
FOOD_DRAW_RADIUS = 4
CHART_HISTORY = 100


def _to_screen(x: float, y: float, camera: Camera) -> Tuple[int, int]:
    return (int(x - camera[0]), int(y - camera[1]))


def draw_grid(screen: pygame.Surface, world_size: float, cells: int, camera: Camera) -> None:
    cell = world_size / cells
    for gx in range(cells):
        for gy in range(cells):
            if (gx + gy) % 2 == 0:
                x, y = _to_screen(gx * cell, gy * cell, camera)
                pygame.draw.rect(screen, colors.GRID, pygame.Rect(x, y, math.ceil(cell), math.ceil(cell)))


def draw_food(
    screen: pygame.Surface,
    foods: Sequence[Tuple[float, float]],
    camera: Camera,
    viewer: Optional[OrganismSnapshot] = None,
    sight_length: float = 0.0,
) -> None:
    # with a selected organism, only show what it could possibly see
    for fx, fy in foods:
        if viewer is not None and not in_sight_box(Vector2D(*viewer.position), Vector2D(fx, fy), sight_length):
            continue
        pygame.draw.circle(screen, colors.FOOD, _to_screen(fx, fy, camera), FOOD_DRAW_RADIUS)


def draw_organism(screen: pygame.Surface, org: OrganismSnapshot, camera: Camera, draw_sensors: bool = False) -> None:
    x, y = _to_screen(org.position[0], org.position[1], camera)

    if draw_sensors:
        num_eyes = len(org.sensors)
        for eye, strength in enumerate(org.sensors):
            direction = eye_direction(org.angle, org.fov, eye, num_eyes)
            end = (x + math.cos(direction) * RAY_LENGTH, y + math.sin(direction) * RAY_LENGTH)
            pygame.draw.line(screen, colors.signal(strength), (x, y), end, 1)

    if not org.alive:
        pygame.draw.circle(screen, colors.DEAD, (x, y), BODY_RADIUS)
        return

    tint = color(org.genes)
    tail = (x - math.cos(org.angle) * TAIL_LENGTH, y - math.sin(org.angle) * TAIL_LENGTH)
    pygame.draw.line(screen, tint, (x, y), tail, 3)
    pygame.draw.circle(screen, colors.BODY, (x, y), BODY_RADIUS)
    pygame.draw.circle(screen, tint, (x, y), BODY_RADIUS - 3)


def draw_pond(
    screen: pygame.Surface,
    snap: PondSnapshot,
    camera: Camera,
    world_size: float,
    grid_cells: int,
    sight_length: float,
    selected: int = -1,
) -> None:
    draw_grid(screen, world_size, grid_cells, camera)

    viewer = snap.organisms[selected] if 0 <= selected < len(snap.organisms) else None
    for i in range(len(snap.organisms) - 1, -1, -1):
        draw_organism(screen, snap.organisms[i], camera, draw_sensors=(i == selected))
    draw_food(screen, snap.foods, camera, viewer=viewer, sight_length=sight_length)


def _draw_neuron(screen: pygame.Surface, neuron: NeuronView, x: int, y: int, size: int) -> None:
    output = max(0.0, min(1.0, neuron.output))
    col = colors.signal(output)
    pygame.draw.rect(screen, col, pygame.Rect(x - 2, y - 2, size + 4, size + 4), 1)
    inner = int(size * output)
    if inner > 0:
        offset = int(size * 0.5 * (1 - output))
        pygame.draw.rect(screen, col, pygame.Rect(x + offset, y + offset, inner, inner))


def draw_network(
    screen: pygame.Surface,
    layers: Sequence[Sequence[NeuronView]],
    width: int = 250,
    y_offset: int = 120,
    node_size: int = 8,
) -> None:
    """Layers left to right; line color follows the decoded weight's sign."""
    num_layers = len(layers)
    spacing = int(node_size * 1.75)
    layer_spacing = width // (num_layers + 1)
    x_offset = (width - num_layers * layer_spacing) // 2
    half = node_size // 2

    def row_y(n: int, count: int) -> int:
        return int(y_offset + (-count / 2 + n) * spacing)

    for l, layer in enumerate(layers):
        x = x_offset + l * layer_spacing
        for n, neuron in enumerate(layer):
            y = row_y(n, len(layer))
            if l + 1 < num_layers:
                following = len(layers[l + 1])
                for c, weight in enumerate(neuron.weights):
                    y2 = row_y(c, following)
                    pygame.draw.line(
                        screen,
                        colors.signal(0.5 + weight / 2),
                        (x + half, y + half),
                        (x + layer_spacing + half, y2 + half),
                    )
            _draw_neuron(screen, neuron, x, y, node_size)


def draw_chart(
    screen: pygame.Surface,
    fitnesses: Sequence[float],
    bar_colors: Sequence[Tuple[float, float, float]],
    max_fitness: float,
    hud_height: int,
) -> None:
    """Bar chart of the last CHART_HISTORY average fitnesses, tinted by average genome color."""
    if len(fitnesses) != len(bar_colors):
        raise ValueError("one color per fitness value is required")

    w, h = screen.get_size()
    chart_w = w // 2
    top = h - hud_height
    margin = 8
    bar_margin = margin + 2
    bar_w = (chart_w - bar_margin * 2) / CHART_HISTORY

    pygame.draw.rect(screen, colors.CHART_BG, pygame.Rect(margin, top + margin, chart_w - margin * 2, hud_height - margin * 2))

    offset = max(0, len(fitnesses) - CHART_HISTORY)
    scale = max_fitness if max_fitness > 0 else 1.0
    for i, (fitness, rgb) in enumerate(zip(fitnesses[offset:], bar_colors[offset:])):
        bar_h = int(hud_height * (fitness / scale))
        height = max(0, bar_h - bar_margin * 2)
        if height == 0:
            continue
        col = tuple(int(c * 255) for c in rgb)
        rect = pygame.Rect(int(bar_w * i + bar_margin), top + hud_height - bar_h + bar_margin, max(1, int(bar_w)), height)
        pygame.draw.rect(screen, col, rect)


def draw_hud(screen: pygame.Surface, stats: dict) -> None:
    font = pygame.font.Font(None, 26)

    lines = [
        f"Generation: {stats.get('generation', 0)}  Step: {stats.get('time', 0)}",
        f"Speed: {stats.get('speed', 'normal')}",
        f"Alive: {stats.get('alive', 0)}  Food: {stats.get('food', 0)}",
        f"Top: {stats.get('top_fitness', 0.0):.4f}  Last avg: {stats.get('last_fitness', 0.0):.4f}",
    ]

    y = 10
    for line in lines:
        txt = font.render(line, True, colors.HUD_TEXT)
        screen.blit(txt, (screen.get_width() - 330, y))
        y += 22
