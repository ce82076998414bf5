"""
neatpond: evolve food-seeking fish in a toroidal pond.

    python main.py             interactive (pygame)
    python main.py --headless  train as fast as possible, log each generation
"""

from __future__ import annotations
import argparse
import dataclasses
import logging
import random
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
import pygame

import config
from config import PondConfig
from organism.genome import Trait
from render import colors
from render.renderer import draw_chart, draw_hud, draw_network, draw_pond
from world.geometry import Vector2D
from world.pond import Pond

logger = logging.getLogger("neatpond")

SPEED_NORMAL, SPEED_FAST, SPEED_SONIC = 0, 1, 2
SPEED_NAMES = ("normal", "fast", "sonic")
SELECT_REACH = 80.0


@dataclass
class GenerationStats:
    """Per-generation history kept by the driver for reporting and the chart."""
    started: float = field(default_factory=time.monotonic)
    averages: List[float] = field(default_factory=list)
    colors: List[Tuple[float, float, float]] = field(default_factory=list)
    top: float = 0.0

    def record(self, average_fitness: float, pond: Pond) -> None:
        self.top = max(self.top, average_fitness)
        self.averages.append(average_fitness)
        self.colors.append(average_color(pond))
        logger.info(
            "generation %d: minutes %.2f, top %.5f, average %.5f",
            len(self.averages) - 1,
            (time.monotonic() - self.started) / 60.0,
            self.top,
            average_fitness,
        )


def average_color(pond: Pond) -> Tuple[float, float, float]:
    n = len(pond.organisms)
    if n == 0:
        return (0.0, 0.0, 0.0)
    r = sum(o.genes[Trait.RED] for o in pond.organisms) / n
    g = sum(o.genes[Trait.GREEN] for o in pond.organisms) / n
    b = sum(o.genes[Trait.BLUE] for o in pond.organisms) / n
    return (r, g, b)


def run_headless(pond: Pond, generations: Optional[int] = None) -> GenerationStats:
    stats = GenerationStats()
    while generations is None or len(stats.averages) < generations:
        pond.update()
        if pond.generation_over:
            stats.record(pond.reset(), pond)
    return stats


def pick_organism(pond: Pond, world_point: Vector2D) -> int:
    selected = -1
    for i in range(len(pond.organisms) - 1, -1, -1):
        d = pond.organisms[i].position - world_point
        if abs(d.x) < SELECT_REACH and abs(d.y) < SELECT_REACH:
            selected = i
    return selected


def clamp_camera(camera: Vector2D, world_size: float, w: int, h: int) -> None:
    camera.x = min(world_size - w, max(camera.x, 0.0))
    camera.y = min(world_size - h, max(camera.y, 0.0))


def run_gui(pond: Pond) -> None:
    cfg = pond.config
    pygame.init()
    w, h = config.SCREEN_W, config.SCREEN_H
    screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
    pygame.display.set_caption("neatpond")
    clock = pygame.time.Clock()

    stats = GenerationStats()
    speed = SPEED_NORMAL
    camera = Vector2D((cfg.world_size - w) / 2, (cfg.world_size - h) / 2)
    mouse = Vector2D()
    selected = -1
    follow = False
    dragging = False
    discard_click = False
    show_hud = True
    running = True

    while running:
        if follow and 0 <= selected < len(pond.organisms):
            target = pond.organisms[selected].position
            camera.x = target.x - w / 2
            camera.y = target.y - h / 2

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
            elif e.type == pygame.VIDEORESIZE:
                w, h = e.w, e.h
            elif e.type == pygame.MOUSEMOTION:
                if dragging:
                    dx, dy = e.rel
                    camera.x -= dx
                    camera.y -= dy
                    clamp_camera(camera, cfg.world_size, w, h)
                    if abs(dx) > 1 or abs(dy) > 1:
                        discard_click = True
                        follow = False
                mouse = Vector2D(*e.pos)
            elif e.type == pygame.MOUSEBUTTONDOWN:
                dragging = True
                discard_click = False
            elif e.type == pygame.MOUSEBUTTONUP:
                dragging = False
                if not discard_click:
                    selected = pick_organism(pond, mouse + camera)
                    follow = selected >= 0
            elif e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    running = False
                elif e.key == pygame.K_f:
                    pond.spawn_food(mouse + camera)
                elif e.key == pygame.K_SPACE:
                    speed = (speed + 1) % len(SPEED_NAMES)
                elif e.key == pygame.K_TAB:
                    show_hud = not show_hud

        pond.update()

        # at normal speed generations only end when the user speeds up
        if speed != SPEED_NORMAL and pond.generation_over:
            stats.record(pond.reset(), pond)

        if speed == SPEED_SONIC and pond.time != 0:
            continue

        snap = pond.snapshot()
        screen.fill(colors.BG)
        cam = camera.as_tuple()
        draw_pond(screen, snap, cam, cfg.world_size, config.GRID_SIZE, cfg.sight_length, selected)

        if show_hud:
            if 0 <= selected < len(snap.organisms):
                draw_network(screen, snap.organisms[selected].brain)
            draw_chart(screen, stats.averages, stats.colors, stats.top, config.HUD_HEIGHT)
            draw_hud(screen, {
                "generation": snap.generation,
                "time": snap.time,
                "speed": SPEED_NAMES[speed],
                "alive": sum(1 for o in snap.organisms if o.alive),
                "food": len(snap.foods),
                "top_fitness": stats.top,
                "last_fitness": stats.averages[-1] if stats.averages else 0.0,
            })

        pygame.display.flip()
        if speed == SPEED_NORMAL:
            clock.tick(config.FPS)

    pygame.quit()


def build_config(args: argparse.Namespace) -> PondConfig:
    overrides = {}
    if args.population is not None:
        overrides["population_size"] = args.population
    if args.lifespan is not None:
        overrides["lifespan"] = args.lifespan
    if args.birth_location:
        overrides["inherit_birth_location"] = True
    return dataclasses.replace(PondConfig(), **overrides)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evolve neural-network fish in a pond.")
    parser.add_argument("--headless", action="store_true", help="run without a window, as fast as possible")
    parser.add_argument("--generations", type=int, default=None, help="stop after N generations (headless)")
    parser.add_argument("--seed", type=int, default=None, help="seed for a reproducible run")
    parser.add_argument("--population", type=int, default=None)
    parser.add_argument("--lifespan", type=int, default=None, help="steps per generation")
    parser.add_argument("--birth-location", action="store_true", help="spawn organisms at their inherited birth spot")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pond = Pond(build_config(args), rng=random.Random(args.seed))
    if args.headless:
        run_headless(pond, args.generations)
    else:
        run_gui(pond)


if __name__ == "__main__":
    main()
