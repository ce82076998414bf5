"""
neatpond module: render/colors.py

Central color palette.
"""

BG = (0, 0, 0)
GRID = (3, 5, 25)
FOOD = (120, 220, 90)
DEAD = (90, 90, 96)
BODY = (235, 235, 235)
CHART_BG = (255, 250, 244)
HUD_TEXT = (235, 235, 235)


def signal(value: float) -> tuple[int, int, int]:
    """Red (0) through yellow (0.5) to green (1)."""
    value = max(0.0, min(1.0, value))
    r = 1 - 2 * (value - 0.5) if value > 0.5 else 1.0
    g = 1.0 if value > 0.5 else 2 * value
    return (int(255 * r), int(255 * g), 125)
