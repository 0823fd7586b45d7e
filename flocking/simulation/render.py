"""
Drawing helpers shared by the interactive and benchmark simulations.
"""

import math
from typing import Iterable, List, Sequence, Tuple

import pygame

from ..core.flock import BoidState

Point = Tuple[float, float]


def boid_triangle(x: float, y: float, heading: float, size: float) -> List[Point]:
    """
    Vertices of the triangle marking a boid.
    
    The triangle is built pointing up (tip at y - size) and rotated around
    (x, y) by the heading plus a quarter turn, so the tip follows the velocity.
    
    Args:
        x: Boid x position
        y: Boid y position
        heading: Direction of travel in radians
        size: Distance from the centre to the tip
        
    Returns:
        List of three (x, y) points: tip, left base, right base
    """
    angle = heading + math.pi / 2
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    
    offsets = [(0.0, -size), (-size / 2, size / 2), (size / 2, size / 2)]
    return [(x + dx * cos_a - dy * sin_a, y + dx * sin_a + dy * cos_a) for dx, dy in offsets]


def draw_flock(surface: pygame.Surface, states: Iterable[BoidState], size: float,
               color: Sequence[int]) -> None:
    """
    Draw every boid as an oriented triangle.
    
    Args:
        surface: Pygame surface to draw on
        states: Boid snapshot from Flock.boids
        size: Triangle size in pixels
        color: RGB fill color
    """
    for state in states:
        x = float(state.position.x)
        y = float(state.position.y)
        if not (math.isfinite(x) and math.isfinite(y)):
            continue
        points = boid_triangle(x, y, state.heading, size)
        pygame.draw.polygon(surface, color, points)


def draw_stats(surface: pygame.Surface, lines: Iterable[str]) -> None:
    """Draw a column of text lines in the top-left corner."""
    font = pygame.font.Font(None, 24)
    y_offset = 10
    
    for text in lines:
        rendered = font.render(text, True, (200, 200, 200))
        surface.blit(rendered, (10, y_offset))
        y_offset += 25
