# particle.py

"""
Particle state and per-frame physics.

A particle is a plain record; the physics lives in free functions so it can
be driven and tested without a display.

Each particle is a damped two-spring system: one spring pulls it back to its
rest position, the other pushes it away from the cursor while the cursor is
within min_distance. Particles never interact with each other.
"""

import math
from dataclasses import dataclass, field
from typing import Tuple

import numba
import numpy as np
import pygame

import constants
from color_sampler import Color, ColorInterpolator
from layout import ParticleSpec


# --- JIT-Compiled Physics Kernel ---
# Operates only on scalars, as required by Numba's nopython mode.

@numba.jit(nopython=True)
def _step_jit(rest_x, rest_y, x, y, vx, vy, cursor_x, cursor_y,
              min_distance, push_factor, pull_factor, damping_factor,
              scale_distance, min_scale, max_scale):
    """
    Advances one particle by one frame.
    Returns (x, y, vx, vy, ax, ay, scale, color_t).
    """
    # Restoring force towards the rest position
    dx = rest_x - x
    dy = rest_y - y
    dist = math.sqrt(dx * dx + dy * dy)

    ax = dx * pull_factor
    ay = dy * pull_factor

    # Visual response, unclamped scale and clamped color parameter
    scale = dist / scale_distance * (max_scale - min_scale) + min_scale
    color_t = dist / scale_distance
    if color_t < 0.0:
        color_t = 0.0
    elif color_t > 1.0:
        color_t = 1.0

    # Repulsion from the cursor. A cursor exactly on the particle has no
    # direction to push in, so it is ignored.
    dx = x - cursor_x
    dy = y - cursor_y
    dd = math.sqrt(dx * dx + dy * dy)
    if dd > 0.0 and dd < min_distance:
        delta = min_distance - dd
        ax += (dx / dd) * delta * push_factor
        ay += (dy / dd) * delta * push_factor

    vx = (vx + ax) * damping_factor
    vy = (vy + ay) * damping_factor

    return x + vx, y + vy, vx, vy, ax, ay, scale, color_t


@dataclass
class Particle:
    """
    Represents a single particle in the animation.

    Data Contract:
    - rest_x, rest_y are set at construction and never reassigned.
    - scale and color are recomputed every frame from the distance to rest.
    - min_distance, push_factor, pull_factor and damping_factor are fixed
      per particle.
    """
    rest_x: float
    rest_y: float
    radius: float
    color_interpolator: ColorInterpolator
    min_distance: float
    push_factor: float
    pull_factor: float
    damping_factor: float
    x: float = field(default=None)
    y: float = field(default=None)
    vx: float = 0.0
    vy: float = 0.0
    ax: float = 0.0
    ay: float = 0.0
    scale: float = constants.MIN_SCALE
    color: Color = field(default=None)

    def __post_init__(self):
        if self.x is None:
            self.x = self.rest_x
        if self.y is None:
            self.y = self.rest_y
        if self.color is None:
            self.color = self.color_interpolator(0.0)

    @property
    def draw_radius(self) -> float:
        return self.radius * self.scale

    def distance_from_rest(self) -> float:
        return math.hypot(self.rest_x - self.x, self.rest_y - self.y)


def create_particle(spec: ParticleSpec, rng: np.random.Generator, physics: dict) -> Particle:
    """
    Builds a particle at rest from a layout record, drawing its physics
    constants uniformly from the [low, high] ranges in the 'physics' config.
    """
    def draw(key):
        low, high = physics[key]
        return float(rng.uniform(low, high))

    return Particle(
        rest_x=float(spec.x),
        rest_y=float(spec.y),
        radius=float(spec.radius),
        color_interpolator=spec.color_interpolator,
        min_distance=draw('min_distance'),
        push_factor=draw('push_factor'),
        pull_factor=draw('pull_factor'),
        damping_factor=draw('damping_factor'),
    )


def update_particle(particle: Particle, cursor: Tuple[float, float]) -> Particle:
    """
    Advances the particle one frame towards its rest position and away from
    the cursor. Mutates x, y, vx, vy, ax, ay, scale and color in place and
    returns the same particle.
    """
    cursor_x, cursor_y = cursor
    (particle.x, particle.y, particle.vx, particle.vy,
     particle.ax, particle.ay, particle.scale, color_t) = _step_jit(
        particle.rest_x, particle.rest_y, particle.x, particle.y,
        particle.vx, particle.vy, float(cursor_x), float(cursor_y),
        particle.min_distance, particle.push_factor,
        particle.pull_factor, particle.damping_factor,
        constants.SCALE_DISTANCE, constants.MIN_SCALE, constants.MAX_SCALE,
    )
    particle.color = particle.color_interpolator(color_t)
    return particle


def draw_particle(surface: pygame.Surface, particle: Particle):
    """
    Draws the particle as a filled circle of radius radius * scale.
    """
    pygame.draw.circle(surface, particle.color, (particle.x, particle.y), particle.draw_radius)
