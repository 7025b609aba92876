# particle_system.py

import logging
from operator import attrgetter
from typing import List, Optional, Sequence

import numpy as np
import pygame

import constants
from input_tracker import Cursor
from layout import ParticleSpec
from particle import Particle, create_particle, draw_particle, update_particle

logger = logging.getLogger("particle_rings")


class ParticleSystem:
    """
    The animation context: owns every particle, the shared cursor and the
    optional backdrop image, and renders one frame at a time.

    Data Contract:
    - Inputs:
        - specs (Sequence[ParticleSpec]): Layout records, one per particle.
        - rng (np.random.Generator): The master seeded random number generator.
        - physics (dict): The 'physics' section of the config file.
        - backdrop (pygame.Surface, optional): Drawn at (0, 0) under the particles.
    - Outputs: None. This class modifies its internal state.
    - Invariants: The particle population is fixed for the session. Particles
      never read each other's state.
    """
    def __init__(self, specs: Sequence[ParticleSpec], rng: np.random.Generator, physics: dict,
                 backdrop: Optional[pygame.Surface] = None, cursor: Optional[Cursor] = None):
        self.particles: List[Particle] = [create_particle(spec, rng, physics) for spec in specs]
        self.cursor = cursor if cursor is not None else Cursor()
        self.backdrop = backdrop
        self.frame = 0

        logger.info(f"ParticleSystem created for {len(self.particles)} particles.")

    @property
    def num_particles(self) -> int:
        return len(self.particles)

    def sort_by_scale(self):
        """Orders particles by ascending scale so the largest draw on top."""
        # list.sort is stable, so equal scales keep their relative order.
        self.particles.sort(key=attrgetter('scale'))

    def update_and_draw(self, surface: pygame.Surface):
        """
        Renders one frame: clears to black, blits the backdrop, sorts by scale,
        then updates and draws each particle in that order.
        """
        surface.fill(constants.BLACK)
        if self.backdrop is not None:
            surface.blit(self.backdrop, (0, 0))

        self.sort_by_scale()

        cursor = self.cursor.position
        for particle in self.particles:
            update_particle(particle, cursor)
            draw_particle(surface, particle)
        self.frame += 1

    def stats(self) -> dict:
        """Aggregate values for throttled logging."""
        if not self.particles:
            return {'frame': self.frame, 'mean_displacement': 0.0, 'max_scale': constants.MIN_SCALE,
                    'cursor_active': self.cursor.is_active}
        displacements = np.array([p.distance_from_rest() for p in self.particles])
        return {
            'frame': self.frame,
            'mean_displacement': float(displacements.mean()),
            'max_scale': max(p.scale for p in self.particles),
            'cursor_active': self.cursor.is_active,
        }
