# layout.py

"""
Layout Generator

Places particles on concentric rings around the canvas centre and gives each
one a base radius and color gradient sampled from the source images.

Data Contract:
- Inputs: canvas size, a ColorSampler and LayoutParams.
- Outputs: an ordered list of ParticleSpec records, ring by ring, slot by slot.
- Invariants:
    - Ring 0 holds exactly one particle, exactly at (width / 2, height / 2).
      It is not offset by initial_ring_radius the way the ring formula
      would place it (1px to the right with the default radius of 1).
    - The output is a pure function of the inputs (no randomness).
"""

import logging
import math
from dataclasses import dataclass
from typing import List, NamedTuple

import constants
from color_sampler import ColorInterpolator, ColorSampler
from utils import map_range, quad_out

logger = logging.getLogger("particle_rings")


@dataclass(frozen=True)
class LayoutParams:
    ring_count: int = 30
    ring_gap: float = 2.0
    dot_gap: float = 2.0
    base_dot_radius: float = 12.0
    initial_ring_radius: float = 1.0

    @classmethod
    def from_config(cls, config: dict) -> "LayoutParams":
        """Builds params from the 'layout' section of config.json."""
        defaults = cls()
        return cls(
            ring_count=int(config.get('ring_count', defaults.ring_count)),
            ring_gap=float(config.get('ring_gap', defaults.ring_gap)),
            dot_gap=float(config.get('dot_gap', defaults.dot_gap)),
            base_dot_radius=float(config.get('base_dot_radius', defaults.base_dot_radius)),
            initial_ring_radius=float(config.get('initial_ring_radius', defaults.initial_ring_radius)),
        )


class ParticleSpec(NamedTuple):
    """Everything needed to construct one particle."""
    x: float
    y: float
    radius: float
    color_interpolator: ColorInterpolator
    ring: int


def ring_slot_count(ring_index: int, ring_radius: float, fit_radius: float, dot_gap: float) -> int:
    """
    Number of particles that fit on a ring.

    Ring 0 is always a single centre point. Outer rings pack as many slots of
    width 2 * fit_radius + dot_gap as the circumference allows, which may be 0.
    """
    if ring_index == 0:
        return 1
    slot_width = 2 * fit_radius + dot_gap
    if slot_width <= 0:
        raise ValueError(f"Slot width must be positive, got {slot_width}")
    circumference = 2 * math.pi * ring_radius
    return max(0, math.floor(circumference / slot_width))


def generate_layout(width: float, height: float, sampler: ColorSampler, params: LayoutParams) -> List[ParticleSpec]:
    """
    Generates the particle construction records for all rings.

    Slots whose position falls outside the source images carry no color data
    and are left empty.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Canvas size must be positive, got {width}x{height}")
    if params.ring_count < 1:
        raise ValueError(f"ring_count must be at least 1, got {params.ring_count}")

    specs = []
    center_x = width * 0.5
    center_y = height * 0.5
    ring_radius = params.initial_ring_radius
    # Packing uses the initial dot radius for every ring.
    fit_radius = params.base_dot_radius
    dot_radius = fit_radius
    skipped = 0

    for i in range(params.ring_count):
        fit_count = ring_slot_count(i, ring_radius, fit_radius, params.dot_gap)

        if fit_count == 0:
            logger.debug(f"Ring {i}: radius {ring_radius:.1f} too small to fit a particle.")
        else:
            angle_step = 2 * math.pi / fit_count
            for j in range(fit_count):
                theta = j * angle_step
                if i == 0:
                    x, y = center_x, center_y
                else:
                    x = math.cos(theta) * ring_radius + center_x
                    y = math.sin(theta) * ring_radius + center_y

                interpolator = sampler.interpolator(x, y, width, height)
                if interpolator is None:
                    skipped += 1
                    continue

                red = interpolator.start[0]
                radius = map_range(red, 0, 255, constants.RADIUS_MIN, constants.RADIUS_MAX)
                specs.append(ParticleSpec(x, y, radius, interpolator, i))

        logger.debug(
            f"Ring {i}: radius={ring_radius:.1f}, slots={fit_count}, dot_radius={dot_radius:.2f}"
        )

        ring_radius += fit_radius * 2 + params.ring_gap
        # Decorative eased size; not fed back into the packing above.
        dot_radius = (1 - quad_out(i / params.ring_count)) * fit_radius

    logger.info(
        f"Layout generated: {len(specs)} particles on {params.ring_count} rings "
        f"({skipped} off-image slots skipped)."
    )
    return specs
