# color_sampler.py

"""
Color Sampler

Reads the two source images and turns screen-space points into pairs of
colors, one per image, plus a continuous interpolator between them.

Data Contract:
- Pixel buffers are NumPy arrays of shape (height, width, 3), dtype uint8.
- Colors are (r, g, b) tuples of Python ints in [0, 255].
- A screen point maps to image pixel (floor(x / width * img_w),
  floor(y / height * img_h)). Points that land outside the image have no
  color and are reported as None.
"""

import logging
import math
import os
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pygame

from errors import ImageLoadError
from utils import clamp

logger = logging.getLogger("particle_rings")

Color = Tuple[int, int, int]


def load_image(path: str) -> pygame.Surface:
    """
    Decodes an image file into a pygame Surface.

    Raises ImageLoadError if the file is missing or cannot be decoded. There is
    no fallback: the animation must not start without both images.
    """
    if not os.path.isfile(path):
        raise ImageLoadError(path, "file not found")
    try:
        surface = pygame.image.load(path)
    except (pygame.error, OSError) as e:
        raise ImageLoadError(path, str(e)) from e

    logger.info(f"Loaded image '{path}' ({surface.get_width()}x{surface.get_height()}).")
    return surface


def surface_to_pixels(surface: pygame.Surface) -> np.ndarray:
    """Copies a surface's RGB data into a (height, width, 3) uint8 array."""
    # surfarray is indexed [x, y]; swap to row-major [y, x].
    return np.ascontiguousarray(pygame.surfarray.array3d(surface).transpose(1, 0, 2)).astype(np.uint8)


@dataclass(frozen=True)
class ColorInterpolator:
    """
    A two-stop linear RGB gradient.

    Calling an instance with t in [0, 1] returns the blended color. t is
    clamped, so interp(-1) == interp(0) and interp(2) == interp(1).
    """
    start: Color
    end: Color

    def __call__(self, t: float) -> Color:
        t = clamp(t, 0.0, 1.0)
        return tuple(
            int(round(a + (b - a) * t)) for a, b in zip(self.start, self.end)
        )


class ColorSampler:
    """
    Samples matching colors from two images for a point on the canvas.

    Data Contract:
    - Inputs:
        - pixels_a (np.ndarray): (H, W, 3) buffer of image A. Its red channel
          also drives particle size.
        - pixels_b (np.ndarray): (H, W, 3) buffer of image B.
    - Invariants: Buffers are never modified.

    Each image is mapped through its own dimensions. For images of the same
    size this is a single pixel index shared by both buffers.
    """
    def __init__(self, pixels_a: np.ndarray, pixels_b: np.ndarray):
        for name, pixels in (('A', pixels_a), ('B', pixels_b)):
            if pixels.ndim != 3 or pixels.shape[2] < 3 or pixels.shape[0] == 0 or pixels.shape[1] == 0:
                raise ValueError(f"Image {name} must be a non-empty (height, width, 3) array, got {pixels.shape}")
        self.pixels_a = pixels_a
        self.pixels_b = pixels_b

        if pixels_a.shape[:2] != pixels_b.shape[:2]:
            logger.warning(
                f"Source images differ in size (A={pixels_a.shape[1]}x{pixels_a.shape[0]}, "
                f"B={pixels_b.shape[1]}x{pixels_b.shape[0]}); each is sampled through its own dimensions."
            )

    @staticmethod
    def pixel_coords(x: float, y: float, width: float, height: float, shape) -> Optional[Tuple[int, int]]:
        """
        Maps a canvas point to (ix, iy) in an image of the given shape.
        Returns None if the point falls outside the image.
        """
        img_h, img_w = shape[0], shape[1]
        ix = math.floor(x / width * img_w)
        iy = math.floor(y / height * img_h)
        if ix < 0 or iy < 0 or ix >= img_w or iy >= img_h:
            return None
        return ix, iy

    def sample(self, x: float, y: float, width: float, height: float) -> Optional[Tuple[Color, Color]]:
        """Returns (color_a, color_b) at the canvas point, or None if off-image."""
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas size must be positive, got {width}x{height}")

        coords_a = self.pixel_coords(x, y, width, height, self.pixels_a.shape)
        coords_b = self.pixel_coords(x, y, width, height, self.pixels_b.shape)
        if coords_a is None or coords_b is None:
            return None

        ix, iy = coords_a
        color_a = tuple(int(c) for c in self.pixels_a[iy, ix, :3])
        ix, iy = coords_b
        color_b = tuple(int(c) for c in self.pixels_b[iy, ix, :3])
        return color_a, color_b

    def interpolator(self, x: float, y: float, width: float, height: float) -> Optional[ColorInterpolator]:
        """The A-to-B gradient for the canvas point, or None if off-image."""
        colors = self.sample(x, y, width, height)
        if colors is None:
            return None
        return ColorInterpolator(*colors)
