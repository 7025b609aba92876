# conftest.py

import os

# pygame surfaces and events must work without a display.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import numpy as np
import pytest

from color_sampler import ColorInterpolator
from layout import ParticleSpec


@pytest.fixture
def physics():
    return {
        'min_distance': [100, 200],
        'push_factor': [0.01, 0.02],
        'pull_factor': [0.002, 0.006],
        'damping_factor': [0.90, 0.95],
    }


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def interpolator():
    return ColorInterpolator((0, 0, 0), (200, 100, 50))


@pytest.fixture
def spec(interpolator):
    return ParticleSpec(x=300.0, y=400.0, radius=6.0, color_interpolator=interpolator, ring=3)


@pytest.fixture
def corner_images():
    """A 2x2 image A with a distinct color per pixel, and a constant image B."""
    pixels_a = np.array([
        [[255, 0, 0], [0, 255, 0]],
        [[0, 0, 255], [128, 64, 32]],
    ], dtype=np.uint8)
    pixels_b = np.array([
        [[10, 10, 10], [20, 20, 20]],
        [[30, 30, 30], [40, 50, 60]],
    ], dtype=np.uint8)
    return pixels_a, pixels_b
