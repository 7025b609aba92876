# test_color_sampler.py

import numpy as np
import pygame
import pytest

from color_sampler import ColorInterpolator, ColorSampler, load_image, surface_to_pixels
from errors import ImageLoadError


def test_interpolator_endpoints_and_midpoint():
    interp = ColorInterpolator((0, 0, 0), (200, 100, 50))
    assert interp(0.0) == (0, 0, 0)
    assert interp(1.0) == (200, 100, 50)
    assert interp(0.5) == (100, 50, 25)


def test_interpolator_clamps_parameter():
    interp = ColorInterpolator((10, 20, 30), (110, 120, 130))
    assert interp(-0.5) == interp(0.0)
    assert interp(3.0) == interp(1.0)


def test_interpolator_is_immutable():
    interp = ColorInterpolator((1, 2, 3), (4, 5, 6))
    with pytest.raises(AttributeError):
        interp.start = (0, 0, 0)


@pytest.mark.parametrize("point, expected", [
    ((50.0, 50.0), (1, 1)),
    ((0.0, 0.0), (0, 0)),
    ((49.9, 99.9), (0, 1)),
    ((75.0, 10.0), (1, 0)),
    ((100.0, 50.0), None),
    ((-0.1, 50.0), None),
    ((50.0, 120.0), None),
])
def test_pixel_coords(point, expected):
    assert ColorSampler.pixel_coords(point[0], point[1], 100, 100, (2, 2, 3)) == expected


def test_sample_center_of_two_by_two_image(corner_images):
    pixels_a, pixels_b = corner_images
    sampler = ColorSampler(pixels_a, pixels_b)
    # floor(50 / 100 * 2) == 1 on both axes: the bottom-right pixel.
    assert sampler.sample(50.0, 50.0, 100, 100) == ((128, 64, 32), (40, 50, 60))
    assert sampler.sample(10.0, 10.0, 100, 100) == ((255, 0, 0), (10, 10, 10))
    assert sampler.sample(10.0, 90.0, 100, 100) == ((0, 0, 255), (30, 30, 30))


def test_sample_off_image_is_none(corner_images):
    sampler = ColorSampler(*corner_images)
    assert sampler.sample(150.0, 50.0, 100, 100) is None
    assert sampler.interpolator(150.0, 50.0, 100, 100) is None


def test_interpolator_for_point(corner_images):
    sampler = ColorSampler(*corner_images)
    interp = sampler.interpolator(80.0, 20.0, 100, 100)
    assert interp == ColorInterpolator((0, 255, 0), (20, 20, 20))


def test_images_of_different_sizes_use_their_own_dimensions(corner_images):
    pixels_a, _ = corner_images
    pixels_b = np.zeros((4, 4, 3), dtype=np.uint8)
    pixels_b[3, 3] = (9, 8, 7)
    sampler = ColorSampler(pixels_a, pixels_b)
    assert sampler.sample(99.0, 99.0, 100, 100) == ((128, 64, 32), (9, 8, 7))


def test_rejects_bad_buffers(corner_images):
    pixels_a, _ = corner_images
    with pytest.raises(ValueError):
        ColorSampler(pixels_a, np.zeros((2, 2), dtype=np.uint8))
    with pytest.raises(ValueError):
        ColorSampler(np.zeros((0, 2, 3), dtype=np.uint8), pixels_a)


def test_sample_rejects_empty_canvas(corner_images):
    sampler = ColorSampler(*corner_images)
    with pytest.raises(ValueError):
        sampler.sample(0.0, 0.0, 0, 100)


def test_load_image_missing_file(tmp_path):
    with pytest.raises(ImageLoadError) as excinfo:
        load_image(str(tmp_path / "nope.png"))
    assert "file not found" in str(excinfo.value)


def test_load_image_undecodable_file(tmp_path):
    path = tmp_path / "broken.png"
    path.write_bytes(b"this is not an image")
    with pytest.raises(ImageLoadError):
        load_image(str(path))


def test_load_image_and_pixels_are_row_major(tmp_path):
    surface = pygame.Surface((3, 2))
    surface.fill((0, 0, 0))
    surface.set_at((2, 0), (255, 10, 20))
    surface.set_at((0, 1), (1, 2, 3))
    path = tmp_path / "tiny.png"
    pygame.image.save(surface, str(path))

    loaded = load_image(str(path))
    pixels = surface_to_pixels(loaded)

    assert pixels.shape == (2, 3, 3)
    assert pixels.dtype == np.uint8
    assert tuple(pixels[0, 2]) == (255, 10, 20)
    assert tuple(pixels[1, 0]) == (1, 2, 3)
