"""Unit tests for PNG storage helpers."""

import numpy as np
import pytest
from PIL import Image

import pycolornoise as pcn
from pycolornoise.misc import load_png, save_png


@pytest.mark.unit
def test_save_and_load_pixel_buffer(tmp_path, rng):
    pixels = pcn.blue_noise(24, 16, 2, 1.0, rng=rng)
    path = tmp_path / "blue.png"

    save_png(pixels, path)

    with Image.open(path) as img:
        assert img.mode == "L"
        assert img.size == (24, 16)
    np.testing.assert_array_equal(load_png(path), pixels)


@pytest.mark.unit
def test_load_converts_color_images(tmp_path):
    path = tmp_path / "rgb.png"
    Image.new("RGB", (5, 3), (255, 255, 255)).save(path)

    pixels = load_png(path)
    assert pixels.shape == (3, 5)
    assert pixels.dtype == np.uint8
    assert np.all(pixels == 255)


@pytest.mark.unit
def test_rejects_float_buffer(tmp_path):
    with pytest.raises(ValueError, match="uint8"):
        save_png(np.zeros((4, 4), dtype=np.float32), tmp_path / "bad.png")


@pytest.mark.unit
def test_rejects_non_2d_buffer(tmp_path):
    with pytest.raises(ValueError, match="2D"):
        save_png(np.zeros((4, 4, 3), dtype=np.uint8), tmp_path / "bad.png")


@pytest.mark.unit
def test_unwritable_destination(tmp_path):
    with pytest.raises(OSError):
        save_png(np.zeros((4, 4), dtype=np.uint8), tmp_path / "missing" / "out.png")
