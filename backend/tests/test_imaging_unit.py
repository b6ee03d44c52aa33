"""
Unit tests for image decoding and pixel sampling.
"""

import numpy as np
import pytest

from colorscore.config import Config
from colorscore.services.errors import DecodeError, FileTooLargeError
from colorscore.services.imaging import (
    crop_to_aspect, decode_image, extract_pixels, resize_to_grid, validate_upload_size
)
from synthetic_images import encode_image, make_solid_image, make_three_bands


class TestDecodeImage:

    def test_decode_png(self):
        img = make_solid_image((100, 150, 200), width=32, height=16)
        decoded = decode_image(encode_image(img))

        assert decoded.shape == (16, 32, 3)
        np.testing.assert_array_equal(decoded, img)

    def test_decode_rgba_drops_alpha(self):
        rgba = np.zeros((20, 20, 4), dtype=np.uint8)
        rgba[:, :] = (10, 20, 30, 128)
        decoded = decode_image(encode_image(rgba))

        assert decoded.shape == (20, 20, 3)

    def test_decode_grayscale(self):
        gray = np.full((20, 30), 77, dtype=np.uint8)
        decoded = decode_image(encode_image(gray))

        assert decoded.shape == (20, 30, 3)
        assert np.all(decoded == 77)

    def test_decode_jpeg(self):
        img = make_solid_image((200, 40, 40))
        decoded = decode_image(encode_image(img, fmt="JPEG"))
        assert decoded.shape == img.shape

    def test_decode_invalid_bytes(self):
        with pytest.raises(DecodeError):
            decode_image(b"definitely not an image")

    def test_decode_truncated_png(self):
        data = encode_image(make_solid_image((1, 2, 3)))
        with pytest.raises(DecodeError):
            decode_image(data[:40])


class TestResize:

    def test_crop_wide_image_keeps_center(self):
        img = make_three_bands()
        cropped = crop_to_aspect(img, 100, 100)

        assert cropped.shape == (100, 100, 3)
        assert np.all(cropped == (0, 255, 0))

    def test_crop_tall_image_keeps_center(self):
        img = np.transpose(make_three_bands(), (1, 0, 2))
        cropped = crop_to_aspect(img, 100, 100)

        assert cropped.shape == (100, 100, 3)
        assert np.all(cropped == (0, 255, 0))

    def test_resize_to_default_grid(self):
        grid = resize_to_grid(make_solid_image((5, 6, 7), width=640, height=480))
        assert grid.shape == (100, 100, 3)
        assert np.all(grid == (5, 6, 7))

    def test_resize_upscales_small_images(self):
        grid = resize_to_grid(make_solid_image((5, 6, 7), width=8, height=8))
        assert grid.shape == (100, 100, 3)

    def test_resize_custom_grid(self):
        grid = resize_to_grid(make_solid_image((9, 9, 9)), size=(20, 10))
        assert grid.shape == (10, 20, 3)


class TestExtractPixels:

    def test_pixel_count_is_bounded(self):
        pixels = extract_pixels(encode_image(make_solid_image((30, 120, 200), width=1200, height=900)))

        assert pixels.shape == (100 * 100, 3)
        assert pixels.dtype == np.uint8
        assert np.all(pixels == (30, 120, 200))

    def test_invalid_bytes(self):
        with pytest.raises(DecodeError):
            extract_pixels(b"\x00\x01\x02\x03")


class TestUploadSize:

    def test_accepts_small_upload(self):
        validate_upload_size(b"x" * 1024)

    def test_rejects_large_upload(self, monkeypatch):
        monkeypatch.setattr(Config, "MAX_FILE_MB", 0)
        with pytest.raises(FileTooLargeError):
            validate_upload_size(b"x")
