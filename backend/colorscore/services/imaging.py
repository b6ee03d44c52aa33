"""
ColorScore Imaging Utilities
Decodes uploaded images and downsamples them to a fixed pixel grid.
"""
import io
from typing import Tuple

import cv2
import numpy as np
from PIL import Image

from colorscore.config import config
from colorscore.services.errors import DecodeError, FileTooLargeError


def validate_upload_size(file_bytes: bytes) -> None:
    """
    Reject uploads larger than the configured limit.

    Raises:
        FileTooLargeError: If the payload exceeds MAX_FILE_MB
    """
    if len(file_bytes) > config.max_file_bytes():
        raise FileTooLargeError(f"File too large. Maximum size: {config.MAX_FILE_MB}MB")


def decode_image(file_bytes: bytes) -> np.ndarray:
    """
    Decode image bytes to an RGB uint8 array.

    Alpha and palette images are flattened to RGB; alpha is dropped.

    Raises:
        DecodeError: If the bytes are not a supported image
    """
    try:
        pil_image = Image.open(io.BytesIO(file_bytes))
        pil_image.load()

        if pil_image.mode != 'RGB':
            pil_image = pil_image.convert('RGB')

        rgb_array = np.array(pil_image)
    except Exception as e:
        raise DecodeError(f"Failed to decode image: {str(e)}") from e

    if rgb_array.ndim != 3 or rgb_array.shape[0] == 0 or rgb_array.shape[1] == 0:
        raise DecodeError(f"Decoded image has invalid shape {rgb_array.shape}")

    return rgb_array


def crop_to_aspect(img_rgb: np.ndarray, width: int, height: int) -> np.ndarray:
    """
    Center-crop an image to the aspect ratio of width × height.

    Args:
        img_rgb: Input image (H, W, 3)
        width: Target width
        height: Target height

    Returns:
        Cropped view of the input image
    """
    src_h, src_w = img_rgb.shape[:2]
    target_aspect = width / height

    if src_w / src_h > target_aspect:
        new_w = max(1, int(round(src_h * target_aspect)))
        x0 = (src_w - new_w) // 2
        return img_rgb[:, x0:x0 + new_w]

    new_h = max(1, int(round(src_w / target_aspect)))
    y0 = (src_h - new_h) // 2
    return img_rgb[y0:y0 + new_h, :]


def resize_to_grid(img_rgb: np.ndarray, size: Tuple[int, int] = None) -> np.ndarray:
    """
    Resize an image to exactly size (width, height), cropping to cover.

    Args:
        img_rgb: Input image in RGB format
        size: Target (width, height) (default from config)

    Returns:
        Resized RGB image of shape (height, width, 3)
    """
    if size is None:
        size = (config.SAMPLE_WIDTH, config.SAMPLE_HEIGHT)
    width, height = size

    cropped = crop_to_aspect(img_rgb, width, height)

    # INTER_AREA for downscaling (better quality)
    return cv2.resize(np.ascontiguousarray(cropped), (width, height), interpolation=cv2.INTER_AREA)


def extract_pixels(file_bytes: bytes, size: Tuple[int, int] = None) -> np.ndarray:
    """
    Decode an image and return its downsampled pixels.

    Args:
        file_bytes: Raw image bytes
        size: Sampling grid (width, height) (default from config)

    Returns:
        Pixel samples (width * height, 3) uint8 in RGB order

    Raises:
        DecodeError: If the bytes are not a supported image
    """
    img_rgb = decode_image(file_bytes)
    grid = resize_to_grid(img_rgb, size)
    return grid.reshape(-1, 3)
