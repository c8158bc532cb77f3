"""
Image loading for pixelgraph.

Reads image files with OpenCV and converts them to the ``grid[x][y]`` color
layout PixelGraph is built from.
"""

import os

import cv2
import numpy as np

from pixelgraph.tracer import get_tracer, trace

SUPPORTED_EXTENSIONS = [".png", ".bmp", ".tiff", ".tif", ".jpg", ".jpeg"]


@trace(label="load_image")
def load_image(path):
    """
    Load an image from disk.

    Returns a tuple of (image, metadata) where:
    - image: RGB numpy array (H, W, 3)
    - metadata: dict with width, height, source_path

    Raises FileNotFoundError if path does not exist.
    Raises ValueError if the file is not a readable image.
    """
    tracer = get_tracer()

    if not os.path.exists(path):
        raise FileNotFoundError(f"Image not found: {path}")

    ext = os.path.splitext(path)[1].lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"Unsupported image format: {path}")

    img_bgr = cv2.imread(path, cv2.IMREAD_COLOR)
    if img_bgr is None:
        raise ValueError(f"Failed to load image: {path}")

    img_rgb = cv2.cvtColor(img_bgr, cv2.COLOR_BGR2RGB)
    height, width = img_rgb.shape[:2]

    tracer.event(f"Loaded image: {width}x{height}")

    metadata = {
        "width": width,
        "height": height,
        "source_path": os.path.abspath(path),
    }
    return img_rgb, metadata


def image_to_color_grid(image):
    """
    Transpose an (H, W[, C]) image into a (W, H[, C]) color grid.

    The result is indexed ``grid[x][y]``. It is a view, not a copy.
    """
    image = np.asarray(image)
    if image.ndim < 2:
        raise ValueError(f"Image must be at least 2D, got shape {image.shape}")
    return np.swapaxes(image, 0, 1)
