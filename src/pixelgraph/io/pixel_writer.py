"""
Pixel writers and output saving for pixelgraph.

Region algorithms paint through any object with a ``set_pixel(x, y, color)``
method; ArrayPixelWriter is the numpy-backed one used by the pipeline.
"""

import json
import os
from typing import Protocol

import cv2
import numpy as np

from pixelgraph.tracer import get_tracer


class PixelWriter(Protocol):
    """Sink for pixel colors painted by region algorithms."""

    def set_pixel(self, x: int, y: int, color) -> None:
        ...


class ArrayPixelWriter:
    """
    Paints into an (H, W[, C]) numpy image.

    The array is written in place; pass a copy to keep the original.
    """

    def __init__(self, image):
        self.image = image
        self.write_count = 0

    def set_pixel(self, x, y, color):
        self.image[y, x] = color
        self.write_count += 1


def parse_color(text):
    """
    Parse "R,G,B" (or a single gray value) into a tuple of ints in 0..255.

    Raises ValueError on anything else.
    """
    parts = [p.strip() for p in str(text).split(",")]
    try:
        values = tuple(int(p) for p in parts)
    except ValueError:
        raise ValueError(f"Invalid color: {text!r}") from None
    if len(values) not in (1, 3) or any(v < 0 or v > 255 for v in values):
        raise ValueError(f"Invalid color: {text!r} (expected R,G,B in 0..255)")
    return values


def ensure_dir(path):
    """Create directory if it does not exist."""
    if path:
        os.makedirs(path, exist_ok=True)


def save_image(img, path):
    """
    Save an RGB or grayscale image to disk.

    Converts RGB to BGR for OpenCV. Raises ValueError if OpenCV cannot write
    the file.
    """
    tracer = get_tracer()

    if img.ndim == 3 and img.shape[2] == 3:
        img_bgr = cv2.cvtColor(np.ascontiguousarray(img), cv2.COLOR_RGB2BGR)
    else:
        img_bgr = img

    ensure_dir(os.path.dirname(path))
    if not cv2.imwrite(path, img_bgr):
        raise ValueError(f"Failed to write image: {path}")
    tracer.event(f"Saved image: {path}")


def save_json(data, path, indent=2):
    """Save a dictionary or pydantic model to JSON."""
    tracer = get_tracer()

    ensure_dir(os.path.dirname(path))

    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, default=str)

    tracer.event(f"Saved JSON: {path}")
