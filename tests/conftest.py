"""Pytest fixtures for pixelgraph tests."""

import os
import tempfile

import cv2
import numpy as np
import pytest

from region_helpers import BLUE, GREEN, RED, WHITE, RecordingPixelWriter


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def writer():
    return RecordingPixelWriter()


@pytest.fixture
def ring_rows():
    """5x5 image: white background, red 3x3 ring around a blue center."""
    rows = [[WHITE] * 5 for _ in range(5)]
    for y in range(1, 4):
        for x in range(1, 4):
            rows[y][x] = RED
    rows[2][2] = BLUE
    return rows


@pytest.fixture
def block_rows():
    """6x4 image: left half red block, right half green block."""
    return [[RED] * 3 + [GREEN] * 3 for _ in range(4)]


@pytest.fixture
def random_rows():
    """Deterministic 12x9 image drawn from a three-color palette."""
    rng = np.random.default_rng(1234)
    palette = np.array([RED, GREEN, BLUE], dtype=np.uint8)
    return palette[rng.integers(0, 3, size=(9, 12))]


@pytest.fixture
def default_config():
    """Create default pipeline configuration."""
    from pixelgraph.config import PipelineConfig
    return PipelineConfig()


@pytest.fixture
def ring_image_file(temp_dir, ring_rows):
    """Write the ring image to a PNG file and return its path."""
    path = os.path.join(temp_dir, "ring.png")
    rgb = np.asarray(ring_rows, dtype=np.uint8)
    cv2.imwrite(path, cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR))
    return path
