"""
Pixel graph construction for pixelgraph.

Builds one vertex per pixel and connects 4-adjacent pixels whose colors are
equal on every channel. The source grid is indexed ``grid[x][y]``; vertices are
stored row-major, ``vertices[y][x]``.
"""

import networkx as nx
import numpy as np

from pixelgraph.graph.vertex import PixelVertex
from pixelgraph.tracer import get_tracer, trace


class PixelOutOfBoundsError(IndexError):
    """Raised when a coordinate lies outside the graph."""

    def __init__(self, x, y, width, height):
        super().__init__(f"Pixel ({x}, {y}) outside {width}x{height} graph")
        self.x = x
        self.y = y


def _equal_colors(a, b):
    """Elementwise color equality over all channel axes."""
    same = np.asarray(a == b)
    if same.dtype == object:
        same = same.astype(bool)
    if same.ndim > 2:
        same = same.all(axis=tuple(range(2, same.ndim)))
    return same


class PixelGraph:
    """
    Same-color 4-connected adjacency graph over an image.

    The graph owns its vertices. It is built once and not changed afterwards
    by any of the region algorithms.
    """

    @trace(label="build_pixel_graph")
    def __init__(self, image_pixels):
        tracer = get_tracer()

        try:
            colors = np.asarray(image_pixels)
        except ValueError as e:
            raise ValueError(f"Color grid must have uniform row length: {e}") from e
        if colors.ndim < 2:
            raise ValueError(f"Color grid must be 2D, got shape {colors.shape}")

        self._width = colors.shape[0]
        self._height = colors.shape[1]
        width, height = self._width, self._height

        with tracer.span("allocate_vertices", module="pixel_graph"):
            self._vertices = [
                [PixelVertex(x, y, graph=self) for x in range(width)]
                for y in range(height)
            ]

        with tracer.span("wire_edges", module="pixel_graph"):
            # same_x[x, y]: pixel (x, y) matches (x + 1, y)
            # same_y[x, y]: pixel (x, y) matches (x, y + 1)
            same_x = _equal_colors(colors[1:, :], colors[:-1, :])
            same_y = _equal_colors(colors[:, 1:], colors[:, :-1])

            for y in range(height):
                row = self._vertices[y]
                for x in range(width):
                    vertex = row[x]
                    # left, right, top, bottom
                    if x > 0 and same_x[x - 1, y]:
                        vertex.add_neighbour(row[x - 1])
                    if x < width - 1 and same_x[x, y]:
                        vertex.add_neighbour(row[x + 1])
                    if y > 0 and same_y[x, y - 1]:
                        vertex.add_neighbour(self._vertices[y - 1][x])
                    if y < height - 1 and same_y[x, y]:
                        vertex.add_neighbour(self._vertices[y + 1][x])

            tracer.event(f"Graph: {width}x{height}, edges={self.edge_count()}")

    @property
    def width(self):
        return self._width

    @property
    def height(self):
        return self._height

    def get_pixel_vertex(self, x, y):
        """
        Return the vertex at (x, y).

        Raises PixelOutOfBoundsError for coordinates outside the image,
        negative ones included.
        """
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise PixelOutOfBoundsError(x, y, self._width, self._height)
        return self._vertices[y][x]

    def edge_count(self):
        return sum(v.degree() for v in self) // 2

    def __iter__(self):
        """Iterate over vertices in row-major order."""
        for row in self._vertices:
            yield from row

    def __len__(self):
        return self._width * self._height

    def __repr__(self):
        return f"PixelGraph(width={self._width}, height={self._height})"


def to_networkx(graph):
    """
    Export a PixelGraph as a networkx graph.

    Nodes are keyed by (x, y) and every pixel is present, isolated or not.
    """
    nx_graph = nx.Graph()
    for vertex in graph:
        nx_graph.add_node((vertex.x, vertex.y))
    for vertex in graph:
        for neighbour in vertex.neighbours():
            nx_graph.add_edge((vertex.x, vertex.y), (neighbour.x, neighbour.y))
    return nx_graph
