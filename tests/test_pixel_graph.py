"""Tests for pixel graph construction."""

import numpy as np
import pytest

from region_helpers import BLUE, GREEN, RED, grid_from_rows
from pixelgraph.graph.pixel_graph import PixelGraph, PixelOutOfBoundsError, to_networkx


class TestPixelGraphConstruction:
    """Tests for building the graph from a color grid."""

    def test_dimensions_from_column_major_grid(self):
        """grid[x][y]: the outer axis is the width."""
        grid = [[RED, RED, RED], [RED, RED, RED]]  # 2 columns, 3 rows
        graph = PixelGraph(grid)

        assert graph.width == 2
        assert graph.height == 3
        assert len(graph) == 6

    def test_one_vertex_per_coordinate(self, ring_rows):
        graph = PixelGraph(grid_from_rows(ring_rows))

        coords = [(v.x, v.y) for v in graph]
        assert len(coords) == len(set(coords)) == 25
        for x in range(5):
            for y in range(5):
                vertex = graph.get_pixel_vertex(x, y)
                assert (vertex.x, vertex.y) == (x, y)
                assert vertex.graph is graph

    def test_transposition(self):
        """A color at grid[x][y] ends up at vertex (x, y)."""
        # column 0 is red/blue, column 1 is blue/blue
        grid = [[RED, BLUE], [BLUE, BLUE]]
        graph = PixelGraph(grid)

        assert graph.get_pixel_vertex(0, 0).degree() == 0
        assert graph.get_pixel_vertex(1, 0).is_neighbour(graph.get_pixel_vertex(1, 1))
        assert graph.get_pixel_vertex(0, 1).is_neighbour(graph.get_pixel_vertex(1, 1))
        assert not graph.get_pixel_vertex(0, 0).is_neighbour(graph.get_pixel_vertex(1, 0))

    def test_edges_only_between_equal_adjacent_colors(self, random_rows):
        rows = np.asarray(random_rows)
        graph = PixelGraph(grid_from_rows(rows))

        for vertex in graph:
            for neighbour in vertex.neighbours():
                assert abs(vertex.x - neighbour.x) + abs(vertex.y - neighbour.y) == 1
                assert np.array_equal(rows[vertex.y, vertex.x], rows[neighbour.y, neighbour.x])
                assert neighbour.is_neighbour(vertex)
                assert neighbour is not vertex

    def test_every_equal_adjacent_pair_is_connected(self, random_rows):
        rows = np.asarray(random_rows)
        graph = PixelGraph(grid_from_rows(rows))
        height, width = rows.shape[:2]

        for y in range(height):
            for x in range(width):
                vertex = graph.get_pixel_vertex(x, y)
                if x + 1 < width:
                    same = np.array_equal(rows[y, x], rows[y, x + 1])
                    assert vertex.is_neighbour(graph.get_pixel_vertex(x + 1, y)) == same
                if y + 1 < height:
                    same = np.array_equal(rows[y, x], rows[y + 1, x])
                    assert vertex.is_neighbour(graph.get_pixel_vertex(x, y + 1)) == same

    def test_equality_uses_all_channels(self):
        """Colors differing in one channel only are not connected."""
        grid = [[(10, 20, 30)], [(10, 20, 31)]]
        graph = PixelGraph(grid)

        assert graph.edge_count() == 0

    def test_scalar_colors(self):
        grid = [["red", "red"], ["red", "blue"]]
        graph = PixelGraph(grid)

        assert graph.get_pixel_vertex(0, 0).degree() == 2
        assert graph.get_pixel_vertex(1, 1).degree() == 0
        assert graph.edge_count() == 2

    def test_uniform_image_degrees(self):
        """Corners have degree 2, edges 3 and the interior 4."""
        graph = PixelGraph(np.zeros((4, 3), dtype=np.uint8))

        assert graph.get_pixel_vertex(0, 0).degree() == 2
        assert graph.get_pixel_vertex(1, 0).degree() == 3
        assert graph.get_pixel_vertex(1, 1).degree() == 4
        # horizontal: 3 per row x 3 rows, vertical: 2 per column x 4 columns
        assert graph.edge_count() == 17

    def test_ragged_grid_rejected(self):
        with pytest.raises(ValueError):
            PixelGraph([[RED, RED], [RED]])

    def test_one_dimensional_grid_rejected(self):
        with pytest.raises(ValueError):
            PixelGraph([1, 2, 3])


class TestPixelGraphAccess:
    """Tests for vertex lookup."""

    @pytest.mark.parametrize("x, y", [(2, 0), (0, 3), (-1, 0), (0, -1), (5, 5)])
    def test_out_of_bounds(self, x, y):
        graph = PixelGraph(np.zeros((2, 3), dtype=np.uint8))

        with pytest.raises(PixelOutOfBoundsError):
            graph.get_pixel_vertex(x, y)

    def test_out_of_bounds_is_index_error(self):
        graph = PixelGraph(np.zeros((1, 1), dtype=np.uint8))

        with pytest.raises(IndexError):
            graph.get_pixel_vertex(1, 0)

    def test_iteration_is_row_major(self):
        graph = PixelGraph(np.zeros((3, 2), dtype=np.uint8))

        assert [(v.x, v.y) for v in graph] == [(0, 0), (1, 0), (2, 0), (0, 1), (1, 1), (2, 1)]


class TestToNetworkx:
    """Tests for networkx export."""

    def test_export_matches_graph(self, block_rows):
        graph = PixelGraph(grid_from_rows(block_rows))
        nx_graph = to_networkx(graph)

        assert nx_graph.number_of_nodes() == len(graph)
        assert nx_graph.number_of_edges() == graph.edge_count()
        assert nx_graph.has_edge((0, 0), (1, 0))
        assert not nx_graph.has_edge((2, 0), (3, 0))

    def test_isolated_pixels_kept(self):
        graph = PixelGraph([[RED, GREEN], [BLUE, RED]])
        nx_graph = to_networkx(graph)

        assert nx_graph.number_of_nodes() == 4
        assert nx_graph.number_of_edges() == 0
