"""
Region outlining over a pixel graph.

Walks the whole region of the start vertex but paints only its boundary
vertices. A vertex is on the boundary when it has fewer than 4 same-color
neighbours; with 4-connectivity that covers both pixels touching another color
and pixels on the image edge, which can never reach degree 4.
"""

from pixelgraph.regions.traversal import walk_bfs, walk_dfs
from pixelgraph.tracer import get_tracer, trace

FULL_DEGREE = 4


def is_boundary(vertex):
    return vertex.degree() < FULL_DEGREE


def _outline(walk, start, writer, outline_color):
    tracer = get_tracer()

    visited = 0
    painted = 0
    for vertex in walk(start):
        visited += 1
        if is_boundary(vertex):
            writer.set_pixel(vertex.x, vertex.y, outline_color)
            painted += 1

    tracer.event(f"Outlined {painted} of {visited} region pixels", color=outline_color)
    return painted


@trace(label="outline_region_dfs")
def outline_region_dfs(start, writer, outline_color):
    """Depth-first outline of the start vertex's region."""
    _outline(walk_dfs, start, writer, outline_color)


@trace(label="outline_region_bfs")
def outline_region_bfs(start, writer, outline_color):
    """Breadth-first outline of the start vertex's region."""
    _outline(walk_bfs, start, writer, outline_color)
