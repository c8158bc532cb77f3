"""
Flood fill over a pixel graph.

Paints every vertex of the start vertex's same-color region through a pixel
writer. Nothing is painted twice within one call.
"""

from pixelgraph.regions.traversal import walk_bfs, walk_dfs
from pixelgraph.tracer import get_tracer, trace


def _fill(walk, start, writer, target_color):
    tracer = get_tracer()

    painted = 0
    for vertex in walk(start):
        writer.set_pixel(vertex.x, vertex.y, target_color)
        painted += 1

    tracer.event(f"Painted {painted} pixels", color=target_color)
    return painted


@trace(label="flood_fill_dfs")
def flood_fill_dfs(start, writer, target_color):
    """Depth-first flood fill. A None start paints nothing."""
    _fill(walk_dfs, start, writer, target_color)


@trace(label="flood_fill_bfs")
def flood_fill_bfs(start, writer, target_color):
    """Breadth-first flood fill. A None start paints nothing."""
    _fill(walk_bfs, start, writer, target_color)
