"""
Connected component counting and labelling.

A component is a maximal same-color 4-connected region. Adjacent regions of
different colors are separate components.
"""

import numpy as np

from pixelgraph.regions.traversal import walk_dfs
from pixelgraph.regions.visited import VisitedGrid
from pixelgraph.tracer import get_tracer, trace


def _scan_components(graph):
    """
    Yield one list of vertices per component.

    Coordinates are scanned row-major; each unvisited vertex found starts a
    depth-first mark of its whole component.
    """
    visited = VisitedGrid.for_graph(graph)

    for y in range(graph.height):
        for x in range(graph.width):
            if visited.is_visited(x, y):
                continue
            yield list(walk_dfs(graph.get_pixel_vertex(x, y), visited))


@trace(label="count_components")
def count_components(graph):
    """Return the number of connected components in the graph."""
    tracer = get_tracer()

    count = sum(1 for _ in _scan_components(graph))

    tracer.event(f"Components: {count}")
    return count


@trace(label="label_components")
def label_components(graph):
    """
    Label every pixel with its component number.

    Returns an int32 array of shape (height, width). Labels start at 1 and are
    numbered in the order components are first met in a row-major scan, so
    ``labels.max()`` equals ``count_components(graph)``.
    """
    tracer = get_tracer()

    labels = np.zeros((graph.height, graph.width), dtype=np.int32)
    count = 0
    for component in _scan_components(graph):
        count += 1
        for vertex in component:
            labels[vertex.y, vertex.x] = count

    tracer.event(f"Labelled {count} components")
    return labels
