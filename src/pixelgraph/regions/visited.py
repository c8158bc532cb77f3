"""
Visited tracking for region traversals.

Each traversal call owns one of these and drops it on return.
"""

import numpy as np


class VisitedGrid:
    """Boolean grid sized to the real (height, width) of a graph."""

    def __init__(self, height, width):
        self.marks = np.zeros((height, width), dtype=bool)

    @classmethod
    def for_graph(cls, graph):
        return cls(graph.height, graph.width)

    def in_bounds(self, x, y):
        height, width = self.marks.shape
        return 0 <= y < height and 0 <= x < width

    def is_visited(self, x, y):
        return self.in_bounds(x, y) and bool(self.marks[y, x])

    def mark(self, x, y):
        """
        Mark (x, y) as visited.

        Returns False when the coordinate is out of bounds or was already
        marked, True otherwise.
        """
        if not self.in_bounds(x, y) or self.marks[y, x]:
            return False
        self.marks[y, x] = True
        return True


class VisitedSet:
    """Unbounded visited tracking for vertices that belong to no graph."""

    def __init__(self):
        self.marks = set()

    def is_visited(self, x, y):
        return (x, y) in self.marks

    def mark(self, x, y):
        if (x, y) in self.marks:
            return False
        self.marks.add((x, y))
        return True


def visited_for(start):
    """Pick the visited structure for a traversal rooted at start."""
    if start is not None and start.graph is not None:
        return VisitedGrid.for_graph(start.graph)
    return VisitedSet()
