"""
Pixel vertex for the same-color adjacency graph.

A vertex stands for one pixel coordinate. Its neighbours are the 4-adjacent
pixels of identical color, kept in insertion order so traversals are
deterministic for a given construction order.
"""


class PixelVertex:
    """
    One pixel of a PixelGraph.

    Neighbour references are not owned: every vertex belongs to the graph that
    created it (``graph``), or to no graph when built standalone.
    """

    def __init__(self, x, y, graph=None):
        self._x = x
        self._y = y
        self.graph = graph
        # dict used as an ordered set
        self._neighbours = {}

    @property
    def x(self):
        return self._x

    @property
    def y(self):
        return self._y

    def neighbours(self):
        """Return the neighbours as a tuple; its length is the degree."""
        return tuple(self._neighbours)

    def add_neighbour(self, other):
        """
        Connect this vertex and other in both directions.

        Does nothing if they are already neighbours, if other is None or if
        other is this vertex.
        """
        if other is None or other is self or other in self._neighbours:
            return
        self._neighbours[other] = None
        other._neighbours[self] = None

    def remove_neighbour(self, other):
        """Disconnect this vertex and other in both directions, if connected."""
        if other not in self._neighbours:
            return
        del self._neighbours[other]
        other._neighbours.pop(self, None)

    def degree(self):
        return len(self._neighbours)

    def is_neighbour(self, other):
        return other in self._neighbours

    def __repr__(self):
        return f"PixelVertex(x={self._x}, y={self._y}, degree={len(self._neighbours)})"
