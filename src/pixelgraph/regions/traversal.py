"""
Depth-first and breadth-first walks over a pixel graph.

Both walks yield each reachable vertex once, in visit order. ``None`` vertices
and coordinates the visited structure rejects are skipped silently.
"""

from collections import deque

from pixelgraph.regions.visited import visited_for


def walk_dfs(start, visited=None):
    """
    Depth-first preorder from start.

    Uses an explicit stack. Neighbours are pushed in reverse so they are
    explored in insertion order, the same order a recursive walk would take.
    """
    if visited is None:
        visited = visited_for(start)

    stack = [start]
    while stack:
        vertex = stack.pop()
        if vertex is None:
            continue
        if not visited.mark(vertex.x, vertex.y):
            continue

        yield vertex

        stack.extend(reversed(vertex.neighbours()))


def walk_bfs(start, visited=None):
    """
    Breadth-first order from start.

    Neighbours are enqueued without checking visited; the check happens at
    dequeue time, so a vertex may sit in the queue more than once.
    """
    if visited is None:
        visited = visited_for(start)

    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        if vertex is None:
            continue
        if not visited.mark(vertex.x, vertex.y):
            continue

        yield vertex

        for neighbour in vertex.neighbours():
            if neighbour is not None:
                queue.append(neighbour)
