"""Reachability, unweighted shortest paths and connected components."""
from collections import deque
from typing import Dict, List, Set

from .graph import Graph
from .types import PathResult


def has_path(graph: Graph, start: int, end: int) -> bool:
    """Check if a path exists between two vertices."""
    if not graph.has_vertex(start) or not graph.has_vertex(end):
        return False

    if start == end:
        return True

    visited = {start}
    queue = deque([start])

    while queue:
        vertex = queue.popleft()
        if vertex == end:
            return True

        for neighbor in graph.neighbors(vertex):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)

    return False


def shortest_path(graph: Graph, start: int, end: int) -> PathResult:
    """Fewest-edges path from start to end (BFS)."""
    if not graph.has_vertex(start) or not graph.has_vertex(end):
        return {"exists": False, "path": [], "distance": -1}

    if start == end:
        return {"exists": True, "path": [start], "distance": 0}

    visited = {start}
    parent: Dict[int, int] = {}
    queue = deque([start])

    while queue:
        vertex = queue.popleft()
        if vertex == end:
            path = _reconstruct_path(parent, start, end)
            return {"exists": True, "path": path, "distance": len(path) - 1}

        for neighbor in sorted(graph.neighbors(vertex)):
            if neighbor not in visited:
                visited.add(neighbor)
                parent[neighbor] = vertex
                queue.append(neighbor)

    return {"exists": False, "path": [], "distance": -1}


def connected_components(graph: Graph) -> List[List[int]]:
    """Weakly connected components, each sorted, ordered by smallest vertex.

    Arc direction is ignored, so on a directed graph this yields the weak
    components.
    """
    undirected: Dict[int, Set[int]] = {v: set() for v in graph.vertices()}
    for from_vertex, to_vertex in graph.edges():
        undirected[from_vertex].add(to_vertex)
        undirected[to_vertex].add(from_vertex)

    visited: Set[int] = set()
    components = []

    for vertex in sorted(undirected):
        if vertex in visited:
            continue

        component = []
        visited.add(vertex)
        queue = deque([vertex])
        while queue:
            current = queue.popleft()
            component.append(current)
            for neighbor in undirected[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        components.append(sorted(component))

    return components


def _reconstruct_path(parent: Dict[int, int], start: int, end: int) -> List[int]:
    path = [end]
    current = end
    while current != start:
        current = parent[current]
        path.append(current)
    path.reverse()
    return path
