"""Adjacency-list graph with per-edge directedness."""
import logging
from typing import Dict, List, Optional, Tuple

from . import traversal
from .types import NOT_FOUND, BFSResult, DFSResult

logger = logging.getLogger(__name__)


class Graph:
    """Graph over integer vertices using insertion-ordered adjacency lists.

    ``directed`` sets the default for add_edge; any single call can override
    it. The edge counter counts arcs (adjacency entries): an undirected edge
    between two distinct vertices is two arcs, a self-loop is always one.
    """

    def __init__(self, directed: bool = False):
        self._directed = directed
        self._adjacency: Dict[int, List[int]] = {}
        self._vertex_count = 0
        self._edge_count = 0

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def is_empty(self) -> bool:
        return self._vertex_count == 0

    def add_vertex(self, vertex: int) -> bool:
        """Add a vertex. Returns False if it already exists."""
        if vertex in self._adjacency:
            return False
        self._adjacency[vertex] = []
        self._vertex_count += 1
        return True

    def add_edge(self, from_vertex: int, to_vertex: int, directed: Optional[bool] = None) -> bool:
        """Add an edge, creating missing endpoints.

        Returns False if the arc from_vertex -> to_vertex already exists.
        """
        if directed is None:
            directed = self._directed

        # Auto-create vertices if they don't exist
        self.add_vertex(from_vertex)
        self.add_vertex(to_vertex)

        if to_vertex in self._adjacency[from_vertex]:
            return False

        self._adjacency[from_vertex].append(to_vertex)
        self._edge_count += 1

        # Undirected edges get the reverse arc too, except for self-loops
        if not directed and from_vertex != to_vertex:
            if from_vertex not in self._adjacency[to_vertex]:
                self._adjacency[to_vertex].append(from_vertex)
                self._edge_count += 1

        return True

    def remove_vertex(self, vertex: int) -> bool:
        """Remove a vertex and every arc into or out of it."""
        if vertex not in self._adjacency:
            return False

        removed_edges = 0
        for other, neighbors in self._adjacency.items():
            if other != vertex and vertex in neighbors:
                neighbors.remove(vertex)
                removed_edges += 1

        removed_edges += len(self._adjacency[vertex])
        del self._adjacency[vertex]

        self._vertex_count -= 1
        self._edge_count -= removed_edges
        logger.debug("removed vertex %s and %d arcs", vertex, removed_edges)
        return True

    def remove_edge(self, from_vertex: int, to_vertex: int) -> bool:
        """Remove the arc from_vertex -> to_vertex.

        On an undirected graph the reverse arc is removed as well. Returns
        True if at least one arc was removed.
        """
        if from_vertex not in self._adjacency or to_vertex not in self._adjacency:
            return False

        removed = 0
        if to_vertex in self._adjacency[from_vertex]:
            self._adjacency[from_vertex].remove(to_vertex)
            removed += 1

        if not self._directed and from_vertex != to_vertex:
            if from_vertex in self._adjacency[to_vertex]:
                self._adjacency[to_vertex].remove(from_vertex)
                removed += 1

        self._edge_count -= removed
        return removed > 0

    def has_vertex(self, vertex: int) -> bool:
        return vertex in self._adjacency

    def has_edge(self, from_vertex: int, to_vertex: int) -> bool:
        if from_vertex not in self._adjacency:
            return False
        return to_vertex in self._adjacency[from_vertex]

    def neighbors(self, vertex: int) -> List[int]:
        """Out-neighbors in insertion order; empty if the vertex is absent."""
        return list(self._adjacency.get(vertex, []))

    def degree(self, vertex: int) -> int:
        """Out-degree of vertex, or NOT_FOUND if it does not exist."""
        if vertex not in self._adjacency:
            return NOT_FOUND
        return len(self._adjacency[vertex])

    def vertices(self) -> List[int]:
        return sorted(self._adjacency)

    def edges(self) -> List[Tuple[int, int]]:
        """Every arc as a (from, to) pair, ordered by vertex then neighbor."""
        result = []
        for from_vertex in sorted(self._adjacency):
            for to_vertex in sorted(self._adjacency[from_vertex]):
                result.append((from_vertex, to_vertex))
        return result

    def clear(self) -> None:
        self._adjacency.clear()
        self._vertex_count = 0
        self._edge_count = 0

    def bfs(self, start: int) -> List[int]:
        return traversal.bfs(self, start)

    def dfs(self, start: int) -> List[int]:
        return traversal.dfs(self, start)

    def bfs_tree(self, start: int) -> BFSResult:
        return traversal.bfs_tree(self, start)

    def dfs_tree(self, start: int) -> DFSResult:
        return traversal.dfs_tree(self, start)

    def to_visual_string(self) -> str:
        if self.is_empty():
            return "Empty Graph"

        kind = "Directed" if self._directed else "Undirected"
        lines = [f"Graph ({kind}):"]
        for vertex in sorted(self._adjacency):
            neighbors = sorted(self._adjacency[vertex])
            if neighbors:
                rendered = "{" + ", ".join(str(n) for n in neighbors) + "}"
            else:
                rendered = "∅"
            lines.append(f"{vertex} --> {rendered}")
        return "\n".join(lines) + "\n"

    def __len__(self) -> int:
        return self._vertex_count

    def __contains__(self, vertex: int) -> bool:
        return vertex in self._adjacency

    def __str__(self) -> str:
        return (f"Graph(vertices={self._vertex_count}, edges={self._edge_count}, "
                f"directed={self._directed})")

    __repr__ = __str__
