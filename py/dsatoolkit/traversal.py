"""Graph traversal algorithms: BFS and DFS."""
from collections import deque
from typing import TYPE_CHECKING, List

from .types import BFSResult, DFSResult

if TYPE_CHECKING:
    from .graph import Graph


def bfs(graph: "Graph", start: int) -> List[int]:
    """Vertices reachable from start, in breadth-first order."""
    return bfs_tree(graph, start)["order"]


def dfs(graph: "Graph", start: int) -> List[int]:
    """Vertices reachable from start, in depth-first (preorder) order."""
    return dfs_tree(graph, start)["order"]


def bfs_tree(graph: "Graph", start: int) -> BFSResult:
    """Breadth-first search traversal."""
    if not graph.has_vertex(start):
        return {"order": [], "levels": {}, "parent": {}}

    order = []
    levels = {}
    parent = {}
    visited = {start}

    queue = deque([(start, 0)])

    while queue:
        vertex, level = queue.popleft()
        order.append(vertex)
        levels[vertex] = level

        # Get neighbors in sorted order for deterministic results
        for neighbor in sorted(graph.neighbors(vertex)):
            if neighbor not in visited:
                visited.add(neighbor)
                parent[neighbor] = vertex
                queue.append((neighbor, level + 1))

    return {
        "order": order,
        "levels": levels,
        "parent": parent
    }


def dfs_tree(graph: "Graph", start: int) -> DFSResult:
    """Depth-first search traversal.

    Uses an explicit stack of (vertex, neighbor iterator) frames, so the
    visiting order matches the recursive formulation without being bound
    by the interpreter's recursion limit.
    """
    if not graph.has_vertex(start):
        return {"order": [], "discovery": {}, "finish": {}, "parent": {}}

    order = [start]
    discovery = {start: 0}
    finish = {}
    parent = {}
    visited = {start}
    time = 1

    stack = [(start, iter(sorted(graph.neighbors(start))))]

    while stack:
        vertex, pending = stack[-1]
        for neighbor in pending:
            if neighbor not in visited:
                visited.add(neighbor)
                parent[neighbor] = vertex
                order.append(neighbor)
                discovery[neighbor] = time
                time += 1
                stack.append((neighbor, iter(sorted(graph.neighbors(neighbor)))))
                break
        else:
            stack.pop()
            finish[vertex] = time
            time += 1

    return {
        "order": order,
        "discovery": discovery,
        "finish": finish,
        "parent": parent
    }
