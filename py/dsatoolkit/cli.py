"""Demonstration driver: python -m dsatoolkit demo <component>."""
import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from . import search
from .config import get_log_level
from .dynamic_array import DynamicArray
from .graph import Graph
from .linked_list import SinglyLinkedList
from .paths import connected_components, shortest_path
from .queue import Queue
from .sort import merge_sort, merge_sort_iterative
from .stack import Stack


def demo_array() -> None:
    arr = DynamicArray()
    print(f"Created empty array: {arr} (size={arr.size()}, capacity={arr.capacity()})")
    for fruit in ["Apple", "Banana", "Cherry", "Date", "Elderberry"]:
        arr.append(fruit)
        print(f"Added {fruit!r}: {arr} (size={arr.size()}, capacity={arr.capacity()})")

    print(f"Element at index 2: {arr.get(2)}")
    print(f"Index of 'Banana': {arr.index_of('Banana')}")
    arr.insert(2, "Coconut")
    print(f"Inserted 'Coconut' at index 2: {arr}")
    print(f"Removed index 1 ({arr.remove_at(1)!r}): {arr}")
    print(f"Removed 'Date': {arr.remove('Date')}, array: {arr}")
    print("Iteration: " + " ".join(arr))


def demo_list() -> None:
    lst = SinglyLinkedList()
    for value in (10, 20, 30):
        lst.push_back(value)
    lst.push_front(5)
    lst.insert(2, 15)
    print(lst.to_visual_string())
    print(f"get(2) = {lst.get(2)}, index_of(30) = {lst.index_of(30)}")
    lst.reverse()
    print(f"Reversed: {lst.to_visual_string()}")
    print(f"pop_front = {lst.pop_front()}, pop_back = {lst.pop_back()}, now {lst}")


def demo_stack() -> None:
    stack = Stack()
    for value in ("first", "second", "a-rather-long-value"):
        stack.push(value)
    print(stack)
    print(stack.to_visual_string())
    print(f"search('first') = {stack.search('first')}")
    print(f"pop = {stack.pop()}, peek = {stack.peek()}")


def demo_queue() -> None:
    queue = Queue()
    for value in ("alpha", "beta", "gamma-delta-epsilon"):
        queue.enqueue(value)
    print(queue)
    print(queue.to_visual_string())
    print(f"dequeue = {queue.dequeue()}, front = {queue.peek_front()}, back = {queue.peek_back()}")


def demo_graph() -> None:
    undirected = Graph(directed=False)
    for u, v in [(1, 2), (1, 3), (2, 4), (3, 4), (4, 5)]:
        undirected.add_edge(u, v)
    print(undirected)
    print(undirected.to_visual_string())
    print(f"BFS from 1: {undirected.bfs(1)}")
    print(f"DFS from 1: {undirected.dfs(1)}")
    print(f"Shortest path 1 -> 5: {shortest_path(undirected, 1, 5)['path']}")

    directed = Graph(directed=True)
    for u, v in [(0, 1), (0, 2), (1, 3), (2, 1), (2, 4), (3, 4), (7, 8)]:
        directed.add_edge(u, v)
    print(directed.to_visual_string())
    print(f"has_edge(0, 1) = {directed.has_edge(0, 1)}, has_edge(1, 0) = {directed.has_edge(1, 0)}")
    print(f"Components: {connected_components(directed)}")
    directed.remove_vertex(2)
    print(f"After removing vertex 2: {directed}")


def demo_search() -> None:
    data = [1, 3, 5, 7, 9, 11, 13, 15, 17, 19, 21, 23, 25]
    print(f"binary_search({data}, 7) = {search.binary_search(data, 7)}")
    print(f"find_insertion_point(.., 8) = {search.find_insertion_point(data, 8)}")

    dups = [1, 2, 2, 2, 3, 4, 4, 5, 5, 5, 5, 6]
    print(f"find_first/find_last(.., 5) = {search.find_first(dups, 5)}/{search.find_last(dups, 5)}"
          f" (count {search.count_occurrences(dups, 5)})")

    rotated = [7, 8, 9, 1, 2, 3, 4, 5, 6]
    print(f"search_rotated({rotated}, 5) = {search.search_rotated(rotated, 5)}")


def demo_sort() -> None:
    data = [64, 34, 25, 12, 22, 11, 90, 5]
    stats = merge_sort(data)
    print(f"merge_sort -> {data} ({stats['comparisons']} comparisons, {stats['merges']} merges)")

    data = [5, 2, 9, 1, 5, 6]
    merge_sort_iterative(data)
    print(f"merge_sort_iterative -> {data}")

    people = [("bob", 25), ("alice", 30), ("carol", 25), ("dave", 30)]
    merge_sort(people, key=lambda p: p[1])
    print(f"stable by age -> {people}")


DEMOS: Dict[str, Callable[[], None]] = {
    "array": demo_array,
    "list": demo_list,
    "stack": demo_stack,
    "queue": demo_queue,
    "graph": demo_graph,
    "search": demo_search,
    "sort": demo_sort,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the demo driver."""
    parser = argparse.ArgumentParser(prog="dsatoolkit",
                                     description="Data structures and algorithms demos")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging (default: from DSATOOLKIT_LOG_LEVEL)")
    subparsers = parser.add_subparsers(dest="command")

    demo_parser = subparsers.add_parser("demo", help="Run a demonstration")
    demo_parser.add_argument("component", choices=sorted(DEMOS) + ["all"])
    # SUPPRESS keeps a -v given before the subcommand from being reset
    demo_parser.add_argument("-v", "--verbose", action="store_true",
                             default=argparse.SUPPRESS,
                             help="Enable debug logging")

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")

    if args.command != "demo":
        parser.print_help()
        return 1

    names = sorted(DEMOS) if args.component == "all" else [args.component]
    for name in names:
        print(f"=== {name} ===")
        DEMOS[name]()
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
