"""Graph traversal problems on adjacency lists and matrices."""

from __future__ import annotations

from typing import Iterator, Sequence

__all__ = [
    "find_circle_num",
    "all_paths_source_target",
    "eventual_safe_nodes",
    "can_visit_all_rooms",
]


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Count connected components in an adjacency matrix."""
    n = len(is_connected)
    seen: set[int] = set()
    provinces = 0
    for start in range(n):
        if start in seen:
            continue
        provinces += 1
        to_visit = [start]
        while to_visit:
            node = to_visit.pop()
            if node in seen:
                continue
            seen.add(node)
            to_visit.extend(
                other
                for other, linked in enumerate(is_connected[node])
                if other != node and linked == 1
            )
    return provinces


def all_paths_source_target(graph: Sequence[Sequence[int]]) -> list[list[int]]:
    """List every path from node 0 to the last node of a DAG, in DFS order."""
    target = len(graph) - 1

    def walk(node: int, path: list[int]) -> Iterator[list[int]]:
        if node == target:
            yield list(path)
            return
        for nxt in graph[node]:
            path.append(nxt)
            yield from walk(nxt, path)
            path.pop()

    return list(walk(0, [0]))


_UNSEEN, _UNSAFE, _SAFE = 0, 1, 2


def eventual_safe_nodes(graph: Sequence[Sequence[int]]) -> list[int]:
    """Return, in ascending order, the nodes from which every path ends at a terminal node."""
    states = [_UNSEEN] * len(graph)
    for start in range(len(graph)):
        if states[start] != _UNSEEN:
            continue
        states[start] = _UNSAFE
        stack = [(start, iter(graph[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nxt in neighbours:
                if states[nxt] == _SAFE:
                    continue
                if states[nxt] == _UNSAFE:
                    # Every node on the current path leads into a cycle.
                    stack.clear()
                    break
                states[nxt] = _UNSAFE
                stack.append((nxt, iter(graph[nxt])))
                break
            else:
                states[node] = _SAFE
                stack.pop()
    return [node for node, state in enumerate(states) if state == _SAFE]


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Tell whether every room can be reached from room 0 using the keys found."""
    visited: set[int] = set()
    to_visit = [0]
    while to_visit:
        room = to_visit.pop()
        visited.add(room)
        to_visit.extend(key for key in rooms[room] if key not in visited)
    return len(visited) == len(rooms)