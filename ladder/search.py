"""Breadth-first search for the shortest word ladder.

Rather than attach a parent to each node of the graph, the search keeps a
separate parent map. Each word is discovered exactly once, so every entry is
written exactly once and the map is a tree rooted at the start word.
"""

from collections import deque

from ladder.graph import Graph


class LadderError(ValueError):
    pass


class InvalidWordError(LadderError):
    def __init__(self, word: str):
        super().__init__(f"{word} is not a valid word!")
        self.word = word


class NoPathError(LadderError):
    def __init__(self, start: str, stop: str):
        super().__init__(f"No path found from {start} to {stop}")
        self.start = start
        self.stop = stop


def bfs(graph: Graph, root: str, goal: str) -> tuple[str, dict[str, str]]:
    """Search outward from root until goal is dequeued.

    Returns goal and the parent map built so far. Raises InvalidWordError if
    the search reaches a word with no entry in the graph, and NoPathError if
    goal can't be reached from root.
    """
    q = deque[str]()
    visited = set[str]()
    parent_map: dict[str, str] = {}
    visited.add(root)
    q.append(root)
    while q:
        v = q.popleft()
        if v == goal:
            return v, parent_map
        neighbors = graph.get(v)
        if neighbors is None:
            raise InvalidWordError(v)
        for w in neighbors:
            if w not in visited:
                visited.add(w)
                parent_map[w] = v
                q.append(w)

    raise NoPathError(root, goal)


def reconstruct_path(parent_map: dict[str, str], start: str, goal: str) -> list[str]:
    path = []
    ptr = goal
    while ptr != start:
        path.append(ptr)
        ptr = parent_map[ptr]
    path.append(start)
    path.reverse()
    return path


def find_shortest_path(graph: Graph, start: str, stop: str) -> list[str]:
    for word in (start, stop):
        if word not in graph:
            raise InvalidWordError(word)
    sol, parent_map = bfs(graph, start, stop)
    return reconstruct_path(parent_map, start, sol)
