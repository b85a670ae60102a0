"""Build the graph of words which differ by a single letter.

The graph is a dict from each word to the list of its neighbors. Every word in
the dictionary gets an entry, even if it has no neighbors, so "in the graph"
is the same as "in the dictionary".
"""

from typing import Sequence

from tqdm import tqdm

type Graph = dict[str, list[str]]


def is_one_char_diff(a: str, b: str):
    """Do these same-length words differ in exactly one position?

    No length check is done: only the first min(len(a), len(b)) positions
    are compared.
    """
    diffs = 0
    for ca, cb in zip(a, b):
        if ca != cb:
            diffs += 1
            if diffs > 1:
                return False
    return diffs == 1


def build_graph(words: Sequence[str], progress=False) -> Graph:
    """Compare every pair of words, O(N^2).

    Edges are inserted in both directions, so only pairs (i, j) with j > i
    need to be checked. Each neighbor list winds up in dictionary order.
    """
    graph: Graph = {word: [] for word in words}
    n = len(words)
    it = range(n)
    if progress:
        it = tqdm(it, smoothing=0)
    for i in it:
        a = words[i]
        for j in range(i + 1, n):
            b = words[j]
            if is_one_char_diff(a, b):
                graph[a].append(b)
                graph[b].append(a)
    return graph


def wildcards(word: str):
    """All the patterns with one letter of word replaced by "_"."""
    for i in range(len(word)):
        yield word[:i] + "_" + word[i + 1 :]


def build_graph_bucketed(words: Sequence[str]) -> Graph:
    """Same graph as build_graph, but using wildcard buckets.

    "cold" goes into the buckets "_old", "c_ld", "co_d" and "col_". Two words
    are neighbors iff they share a bucket, and they can share at most one.
    This is O(N * L) rather than O(N^2), which matters for big word lists.
    """
    index = {}
    buckets: dict[str, list[int]] = {}
    for i, word in enumerate(words):
        if word in index:
            continue
        index[word] = i
        for pattern in wildcards(word):
            buckets.setdefault(pattern, [])
            buckets[pattern].append(i)

    graph: Graph = {word: [] for word in words}
    for word, i in index.items():
        neighbors = [j for pattern in wildcards(word) for j in buckets[pattern] if j != i]
        neighbors.sort()
        graph[word] = [words[j] for j in neighbors]
    return graph


def num_edges(graph: Graph) -> int:
    return sum(len(neighbors) for neighbors in graph.values()) // 2
