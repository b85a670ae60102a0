#!/usr/bin/env python
"""I/O-free performance test for graph construction and search.

$ python -m ladder.perf 10000 --random_seed 808813

Unreachable pairs are counted rather than treated as failures.
"""

import argparse
import random
import time

from tqdm import tqdm

from ladder.args import add_standard_args, get_words_from_args
from ladder.graph import build_graph, build_graph_bucketed, num_edges
from ladder.search import NoPathError, find_shortest_path


def main():
    parser = argparse.ArgumentParser(
        prog="Ladder perf test",
        description="Measure the speed of graph construction and search, free from I/O.",
    )
    add_standard_args(parser)
    parser.add_argument(
        "--random_seed",
        help="Explicitly set the random seed.",
        type=int,
        default=-1,
    )
    parser.add_argument(
        "num_queries",
        type=int,
        help="Number of random start/stop pairs to search",
        default=1_000,
        nargs="?",
    )
    args = parser.parse_args()
    if args.random_seed >= 0:
        random.seed(args.random_seed)

    words = get_words_from_args(args)
    if not words:
        parser.error("No words of the requested length in the dictionary.")
    print(f"Loaded {len(words)} words")

    start_s = time.time()
    graph = build_graph(words, progress=True)
    pairwise_s = time.time() - start_s

    start_s = time.time()
    bucketed = build_graph_bucketed(words)
    bucketed_s = time.time() - start_s
    assert bucketed == graph

    print(f"{num_edges(graph)} edges")
    print(f"pairwise: {pairwise_s:.02f}s, bucketed: {bucketed_s:.02f}s")

    queries = [(random.choice(words), random.choice(words)) for _ in range(args.num_queries)]
    total_steps = 0
    num_unreachable = 0
    start_s = time.time()
    for start, stop in tqdm(queries, smoothing=0):
        try:
            path = find_shortest_path(graph, start, stop)
        except NoPathError:
            num_unreachable += 1
            continue
        total_steps += len(path) - 1
    end_s = time.time()

    elapsed_s = end_s - start_s
    pace = len(queries) / elapsed_s

    print(f"{total_steps=} {num_unreachable=}")
    print(f"{elapsed_s:.02f}s, {pace:.02f} searches/sec")


if __name__ == "__main__":
    main()
