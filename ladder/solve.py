#!/usr/bin/env python
"""Find the shortest word ladder between two words.

    $ ladder cold warm
    cold -> cord -> card -> ward -> warm

Each step changes exactly one letter, and every word along the way must be in
the dictionary. Letters which already match the stop word are shown in green.
"""

import argparse
import sys
import time

from ladder.args import add_standard_args, get_graph_from_args, get_words_from_args
from ladder.dictionary import normalize_word
from ladder.graph import num_edges
from ladder.printer import format_path
from ladder.search import LadderError, find_shortest_path


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="ladder",
        description="Find a shortest word ladder from start to stop.",
    )
    add_standard_args(parser, length=False)
    parser.add_argument("start", type=str, help="Starting word")
    parser.add_argument("stop", type=str, help="Ending word")
    parser.add_argument(
        "--no_color",
        action="store_true",
        help="Don't highlight letters which match the stop word.",
    )
    parser.add_argument(
        "--stats",
        action="store_true",
        help="Write dictionary size, edge count and timings to stderr.",
    )
    parser.add_argument(
        "--show_length",
        action="store_true",
        help="Print the number of steps in the ladder after it.",
    )
    args = parser.parse_args(argv)

    start = normalize_word(args.start)
    stop = normalize_word(args.stop)
    if len(start) != len(stop):
        sys.stderr.write(f"{start} and {stop} must be the same length.\n")
        return 1
    args.length = len(start)

    start_s = time.time()
    words = get_words_from_args(args)
    graph = get_graph_from_args(args, words)
    graph_s = time.time()
    if args.stats:
        sys.stderr.write(
            f"{len(words)} words, {num_edges(graph)} edges in {graph_s - start_s:.2f}s\n"
        )

    try:
        path = find_shortest_path(graph, start, stop)
    except LadderError as e:
        sys.stderr.write(f"{e}\n")
        return 1
    end_s = time.time()
    if args.stats:
        sys.stderr.write(f"search: {end_s - graph_s:.4f}s\n")

    print(format_path(path, stop, color=not args.no_color))
    if args.show_length:
        print(f"{len(path) - 1} steps")
    return 0


if __name__ == "__main__":
    sys.exit(main())
