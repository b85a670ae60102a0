"""Standard command-line arguments shared across the ladder tools."""

import argparse

from ladder.dictionary import DEFAULT_LENGTH, load_default_words, load_words
from ladder.graph import Graph, build_graph, build_graph_bucketed


def add_standard_args(parser: argparse.ArgumentParser, *, length=True):
    parser.add_argument(
        "--dictionary",
        type=str,
        default=None,
        help="Path to dictionary file with one word per line. "
        "Defaults to the bundled list of four-letter words.",
    )
    if length:
        parser.add_argument(
            "--length",
            type=int,
            default=None,
            help=f"Only use dictionary words of this length (default: {DEFAULT_LENGTH}).",
        )
    parser.add_argument(
        "--bucketed",
        action="store_true",
        help="Build the graph from wildcard buckets rather than comparing "
        "every pair of words. Much faster for large dictionaries.",
    )


def get_words_from_args(args: argparse.Namespace) -> list[str]:
    length = getattr(args, "length", None) or DEFAULT_LENGTH
    if args.dictionary:
        return load_words(args.dictionary, length)
    return load_default_words(length)


def get_graph_from_args(args: argparse.Namespace, words: list[str]) -> Graph:
    if args.bucketed:
        return build_graph_bucketed(words)
    return build_graph(words)
