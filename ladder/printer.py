"""Render a word ladder for the terminal."""

from typing import Sequence

import click

SEPARATOR = " -> "


def format_word(word: str, stop: str, color=True) -> str:
    """Highlight the letters which already match the stop word in green."""
    out = []
    for cword, cstop in zip(word, stop):
        if color and cword == cstop:
            out.append(click.style(cword, fg="green"))
        else:
            out.append(cword)
    return "".join(out)


def format_path(path: Sequence[str], stop: str, color=True, sep=SEPARATOR) -> str:
    out = []
    for word in path:
        out.append(format_word(word, stop, color))
        if word == stop:
            break
    return sep.join(out)
