"""Build the label sequence and write it out in two passes."""

from __future__ import annotations

import sys
from typing import Iterator, TextIO

from .classifier import classify
from .constants import FIRST_INDEX, LAST_INDEX, LINE_FORMAT


def build_results(first: int = FIRST_INDEX, last: int = LAST_INDEX) -> tuple[str, ...]:
    """Classify every index from ``first`` to ``last`` inclusive.

    Args:
        first: Lowest index.
        last: Highest index.

    Returns:
        Labels in ascending index order; entry ``k`` belongs to index ``first + k``.
    """
    labels: list[str] = []
    for index in range(first, last + 1):
        labels.append(classify(index))
    return tuple(labels)


def format_line(position: int, label: str) -> str:
    return LINE_FORMAT.format(position=position, label=label)


def counted_lines(results: tuple[str, ...]) -> Iterator[str]:
    """Yield one line per label, numbered from 1."""
    for position, label in enumerate(results, start=1):
        yield format_line(position, label)


def indexed_lines(results: tuple[str, ...]) -> Iterator[str]:
    """Yield one line per label, numbered by 0-based position."""
    for position in range(len(results)):
        yield format_line(position, results[position])


def run(stream: TextIO | None = None) -> int:
    """Write both passes over the full range.

    Args:
        stream: Output stream; defaults to stdout.

    Returns:
        Number of lines written.
    """
    out = stream if stream is not None else sys.stdout
    results = build_results()

    written = 0
    # pass 1 completes before pass 2 starts
    for line in counted_lines(results):
        print(line, end="", file=out)
        written += 1
    for line in indexed_lines(results):
        print(line, end="", file=out)
        written += 1
    return written
