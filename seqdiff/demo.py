"""Command that prints a tour of the package's diff and matching functions."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from seqdiff.differ import Differ
from seqdiff.diffs import context_diff, get_close_matches, unified_diff
from seqdiff.sequencematcher import SequenceMatcher


def main(argv: Sequence[str] | None = None) -> int:
    """Print sample output of each diff and matching function."""
    parser = argparse.ArgumentParser(
        prog="seqdiff-demo",
        description="Show sample diffs, close matches and sequence matching results.",
    )
    parser.parse_args(argv)

    first_text = "one two three four".split(" ")
    second_text = "zero one tree four".split(" ")
    dates = ("2005-01-26 23:30:50", "2010-04-02 10:20:52")

    for line in unified_diff(first_text, second_text, "Original", "Current", *dates, 3):
        print(repr(line))
    for line in context_diff(first_text, second_text, "Original", "Current", *dates, 3):
        print(repr(line))

    words = ["ape", "apple", "peach", "puppy"]
    print(repr(get_close_matches("appel", words, 3, 0.6)))

    for line in Differ().compare(first_text, second_text):
        print(repr(line))

    matcher = SequenceMatcher("one two three four", "zero one tree four")
    print(repr(matcher.find_longest_match(0, 18, 0, 18)))
    print(repr(matcher.get_matching_blocks()))
    print(repr(matcher.get_opcodes()))
    print(repr(matcher.get_grouped_opcodes(2)))
    print(repr(matcher.ratio()))
    matcher.set_seqs("aaaaa", "aaaab")
    print(repr(matcher.ratio()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())