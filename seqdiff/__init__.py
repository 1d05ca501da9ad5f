"""Sequence matching, similarity ratios, close matches and unified, context and line-by-line diffs."""

__version__ = "0.4.0"
__all__ = ["utils", "sequencematcher", "differ", "diffs", "demo"]