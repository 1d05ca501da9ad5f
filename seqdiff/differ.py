"""Human-readable line-by-line deltas with intraline change markers."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from seqdiff.sequencematcher import SequenceMatcher, Tag
from seqdiff.utils import count_leading

_CUTOFF = 0.75
_INITIAL_BEST_RATIO = 0.74


@dataclass
class Differ:
    """Produce ``ndiff``-style deltas between two sequences of lines."""

    line_junk: Callable[[str], bool] | None = None
    char_junk: Callable[[str], bool] | None = None

    def compare(self, first_sequence: Sequence[str], second_sequence: Sequence[str]) -> list[str]:
        """Return the delta lines turning ``first_sequence`` into ``second_sequence``."""
        matcher = SequenceMatcher(first_sequence, second_sequence, self.line_junk)
        result: list[str] = []
        for opcode in matcher.get_opcodes():
            if opcode.tag is Tag.REPLACE:
                result.extend(
                    self._fancy_replace(
                        first_sequence,
                        opcode.first_start,
                        opcode.first_end,
                        second_sequence,
                        opcode.second_start,
                        opcode.second_end,
                    )
                )
            elif opcode.tag is Tag.DELETE:
                result.extend(
                    self._dump("-", first_sequence, opcode.first_start, opcode.first_end)
                )
            elif opcode.tag is Tag.INSERT:
                result.extend(
                    self._dump("+", second_sequence, opcode.second_start, opcode.second_end)
                )
            else:
                result.extend(
                    self._dump(" ", first_sequence, opcode.first_start, opcode.first_end)
                )
        return result

    @staticmethod
    def _dump(tag: str, sequence: Sequence[str], start: int, end: int) -> list[str]:
        return [f"{tag} {line}" for line in sequence[start:end]]

    def _plain_replace(
        self,
        first_sequence: Sequence[str],
        first_start: int,
        first_end: int,
        second_sequence: Sequence[str],
        second_start: int,
        second_end: int,
    ) -> list[str]:
        if not (first_start < first_end and second_start < second_end):
            return []
        removed = self._dump("-", first_sequence, first_start, first_end)
        added = self._dump("+", second_sequence, second_start, second_end)
        if second_end - second_start < first_end - first_start:
            return added + removed
        return removed + added

    def _fancy_replace(
        self,
        first_sequence: Sequence[str],
        first_start: int,
        first_end: int,
        second_sequence: Sequence[str],
        second_start: int,
        second_end: int,
    ) -> list[str]:
        best_ratio = _INITIAL_BEST_RATIO
        best_i = best_j = 0
        equal_pair: tuple[int, int] | None = None

        for j in range(second_start, min(second_end, len(second_sequence))):
            second_line = second_sequence[j]
            for i in range(second_start, min(second_end, len(first_sequence))):
                first_line = first_sequence[i]
                if first_line == second_line:
                    if equal_pair is None:
                        equal_pair = (i, j)
                    continue
                cruncher = SequenceMatcher(first_line, second_line, self.char_junk)
                ratio = cruncher.ratio()
                if ratio > best_ratio:
                    best_ratio, best_i, best_j = ratio, i, j

        if best_ratio < _CUTOFF:
            if equal_pair is None:
                return self._plain_replace(
                    first_sequence,
                    first_start,
                    first_end,
                    second_sequence,
                    second_start,
                    second_end,
                )
            best_i, best_j = equal_pair
        else:
            equal_pair = None

        result = self._fancy_helper(
            first_sequence, first_start, best_i, second_sequence, second_start, best_j
        )
        first_element = first_sequence[best_i]
        second_element = second_sequence[best_j]
        if equal_pair is None:
            first_tags: list[str] = []
            second_tags: list[str] = []
            cruncher = SequenceMatcher(first_element, second_element, self.char_junk)
            for opcode in cruncher.get_opcodes():
                first_length = opcode.first_end - opcode.first_start
                second_length = opcode.second_end - opcode.second_start
                if opcode.tag is Tag.REPLACE:
                    first_tags.append("^" * first_length)
                    second_tags.append("^" * second_length)
                elif opcode.tag is Tag.DELETE:
                    first_tags.append("-" * first_length)
                elif opcode.tag is Tag.INSERT:
                    second_tags.append("+" * second_length)
                else:
                    first_tags.append(" " * first_length)
                    second_tags.append(" " * second_length)
            result.extend(
                self._qformat(
                    first_element, second_element, "".join(first_tags), "".join(second_tags)
                )
            )
        else:
            result.append("  " + first_element)
        result.extend(
            self._fancy_helper(
                first_sequence, best_i + 1, first_end, second_sequence, best_j + 1, second_end
            )
        )
        return result

    def _fancy_helper(
        self,
        first_sequence: Sequence[str],
        first_start: int,
        first_end: int,
        second_sequence: Sequence[str],
        second_start: int,
        second_end: int,
    ) -> list[str]:
        if first_start < first_end:
            if second_start < second_end:
                return self._fancy_replace(
                    first_sequence,
                    first_start,
                    first_end,
                    second_sequence,
                    second_start,
                    second_end,
                )
            return self._dump("-", first_sequence, first_start, first_end)
        if second_start < second_end:
            return self._dump("+", second_sequence, second_start, second_end)
        return []

    @staticmethod
    def _qformat(
        first_line: str, second_line: str, first_tags: str, second_tags: str
    ) -> list[str]:
        common = min(count_leading(first_line, "\t"), count_leading(second_line, "\t"))
        common = min(common, count_leading(first_tags[:common], " "))
        common = min(common, count_leading(first_tags[:common], " "))
        first_tags = first_tags[common:].rstrip()
        second_tags = second_tags[common:].rstrip()
        indent = "\t" * common

        result = [f"- {first_line}"]
        if first_tags:
            result.append(f"? {indent}{first_tags}\n")
        result.append(f"+ {second_line}")
        if second_tags:
            result.append(f"? {indent}{second_tags}\n")
        return result

    @staticmethod
    def restore(delta: Sequence[str], which: int) -> list[str]:
        """Recover one of the two compared sequences from a delta (``which`` is 1 or 2)."""
        if which not in (1, 2):
            raise ValueError("Second parameter must be 1 or 2")
        prefixes = ("- " if which == 1 else "+ ", "  ")
        return [line[2:] for line in delta for prefix in prefixes if line.startswith(prefix)]