"""Longest-common-block sequence matching and edit opcodes."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sequence
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from seqdiff.utils import calculate_ratio


@dataclass(frozen=True, order=True)
class Match:
    """A block where ``first[first_start:first_start+size]`` equals the second."""

    first_start: int
    second_start: int
    size: int


class Tag(Enum):
    """Kind of edit an opcode describes."""

    INSERT = "insert"
    DELETE = "delete"
    REPLACE = "replace"
    EQUAL = "equal"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Opcode:
    """An edit turning ``first[first_start:first_end]`` into ``second[second_start:second_end]``."""

    tag: Tag
    first_start: int
    first_end: int
    second_start: int
    second_end: int


JunkFilter = Callable[[Any], bool]


class SequenceMatcher:
    """Compare two sequences of hashable elements."""

    def __init__(
        self,
        first_sequence: Sequence[Hashable],
        second_sequence: Sequence[Hashable],
        is_junk: JunkFilter | None = None,
    ) -> None:
        self._is_junk = is_junk
        self._first: Sequence[Hashable] = ()
        self._second: Sequence[Hashable] = ()
        self._second_index: dict[Hashable, list[int]] = {}
        self._matching_blocks: list[Match] | None = None
        self._opcodes: list[Opcode] | None = None
        self.set_seqs(first_sequence, second_sequence)

    def set_seqs(self, first_sequence, second_sequence) -> None:
        """Replace both sequences."""
        self.set_first_seq(first_sequence)
        self.set_second_seq(second_sequence)

    def set_first_seq(self, sequence) -> None:
        """Replace the first sequence, keeping the index of the second."""
        self._first = sequence
        self._reset_cache()

    def set_second_seq(self, sequence) -> None:
        """Replace the second sequence and rebuild its element index."""
        self._second = sequence
        self._reset_cache()
        self._index_second()

    def _reset_cache(self) -> None:
        self._matching_blocks = None
        self._opcodes = None

    def _index_second(self) -> None:
        index: dict[Hashable, list[int]] = {}
        for position, item in enumerate(self._second):
            index.setdefault(item, []).append(position)
        if self._is_junk is not None:
            index = {item: pos for item, pos in index.items() if not self._is_junk(item)}
        length = len(self._second)
        if length >= 200:
            limit = length // 100 + 1
            index = {item: pos for item, pos in index.items() if len(pos) <= limit}
        self._second_index = index

    def find_longest_match(
        self, first_start: int, first_end: int, second_start: int, second_end: int
    ) -> Match:
        """Find the longest matching block within the given ranges."""
        first, second = self._first, self._second
        best_i, best_j, best_size = first_start, second_start, 0
        j2len: dict[int, int] = {}
        for i in range(first_start, min(first_end, len(first))):
            new_j2len: dict[int, int] = {}
            for j in self._second_index.get(first[i], ()):
                if j < second_start:
                    continue
                if j >= second_end:
                    break
                size = j2len.get(j - 1, 0) + 1
                new_j2len[j] = size
                if size > best_size:
                    best_i, best_j, best_size = i + 1 - size, j + 1 - size, size
            j2len = new_j2len

        while (
            best_i > first_start
            and best_j > second_start
            and first[best_i - 1] == second[best_j - 1]
        ):
            best_i -= 1
            best_j -= 1
            best_size += 1
        while (
            best_i + best_size < first_end
            and best_j + best_size < second_end
            and first[best_i + best_size] == second[best_j + best_size]
        ):
            best_size += 1
        return Match(best_i, best_j, best_size)

    def get_matching_blocks(self) -> list[Match]:
        """Return the matching blocks, ending with a zero-size sentinel."""
        if self._matching_blocks is not None:
            return list(self._matching_blocks)
        first_length, second_length = len(self._first), len(self._second)
        matches: list[Match] = []
        queue = [(0, first_length, 0, second_length)]
        while queue:
            first_start, first_end, second_start, second_end = queue.pop()
            m = self.find_longest_match(first_start, first_end, second_start, second_end)
            if not m.size:
                continue
            if first_start < m.first_start and second_start < m.second_start:
                queue.append((first_start, m.first_start, second_start, m.second_start))
            if m.first_start + m.size < first_end and m.second_start + m.size < second_end:
                queue.append(
                    (m.first_start + m.size, first_end, m.second_start + m.size, second_end)
                )
            matches.append(m)
        matches.sort()

        merged: list[Match] = []
        first_start = second_start = size = 0
        for m in matches:
            if first_start + size == m.first_start and second_start + size == m.second_start:
                size += m.size
            else:
                if size:
                    merged.append(Match(first_start, second_start, size))
                first_start, second_start, size = m.first_start, m.second_start, m.size
        if size:
            merged.append(Match(first_start, second_start, size))
        merged.append(Match(first_length, second_length, 0))
        self._matching_blocks = merged
        return list(merged)

    def get_opcodes(self) -> list[Opcode]:
        """Return the edits that turn the first sequence into the second."""
        if self._opcodes is not None:
            return list(self._opcodes)
        opcodes: list[Opcode] = []
        i = j = 0
        for m in self.get_matching_blocks():
            if i < m.first_start and j < m.second_start:
                tag = Tag.REPLACE
            elif i < m.first_start:
                tag = Tag.DELETE
            elif j < m.second_start:
                tag = Tag.INSERT
            else:
                tag = None
            if tag is not None:
                opcodes.append(Opcode(tag, i, m.first_start, j, m.second_start))
            i, j = m.first_start + m.size, m.second_start + m.size
            if m.size:
                opcodes.append(Opcode(Tag.EQUAL, m.first_start, i, m.second_start, j))
        self._opcodes = opcodes
        return list(opcodes)

    def get_grouped_opcodes(self, n: int) -> list[list[Opcode]]:
        """Group opcodes into hunks with up to ``n`` lines of context."""
        codes = self.get_opcodes() or [Opcode(Tag.EQUAL, 0, 1, 0, 1)]

        head = codes[0]
        if head.tag is Tag.EQUAL:
            codes[0] = replace(
                head,
                first_start=max(head.first_start, max(head.first_end - n, 0)),
                second_start=max(head.second_start, max(head.second_end - n, 0)),
            )
        tail = codes[-1]
        if tail.tag is Tag.EQUAL:
            codes[-1] = replace(
                tail,
                first_end=min(tail.first_start + n, tail.first_end),
                second_end=min(tail.second_start + n, tail.second_end),
            )

        groups: list[list[Opcode]] = []
        group: list[Opcode] = []
        for code in codes:
            first_start, second_start = code.first_start, code.second_start
            if code.tag is Tag.EQUAL and code.first_end - code.first_start > 2 * n:
                group.append(
                    Opcode(
                        code.tag,
                        code.first_start,
                        min(code.first_end, code.first_start + n),
                        code.second_start,
                        min(code.second_end, code.second_start + n),
                    )
                )
                groups.append(group)
                group = []
                first_start = max(first_start, max(code.first_end - n, 0))
                second_start = max(second_start, max(code.second_end - n, 0))
            group.append(
                Opcode(code.tag, first_start, code.first_end, second_start, code.second_end)
            )
        if not group or not (len(group) == 1 and group[0].tag is Tag.EQUAL):
            groups.append(group)
        return groups

    def ratio(self) -> float:
        """Return a similarity measure in the range [0, 1]."""
        matched = sum(m.size for m in self.get_matching_blocks())
        return calculate_ratio(matched, len(self._first) + len(self._second))