"""Close-match lookup and unified/context diff formatting."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence

from seqdiff.sequencematcher import SequenceMatcher, Tag
from seqdiff.utils import format_range_context, format_range_unified

_LINETERM = "\n"

_CONTEXT_PREFIX = {
    Tag.INSERT: "+ ",
    Tag.DELETE: "- ",
    Tag.REPLACE: "! ",
    Tag.EQUAL: "  ",
}


def get_close_matches(
    word: str, possibilities: Iterable[str], n: int = 3, cutoff: float = 0.6
) -> list[str]:
    """Return up to ``n`` possibilities at least ``cutoff`` similar to ``word``, best first."""
    if not 0.0 <= cutoff <= 1.0:
        raise ValueError("Cutoff must be greater than 0.0 and lower than 1.0")
    matcher = SequenceMatcher("", word)
    scored: list[tuple[float, str]] = []
    for candidate in possibilities:
        matcher.set_first_seq(candidate)
        ratio = matcher.ratio()
        if ratio >= cutoff:
            scored.append((ratio, candidate))
    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [candidate for _, candidate in scored[:n]]


def unified_diff(
    first_sequence: Sequence[Hashable],
    second_sequence: Sequence[Hashable],
    from_file: str = "",
    to_file: str = "",
    from_file_date: str = "",
    to_file_date: str = "",
    n: int = 3,
) -> list[str]:
    """Return a unified-format diff with ``n`` lines of context."""
    result: list[str] = []
    matcher = SequenceMatcher(first_sequence, second_sequence)
    for index, group in enumerate(matcher.get_grouped_opcodes(n)):
        if index == 0:
            result.append(f"--- {from_file}\t{from_file_date}{_LINETERM}")
            result.append(f"+++ {to_file}\t{to_file_date}{_LINETERM}")
        first, last = group[0], group[-1]
        first_range = format_range_unified(first.first_start, last.first_end)
        second_range = format_range_unified(first.second_start, last.second_end)
        result.append(f"@@ -{first_range} +{second_range} @@{_LINETERM}")
        for code in group:
            if code.tag is Tag.EQUAL:
                result.extend(
                    f" {item}" for item in first_sequence[code.first_start:code.first_end]
                )
                continue
            if code.tag in (Tag.REPLACE, Tag.DELETE):
                result.extend(
                    f"-{item}" for item in first_sequence[code.first_start:code.first_end]
                )
            if code.tag in (Tag.REPLACE, Tag.INSERT):
                result.extend(
                    f"+{item}" for item in second_sequence[code.second_start:code.second_end]
                )
    return result


def context_diff(
    first_sequence: Sequence[Hashable],
    second_sequence: Sequence[Hashable],
    from_file: str = "",
    to_file: str = "",
    from_file_date: str = "",
    to_file_date: str = "",
    n: int = 3,
) -> list[str]:
    """Return a context-format diff with ``n`` lines of context."""
    result: list[str] = []
    matcher = SequenceMatcher(first_sequence, second_sequence)
    for index, group in enumerate(matcher.get_grouped_opcodes(n)):
        if index == 0:
            result.append(f"*** {from_file}\t{from_file_date}{_LINETERM}")
            result.append(f"--- {to_file}\t{to_file_date}{_LINETERM}")
        first, last = group[0], group[-1]
        result.append(f"***************{_LINETERM}")

        first_range = format_range_context(first.first_start, last.first_end)
        result.append(f"*** {first_range} ****{_LINETERM}")
        if any(code.tag in (Tag.REPLACE, Tag.DELETE) for code in group):
            for code in group:
                if code.tag is not Tag.INSERT:
                    prefix = _CONTEXT_PREFIX[code.tag]
                    result.extend(
                        f"{prefix}{item}"
                        for item in first_sequence[code.first_start:code.first_end]
                    )

        second_range = format_range_context(first.second_start, last.second_end)
        result.append(f"--- {second_range} ----{_LINETERM}")
        if any(code.tag in (Tag.REPLACE, Tag.INSERT) for code in group):
            for code in group:
                if code.tag is not Tag.DELETE:
                    prefix = _CONTEXT_PREFIX[code.tag]
                    result.extend(
                        f"{prefix}{item}"
                        for item in second_sequence[code.second_start:code.second_end]
                    )
    return result