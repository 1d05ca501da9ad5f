"""Small helpers shared by the matcher and the diff formatters."""


def calculate_ratio(matches: int, length: int) -> float:
    """Return the similarity ratio ``2 * matches / length``, or 1.0 for empty input."""
    if length:
        return 2.0 * matches / length
    return 1.0


def count_leading(line: str, c: str) -> int:
    """Count how many times the character ``c`` repeats at the start of ``line``."""
    return len(line) - len(line.lstrip(c))


def format_range_unified(start: int, end: int) -> str:
    """Format a half-open line range the way unified diff hunk headers do."""
    beginning = start + 1
    length = end - start
    if length == 1:
        return str(beginning)
    if length == 0:
        beginning -= 1
    return f"{beginning},{length}"


def format_range_context(start: int, end: int) -> str:
    """Format a half-open line range the way context diff hunk headers do."""
    beginning = start + 1
    length = end - start
    if length == 0:
        beginning -= 1
    if length <= 1:
        return str(beginning)
    return f"{beginning},{beginning + length - 1}"