import pytest

from seqdiff.utils import (
    calculate_ratio,
    count_leading,
    format_range_context,
    format_range_unified,
)


def test_calculate_ratio_empty_is_one():
    assert calculate_ratio(0, 0) == 1.0


@pytest.mark.parametrize("matches", [1, 2, 5, 17])
def test_calculate_ratio_full_match_is_one(matches):
    assert calculate_ratio(matches, matches * 2) == 1.0


def test_calculate_ratio_no_match_is_zero():
    assert calculate_ratio(0, 10) == 0.0


def test_calculate_ratio_monotonic():
    assert calculate_ratio(1, 10) < calculate_ratio(2, 10) < calculate_ratio(3, 10)


@pytest.mark.parametrize("count", [0, 1, 3, 6])
@pytest.mark.parametrize("char", ["\t", " "])
def test_count_leading(count, char):
    line = char * count + "abc" + char
    assert count_leading(line, char) == count


def test_count_leading_all_same():
    assert count_leading("\t\t\t", "\t") == len("\t\t\t")


def test_count_leading_empty():
    assert count_leading("", " ") == 0


def test_format_range_unified_hunk():
    assert format_range_unified(0, 4) == "1,4"


def test_format_range_context_hunk():
    assert format_range_context(0, 4) == "1,4"


@pytest.mark.parametrize("start", [0, 4, 9])
def test_format_range_unified_single_line(start):
    assert format_range_unified(start, start + 1) == str(start + 1)


@pytest.mark.parametrize("start", [0, 4, 9])
def test_format_range_unified_empty(start):
    assert format_range_unified(start, start) == f"{start},0"


@pytest.mark.parametrize("start", [0, 4, 9])
def test_format_range_context_empty_and_single(start):
    assert format_range_context(start, start) == str(start)
    assert format_range_context(start, start + 1) == str(start + 1)


def test_format_range_context_multi_line():
    assert format_range_context(2, 5) == "3,5"