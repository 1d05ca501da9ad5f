import pytest

from seqdiff.differ import Differ


def _is_junk_char(ch):
    return ch in (" ", "\t")


def test_fancy_replace():
    differ = Differ()
    result = "".join(
        differ._fancy_replace(["abcDefghiJkl\n"], 0, 1, ["abcdefGhijkl\n"], 0, 1)
    )
    assert result == "- abcDefghiJkl\n?    ^  ^  ^\n+ abcdefGhijkl\n?    ^  ^  ^\n"


def test_qformat():
    result = Differ()._qformat(
        "\tabcDefghiJkl\n",
        "\tabcdefGhijkl\n",
        "  ^ ^  ^      ",
        "  ^ ^  ^      ",
    )
    assert result == [
        "- \tabcDefghiJkl\n",
        "? \t ^ ^  ^\n",
        "+ \tabcdefGhijkl\n",
        "? \t ^ ^  ^\n",
    ]


def test_differ_compare():
    first_text = ["one\n", "two\n", "three\n"]
    second_text = ["ore\n", "tree\n", "emu\n"]
    result = "".join(Differ().compare(first_text, second_text))
    assert result == "- one\n?  ^\n+ ore\n?  ^\n- two\n- three\n?  -\n+ tree\n+ emu\n"


def test_differ_compare_with_func():
    first_text = ["one\n", "two\n", "three\n"]
    second_text = ["ore\n", "tree\n", "emu\n"]
    differ = Differ(char_junk=_is_junk_char)
    result = "".join(differ.compare(first_text, second_text))
    assert result == "- one\n?  ^\n+ ore\n?  ^\n- two\n- three\n?  -\n+ tree\n+ emu\n"


def test_differ_restore():
    first_text = ["one\n", "  two\n", "three\n"]
    second_text = ["ore\n", "tree\n", "emu\n"]
    diff = Differ().compare(first_text, second_text)
    assert Differ.restore(diff, 1) == first_text
    assert Differ.restore(diff, 2) == second_text


@pytest.mark.parametrize("which", [0, 3, -1])
def test_restore_rejects_bad_selector(which):
    with pytest.raises(ValueError):
        Differ.restore(["  a\n"], which)


def test_compare_identical_sequences_marks_everything_common():
    lines = ["alpha\n", "beta\n", "gamma\n"]
    result = Differ().compare(lines, lines)
    assert result == ["  alpha\n", "  beta\n", "  gamma\n"]


def test_compare_pure_insert_and_delete():
    assert Differ().compare(["a\n"], ["a\n", "b\n"]) == ["  a\n", "+ b\n"]
    assert Differ().compare(["a\n", "b\n"], ["a\n"]) == ["  a\n", "- b\n"]


def test_compare_dissimilar_lines_use_plain_replace():
    result = Differ().compare(["xyz\n"], ["abc\n"])
    assert result == ["- xyz\n", "+ abc\n"]


@pytest.mark.parametrize(
    "first, second",
    [
        (["one\n", "two\n"], ["one\n", "two\n", "three\n"]),
        (["a\n", "b\n", "c\n"], ["a\n", "c\n"]),
        ([], ["new\n"]),
        (["old\n"], []),
        (["same\n", "line one\n"], ["same\n", "line two\n"]),
    ],
)
def test_restore_round_trip(first, second):
    diff = Differ().compare(first, second)
    assert Differ.restore(diff, 1) == first
    assert Differ.restore(diff, 2) == second


def test_line_junk_is_accepted():
    differ = Differ(line_junk=lambda line: line.strip() == "")
    diff = differ.compare(["a\n", "\n", "b\n"], ["a\n", "\n", "b\n"])
    assert Differ.restore(diff, 2) == ["a\n", "\n", "b\n"]