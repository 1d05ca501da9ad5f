import pytest

from seqdiff.demo import main


def _run(capsys):
    code = main([])
    return code, capsys.readouterr().out.splitlines()


def test_main_succeeds(capsys):
    code, lines = _run(capsys)
    assert code == 0
    assert len(lines) > 10


def test_main_prints_diff_headers(capsys):
    _, lines = _run(capsys)
    assert repr("--- Original\t2005-01-26 23:30:50\n") in lines
    assert repr("+++ Current\t2010-04-02 10:20:52\n") in lines
    assert repr("@@ -1,4 +1,4 @@\n") in lines
    assert repr("*** Original\t2005-01-26 23:30:50\n") in lines


def test_main_prints_close_matches(capsys):
    _, lines = _run(capsys)
    assert repr(["apple", "ape"]) in lines


def test_main_ends_with_ratio_of_near_identical_strings(capsys):
    _, lines = _run(capsys)
    assert lines[-1] == "0.8"


def test_main_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0
    assert "seqdiff-demo" in capsys.readouterr().out


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2