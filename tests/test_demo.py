import pytest

from searchtrees.demo import main


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Binary Search Tree contents:",
        "a 1",
        "b 2",
        "Found b",
        "Erasing b",
        "",
        "AVLTree contents:",
        "a 1",
        "b 2",
        "Found b",
        "Erasing b",
    ]


def test_main_rejects_unknown_argument():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2