import pytest

from arraykit import transform
from arraykit.aggregate import count_pairs
from arraykit.classify import select
from arraykit.cli import NO_MATCH, main


def _run(capsys, argv):
    code = main(argv)
    captured = capsys.readouterr()
    return code, captured.out.strip(), captured.err


def test_select_prints_matches(capsys):
    values = [12, 7, 18, 20, 5]
    code, out, _ = _run(capsys, ["select", "abundant", *map(str, values)])
    assert code == 0
    assert out == "\t".join(map(str, select(values, "abundant")))


def test_select_no_match(capsys):
    code, out, _ = _run(capsys, ["select", "even", "1", "3", "5"])
    assert code == 0
    assert out == NO_MATCH


def test_select_value_error_reported(capsys):
    code, out, err = _run(capsys, ["select", "harshad", "0"])
    assert code == 1
    assert out == ""
    assert "arraykit:" in err


def test_select_unknown_kind_exits():
    with pytest.raises(SystemExit) as info:
        main(["select", "nonsense", "1"])
    assert info.value.code == 2


def test_select_needs_values():
    with pytest.raises(SystemExit) as info:
        main(["select", "prime"])
    assert info.value.code == 2


def test_transform_reverse(capsys):
    values = [1, 2, 3, 4]
    code, out, _ = _run(capsys, ["transform", "reverse", *map(str, values)])
    assert code == 0
    assert out == " ".join(map(str, values[::-1]))


@pytest.mark.parametrize(
    "operation, func",
    [
        ("rotate", transform.rotate_right),
        ("sort-asc", transform.sort_ascending),
        ("sort-desc", transform.sort_descending),
        ("group-negatives", transform.group_negatives),
        ("squares", transform.squares),
    ],
)
def test_transform_operations(capsys, operation, func):
    values = [3, -1, 4, -5, 9]
    code, out, _ = _run(capsys, ["transform", operation, *map(str, values)])
    assert code == 0
    assert [int(x) for x in out.split()] == func(values)


def test_pairs(capsys):
    values = [1, 5, 7, -1, 5]
    code, out, _ = _run(capsys, ["pairs", "6", *map(str, values)])
    assert code == 0
    assert out == f"Count of pairs is {count_pairs(values, 6)}"


def test_missing_command_exits():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2