import pytest

from cubcaster.textutil import (
    OTHER_KIND,
    SPAWN_KIND,
    TILE_KIND,
    ParamKind,
    change_spaces,
    is_line_empty,
    is_space,
    map_char_kind,
    n_atoi,
    param_kind,
    strip_newline,
)


@pytest.mark.parametrize("ch", ["\t", "\n", "\v", "\f", "\r", " ", 32, 9])
def test_is_space_true(ch):
    assert is_space(ch) is True


@pytest.mark.parametrize("ch", ["a", "0", "1", 8, 14])
def test_is_space_false(ch):
    assert is_space(ch) is False


def test_is_line_empty():
    assert is_line_empty("  \t\n") is True
    assert is_line_empty("") is True
    assert is_line_empty(" 1 \n") is False


@pytest.mark.parametrize(
    "line, kind",
    [
        ("NO ./north.xpm\n", ParamKind.TEXTURE),
        ("EA ./east.xpm", ParamKind.TEXTURE),
        ("WE x", ParamKind.TEXTURE),
        ("SO x", ParamKind.TEXTURE),
        ("F 1,2,3\n", ParamKind.COLOR),
        ("C 1,2,3\n", ParamKind.COLOR),
        ("1111\n", ParamKind.NONE),
        (" NO x", ParamKind.NONE),
        ("N", ParamKind.NONE),
    ],
)
def test_param_kind(line, kind):
    assert param_kind(line) is kind


def test_n_atoi_ranges():
    assert n_atoi("12,34", 2, 0) == 12
    assert n_atoi("12,34", 5, 3) == 34
    assert n_atoi("12345", 3, 0) == 123


def test_n_atoi_stops_at_non_digit():
    assert n_atoi("7a9", 3, 0) == 7
    assert n_atoi(",5", 2, 0) == 0


def test_strip_newline():
    assert strip_newline("abc\n") == "abc"
    assert strip_newline("abc\ndef\n") == "abc"
    assert strip_newline("abc") == "abc"


@pytest.mark.parametrize("ch", ["1", "0"])
def test_map_char_kind_tiles(ch):
    assert map_char_kind(ch) == TILE_KIND


@pytest.mark.parametrize("ch", ["N", "E", "S", "W"])
def test_map_char_kind_spawn(ch):
    assert map_char_kind(ch) == SPAWN_KIND


@pytest.mark.parametrize("ch", [" ", "x", "2", "#"])
def test_map_char_kind_other(ch):
    assert map_char_kind(ch) == OTHER_KIND


def test_change_spaces_returns_new_rows():
    rows = [" 1 ", "1\t0"]
    result = change_spaces(rows)
    assert result == ["010", "100"]
    assert rows == [" 1 ", "1\t0"]


def test_change_spaces_leaves_no_whitespace():
    result = change_spaces(["1 N \r1"])
    assert not any(ch.isspace() for ch in result[0])
    assert len(result[0]) == len("1 N \r1")