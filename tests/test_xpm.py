import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    find_unquoted,
    load_xpm,
    parse_xpm,
    quoted_lines,
    split_words,
    strip_comments,
)

SMALL = ["2 1 2 1", "a c #FF0000", "b c None", "ab"]


def test_split_words_on_spaces_and_tabs():
    assert split_words("  one\ttwo   three \t") == ["one", "two", "three"]
    assert split_words(" \t ") == []


def test_find_unquoted_skips_quoted_text():
    text = '"/*" x /*'
    pos = find_unquoted(text, "/*")
    assert text[pos:pos + 2] == "/*"
    assert pos > text.index('"', 1)


def test_find_unquoted_missing():
    assert find_unquoted("abc", "zz") == -1
    assert find_unquoted('"zz"', "zz") == -1


def test_strip_comments_keeps_length_and_quoted_text():
    text = 'static char *x[] = { /* hello */\n"a /* b */ c", // tail\n"d" };'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "hello" not in stripped
    assert "tail" not in stripped
    assert list(quoted_lines(stripped)) == ["a /* b */ c", "d"]


def test_quoted_lines_pairs_quotes():
    assert list(quoted_lines('x "a b", "c" y')) == ["a b", "c"]
    assert list(quoted_lines("no quotes")) == []


def test_parse_hex_and_none_colours():
    image = parse_xpm(SMALL)
    assert (image.width, image.height) == (2, 1)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == TRANSPARENT


def test_parse_named_colours_and_two_char_keys():
    lines = ["1 2 2 2", "aa c red", "bb c light grey", "aa", "bb"]
    image = parse_xpm(lines)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(0, 1) == 0xD3D3D3


def test_unknown_key_gives_black():
    image = parse_xpm(["2 1 1 1", "a c #FFFFFF", "az"])
    assert image.get_pixel(0, 0) == 0xFFFFFF
    assert image.get_pixel(1, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 1 2"],
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1 1", "a s foo", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 1 1 1", "a c #000000"],
        ["2 1 1 1", "a c #000000", "a"],
    ],
)
def test_invalid_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_matches_parse(tmp_path):
    path = tmp_path / "tile.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *tile[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1 ",\n'
        '"a c #FF0000",\n'
        '"b c None", // transparent\n'
        '"ab"\n'
        "};\n"
    )
    loaded = load_xpm(path)
    expected = parse_xpm(SMALL)
    assert list(loaded.pixels) == list(expected.pixels)
    assert (loaded.width, loaded.height) == (expected.width, expected.height)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")