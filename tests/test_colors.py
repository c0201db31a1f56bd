import pytest

from solong.colors import lookup_color, parse_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("red", 0xFF0000),
        ("gray50", 0x7F7F7F),
        ("lightgoldenrodyellow", 0xFAFAD2),
    ],
)
def test_lookup_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1
    assert parse_color("None") == -1


def test_lookup_is_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("DarkRed") == lookup_color("darkred")


def test_first_duplicate_wins():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_gray_and_grey_agree():
    for level in range(101):
        assert lookup_color(f"gray{level}") == lookup_color(f"grey{level}")


def test_lookup_unknown_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_parse_hex():
    assert parse_color("#FF0000") == 0xFF0000
    assert parse_color("#00ff00", "ignored") == 0x00FF00


def test_parse_hex_stops_at_invalid_digit():
    assert parse_color("#12zz") == 0x12


def test_parse_hex_empty_is_zero():
    assert parse_color("#") == 0


def test_parse_joins_two_words():
    assert parse_color("dark", "red") == lookup_color("dark red")
    assert parse_color("ghost", "white") == lookup_color("ghostwhite")


def test_parse_single_word():
    assert parse_color("navy") == lookup_color("navy")


def test_parse_unknown_gives_zero():
    assert parse_color("nosuchcolour") == 0
    assert parse_color("snow", "nosuch") == 0