import pytest

from solong.gamemap import (
    GameMap,
    MapError,
    check_args,
    flood_fill,
    has_valid_path,
    parse_map,
    read_map,
)

VALID = "1111111\n1P0C0E1\n1111111\n"


def grid_of(text):
    return [list(line) for line in text.split("\n") if line]


def test_check_args_accepts_ber_file():
    assert check_args(["so_long", "maps/level.ber"]) == "maps/level.ber"


@pytest.mark.parametrize("argv", [["so_long"], ["so_long", "a.ber", "b.ber"]])
def test_check_args_wrong_count(argv):
    with pytest.raises(MapError, match="invalid number of argument"):
        check_args(argv)


def test_check_args_without_dot():
    with pytest.raises(MapError, match="invalid argument"):
        check_args(["so_long", "mapfile"])


@pytest.mark.parametrize("path", ["map.txt", "map.bert", "map.be", "dir.ber/map"])
def test_check_args_wrong_suffix(path):
    with pytest.raises(MapError, match="must be of type"):
        check_args(["so_long", path])


def test_parse_map_skips_empty_lines():
    game_map = parse_map("111\n\n\n1P1\n111\n")
    assert game_map.grid == [list("111"), list("1P1"), list("111")]


def test_parse_map_empty_text():
    with pytest.raises(MapError):
        parse_map("\n\n")


def test_counts_and_player_position():
    game_map = parse_map(VALID)
    assert game_map.width == len("1111111")
    assert game_map.height == len(grid_of(VALID))
    assert game_map.collectibles == VALID.count("C")
    assert game_map.exits == VALID.count("E")
    assert game_map.players == 1
    assert game_map.player_position == (1, 1)


def test_player_position_missing():
    assert GameMap(grid_of("111\n101\n111")).player_position is None


def test_valid_map_validates():
    game_map = parse_map(VALID)
    assert game_map.validate() is game_map


@pytest.mark.parametrize(
    "text, message",
    [
        ("11111\n1PXCE1\n11111", "unknown element"),
        ("11111\n1PCE1\n111111", "rectangle"),
        ("11111\n1PCE0\n11111", "surrounded"),
        ("11011\n1PCE1\n11111", "surrounded"),
        ("11111\n1PCE1\n11101", "surrounded"),
        ("11111\n1P0E1\n11111", "no element"),
        ("11111\n1PC01\n11111", "no element"),
        ("111111\n1PCEP1\n111111", "no element"),
        ("1111111\n1P1C0E1\n1111111", "No valid path"),
        ("1111111\n1PC1E01\n1111111", "No valid path"),
    ],
)
def test_validate_errors(text, message):
    with pytest.raises(MapError, match=message):
        parse_map(text).validate()


def test_flood_fill_marks_reachable_cells():
    grid = grid_of("11111\n10C01\n11111\n10001\n11111")
    filled = flood_fill(grid, 1, 1)
    assert filled == sum(row.count("2") for row in grid)
    assert grid[1] == list("12221")
    assert grid[3] == list("10001")


def test_flood_fill_from_wall_fills_nothing():
    grid = grid_of("111\n101\n111")
    assert flood_fill(grid, 0, 0) == 0
    assert grid == grid_of("111\n101\n111")


def test_has_valid_path_does_not_change_grid():
    grid = grid_of(VALID)
    assert has_valid_path(grid, (1, 1)) is True
    assert grid == grid_of(VALID)


def test_exit_does_not_let_fill_pass_through():
    grid = grid_of("1111111\n1PE0C01\n1111111")
    assert has_valid_path(grid, (1, 1)) is False


def test_read_map_from_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID)
    assert read_map(path).grid == grid_of(VALID)


def test_read_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="cannot be read"):
        read_map(tmp_path / "absent.ber")