import pytest

from tilequest.gamemap import GameMap, MapError, check_extension, load_map

VALID = ["11111", "1PCE1", "11111"]


def write(tmp_path, content, name="level.ber"):
    path = tmp_path / name
    path.write_bytes(content.encode("latin-1"))
    return path


def test_load_map_reads_rows(tmp_path):
    path = write(tmp_path, "\n".join(VALID) + "\n")
    game_map = load_map(path)
    assert list(game_map) == VALID
    assert game_map.width == len(VALID[0])
    assert game_map.height == len(VALID)


def test_load_map_without_trailing_newline(tmp_path):
    path = write(tmp_path, "\n".join(VALID))
    assert list(load_map(path)) == VALID


def test_load_map_missing_file(tmp_path):
    with pytest.raises(MapError, match="Could not open map file."):
        load_map(tmp_path / "missing.ber")


def test_load_map_empty_file(tmp_path):
    path = write(tmp_path, "")
    with pytest.raises(MapError, match="Map is empty or invalid dimensions."):
        load_map(path)


def test_load_map_empty_line(tmp_path):
    path = write(tmp_path, "11111\n\n11111\n")
    with pytest.raises(MapError, match="Map contains empty lines."):
        load_map(path)


def test_not_rectangular():
    with pytest.raises(MapError, match="Map is not rectangular."):
        GameMap(["11111", "1PC1", "11111"])


def test_validate_sets_counts_and_player():
    game_map = GameMap(VALID)
    game_map.validate()
    assert game_map.player_count == 1
    assert game_map.exit_count == 1
    assert game_map.collectible_count == 1
    assert (game_map.player_x, game_map.player_y) == (1, 1)


def test_getitem_and_setitem():
    game_map = GameMap(VALID)
    assert game_map[1, 1] == "P"
    game_map[1, 1] = "0"
    assert game_map[1, 1] == "0"
    assert str(game_map).splitlines()[1] == "10CE1"


def test_walls_top_bottom():
    game_map = GameMap(["11011", "1PCE1", "11111"])
    with pytest.raises(MapError, match=r"\(top/bottom\)"):
        game_map.check_walls()


def test_walls_left_right():
    game_map = GameMap(["11111", "0PCE1", "11111"])
    with pytest.raises(MapError, match=r"\(left/right\)"):
        game_map.check_walls()


def test_invalid_character():
    game_map = GameMap(["11111", "1PXE1", "11111"])
    with pytest.raises(MapError, match="invalid characters"):
        game_map.check_elements()


@pytest.mark.parametrize(
    "rows, message",
    [
        (["111111", "1PPCE1", "111111"], "exactly one player"),
        (["11111", "10CE1", "11111"], "exactly one player"),
        (["111111", "1PCEE1", "111111"], "exactly one exit"),
        (["11111", "1PC01", "11111"], "exactly one exit"),
        (["11111", "1P0E1", "11111"], "at least one collectible"),
    ],
)
def test_element_counts(rows, message):
    with pytest.raises(MapError, match=message):
        GameMap(rows).check_elements()


def test_validate_checks_walls_first():
    game_map = GameMap(["11111", "0P0E1", "11111"])
    with pytest.raises(MapError, match="surrounded by walls"):
        game_map.validate()


@pytest.mark.parametrize("path", ["map.ber", "maps/level1.ber", ".ber"])
def test_check_extension_accepts(path):
    assert check_extension(path) == path


@pytest.mark.parametrize("path", ["map.txt", "ber", "map.ber.bak", "mapber"])
def test_check_extension_rejects(path):
    with pytest.raises(MapError, match="Map file must have .ber extension."):
        check_extension(path)