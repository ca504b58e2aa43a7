import pytest

from tilequest.game import TILE_SIZE, Action, Game, MoveOutcome, key_action
from tilequest.gamemap import GameMap, MapError

ROWS = ["1111111", "1PC0E01", "1111111"]


def make_game(rows=ROWS):
    return Game(GameMap(rows))


@pytest.mark.parametrize(
    "keycode, action",
    [
        (53, Action.QUIT),
        (65307, Action.QUIT),
        (13, Action.UP),
        (119, Action.UP),
        (1, Action.DOWN),
        (115, Action.DOWN),
        (0, Action.LEFT),
        (97, Action.LEFT),
        (2, Action.RIGHT),
        (100, Action.RIGHT),
    ],
)
def test_key_action(keycode, action):
    assert key_action(keycode) is action


def test_unknown_key():
    assert key_action(12345) is None


def test_game_requires_valid_map():
    with pytest.raises(MapError):
        make_game(["11111", "1P0E1", "11111"])


def test_collect_item():
    game = make_game()
    assert game.try_move(2, 1) is MoveOutcome.COLLECTED
    assert game.map.collectible_count == 0
    assert game.map[2, 1] == "P"
    assert game.map[1, 1] == "0"
    assert game.player == (2, 1)
    assert game.move_count == 1


def test_wall_blocks():
    game = make_game()
    before = str(game.map)
    assert game.try_move(1, 0) is MoveOutcome.BLOCKED
    assert str(game.map) == before
    assert game.move_count == 0


def test_out_of_bounds_blocks():
    game = make_game()
    assert game.try_move(-1, 1) is MoveOutcome.BLOCKED
    assert game.try_move(1, len(ROWS)) is MoveOutcome.BLOCKED
    assert game.player == (1, 1)


def test_exit_locked_until_collected():
    game = make_game(["1111111", "1P0EC01", "1111111"])
    assert game.try_move(2, 1) is MoveOutcome.MOVED
    assert game.try_move(3, 1) is MoveOutcome.EXIT_LOCKED
    assert game.player == (2, 1)
    assert game.running is True


def test_win_by_keys():
    game = make_game()
    outcomes = [game.handle_key(100) for _ in range(3)]
    assert outcomes == [MoveOutcome.COLLECTED, MoveOutcome.MOVED, MoveOutcome.WON]
    assert game.running is False
    assert game.player == (3, 1)
    assert game.move_count == 2


def test_escape_stops_game():
    game = make_game()
    assert game.handle_key(65307) is None
    assert game.running is False


def test_ignored_key_changes_nothing():
    game = make_game()
    before = str(game.map)
    assert game.handle_key(12345) is None
    assert str(game.map) == before
    assert game.running is True


def test_vertical_keys_hit_walls():
    game = make_game()
    assert game.handle_key(119) is MoveOutcome.BLOCKED
    assert game.handle_key(115) is MoveOutcome.BLOCKED


def test_render_positions():
    game = make_game()
    tiles = game.render()
    assert len(tiles) == game.map.width * game.map.height
    assert tiles[0] == ("1", 0, 0)
    player = [tile for tile in tiles if tile.cell == "P"]
    assert player == [("P", TILE_SIZE, TILE_SIZE)]


def test_render_follows_moves():
    game = make_game()
    game.handle_key(100)
    player = [tile for tile in game.render() if tile.cell == "P"]
    assert player == [("P", 2 * TILE_SIZE, TILE_SIZE)]
    assert all(tile.cell != "C" for tile in game.render())