import random

import pytest

from twoeleven.board import (
    START_VALUE,
    TILE_SIZE,
    TILE_SPACER,
    Board,
    BoardShift,
    Game,
    Position,
    RunState,
    Tile,
)


def make_game(tiles):
    game = Game(rng=random.Random(7))
    game.tiles = list(tiles)
    return game


def fill_checkerboard(game):
    game.tiles = [
        Tile(pos, 2 if (pos.x + pos.y) % 2 == 0 else 4) for pos in game.board.cells()
    ]


@pytest.mark.parametrize(
    "key,expected",
    [
        ("left", BoardShift.LEFT),
        ("Right", BoardShift.RIGHT),
        ("UP", BoardShift.UP),
        ("down", BoardShift.DOWN),
    ],
)
def test_from_key(key, expected):
    assert BoardShift.from_key(key) is expected


def test_from_key_invalid():
    with pytest.raises(ValueError, match="not a valid board shift key"):
        BoardShift.from_key("space")


def test_sort_key_left_is_row_major():
    cells = list(Board(3).cells())
    ordered = sorted(cells, key=BoardShift.LEFT.sort_key)
    assert ordered == sorted(cells, key=lambda p: (p.y, p.x))
    assert sorted(cells, key=BoardShift.RIGHT.sort_key) == list(reversed(ordered))


def test_sort_key_up_and_down_are_reverses():
    cells = list(Board(4).cells())
    down = sorted(cells, key=BoardShift.DOWN.sort_key)
    assert down == cells
    assert sorted(cells, key=BoardShift.UP.sort_key) == list(reversed(down))


def test_column_position_and_row():
    pos = Position(1, 2)
    assert BoardShift.LEFT.column_position(4, pos, 0) == Position(0, 2)
    assert BoardShift.RIGHT.column_position(4, pos, 0) == Position(3, 2)
    assert BoardShift.UP.column_position(4, pos, 1) == Position(1, 2)
    assert BoardShift.DOWN.column_position(4, pos, 1) == Position(1, 1)
    assert BoardShift.LEFT.row_position(pos) == pos.y
    assert BoardShift.RIGHT.row_position(pos) == pos.y
    assert BoardShift.UP.row_position(pos) == pos.x
    assert BoardShift.DOWN.row_position(pos) == pos.x


def test_board_geometry_symmetric_and_evenly_spaced():
    board = Board(4)
    coords = [board.cell_position_to_physical(i) for i in range(board.size)]
    assert coords[0] == pytest.approx(-coords[-1])
    steps = {round(b - a, 6) for a, b in zip(coords, coords[1:])}
    assert steps == {TILE_SIZE + TILE_SPACER}
    assert coords[-1] + TILE_SIZE / 2 + TILE_SPACER == pytest.approx(board.physical_size / 2)


def test_board_cells_cover_grid_once():
    board = Board(4)
    cells = list(board.cells())
    assert len(cells) == board.size**2
    assert len(set(cells)) == len(cells)
    assert cells[0] == Position(0, 0)
    assert cells[1] == Position(0, 1)


def test_new_game_has_two_start_tiles():
    game = Game(rng=random.Random(1))
    assert len(game.tiles) == 2
    assert {t.value for t in game.tiles} == {START_VALUE}
    assert game.tiles[0].position != game.tiles[1].position
    assert game.state is RunState.PLAYING
    assert game.score == 0


def test_shift_left_merges_pair():
    a = Tile(Position(1, 0), 2)
    b = Tile(Position(3, 0), 2)
    game = make_game([a, b])
    gained = game.shift(BoardShift.LEFT)
    assert a.position == Position(0, 0)
    assert a.value == 2 * 2
    assert b not in game.tiles
    assert gained == a.value
    assert game.score == a.value
    assert game.score_best == game.score
    assert len(game.tiles) == 2


def test_shift_left_three_equal_merges_first_pair_only():
    a = Tile(Position(0, 0), 2)
    b = Tile(Position(1, 0), 2)
    c = Tile(Position(2, 0), 2)
    game = make_game([c, a, b])
    game.shift(BoardShift.LEFT)
    assert a.position == Position(0, 0)
    assert a.value == 2 * 2
    assert b not in game.tiles
    assert c.position == Position(1, 0)
    assert c.value == 2


def test_shift_right_three_equal():
    a = Tile(Position(0, 1), 2)
    b = Tile(Position(1, 1), 2)
    c = Tile(Position(2, 1), 2)
    game = make_game([a, b, c])
    game.shift(BoardShift.RIGHT)
    assert c.position == Position(3, 1)
    assert c.value == 2 * 2
    assert b not in game.tiles
    assert a.position == Position(2, 1)


def test_shift_different_values_do_not_merge():
    a = Tile(Position(2, 0), 2)
    b = Tile(Position(3, 0), 4)
    game = make_game([a, b])
    gained = game.shift(BoardShift.LEFT)
    assert gained == 0
    assert (a.position, a.value) == (Position(0, 0), 2)
    assert (b.position, b.value) == (Position(1, 0), 4)
    assert len(game.tiles) == 3


def test_shift_up_and_down():
    up = Tile(Position(0, 0), 2)
    game = make_game([up])
    game.shift(BoardShift.UP)
    assert up.position == Position(0, game.board.size - 1)

    down = Tile(Position(2, 3), 2)
    game = make_game([down])
    game.shift(BoardShift.DOWN)
    assert down.position == Position(2, 0)


def test_shift_rows_are_independent():
    a = Tile(Position(3, 0), 2)
    b = Tile(Position(2, 1), 2)
    game = make_game([a, b])
    game.shift(BoardShift.LEFT)
    assert a.position == Position(0, 0)
    assert b.position == Position(0, 1)
    assert a.value == b.value == 2


def test_shift_merge_then_next_row_starts_at_edge():
    a = Tile(Position(1, 0), 2)
    b = Tile(Position(2, 0), 2)
    c = Tile(Position(3, 1), 8)
    game = make_game([a, b, c])
    game.shift(BoardShift.LEFT)
    assert a.position == Position(0, 0)
    assert c.position == Position(0, 1)


def test_best_score_survives_reset():
    a = Tile(Position(0, 0), 4)
    b = Tile(Position(0, 1), 4)
    game = make_game([a, b])
    game.shift(BoardShift.DOWN)
    best = game.score_best
    assert best == a.value
    game.reset()
    assert game.score == 0
    assert game.score_best == best


def test_spawn_tile_fills_only_empty_cells():
    game = make_game([])
    for _ in range(game.board.size**2):
        assert game.spawn_tile() is not None
    assert len({t.position for t in game.tiles}) == game.board.size**2
    assert game.spawn_tile() is None


def test_checkerboard_has_no_move_and_ends_game():
    game = make_game([])
    fill_checkerboard(game)
    assert game.has_move() is False
    assert game.check_game_over() is RunState.GAME_OVER


def test_full_board_with_pair_keeps_playing():
    game = make_game([])
    fill_checkerboard(game)
    game.tiles[0].value = game.tiles[1].value
    assert game.has_move() is True
    assert game.check_game_over() is RunState.PLAYING


def test_partial_board_never_ends():
    game = make_game([Tile(Position(0, 0), 2), Tile(Position(1, 0), 4)])
    assert game.has_move() is False
    assert game.check_game_over() is RunState.PLAYING


def test_shift_ignored_after_game_over():
    tile = Tile(Position(3, 3), 2)
    game = make_game([tile])
    game.state = RunState.GAME_OVER
    assert game.shift(BoardShift.LEFT) == 0
    assert tile.position == Position(3, 3)
    assert game.tiles == [tile]


def test_toggle_state():
    game = Game(rng=random.Random(3))
    game.score = 10
    assert game.toggle_state() is RunState.GAME_OVER
    assert game.toggle_state() is RunState.PLAYING
    assert game.score == 0
    assert len(game.tiles) == 2