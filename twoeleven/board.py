"""Game state and rules: the board, its tiles, shifting and merging."""

from __future__ import annotations

import enum
import itertools
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Iterator

TILE_SIZE = 40.0
TILE_SPACER = 10.0
BOARD_SIZE = 4
START_VALUE = 2

_tile_ids = itertools.count(1)


@dataclass(frozen=True)
class Position:
    """A cell on the board; x grows to the right, y grows upwards."""

    x: int
    y: int


@dataclass(eq=False)
class Tile:
    """A numbered tile sitting on a cell."""

    position: Position
    value: int = START_VALUE
    id: int = field(default_factory=lambda: next(_tile_ids))


class RunState(enum.Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


class BoardShift(enum.Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @classmethod
    def from_key(cls, key: str) -> "BoardShift":
        """Map an arrow-key name to a shift direction."""
        try:
            return cls(str(key).lower())
        except ValueError:
            raise ValueError("not a valid board shift key") from None

    def sort_key(self, position: Position) -> tuple[int, int]:
        """Key ordering tiles row by row, leading edge first."""
        if self is BoardShift.LEFT:
            return (position.y, position.x)
        if self is BoardShift.RIGHT:
            return (-position.y, -position.x)
        if self is BoardShift.UP:
            return (-position.x, -position.y)
        return (position.x, position.y)

    def column_position(self, board_size: int, position: Position, index: int) -> Position:
        """The position a tile takes when it is the index-th tile from the leading edge."""
        if self is BoardShift.LEFT:
            return Position(index, position.y)
        if self is BoardShift.RIGHT:
            return Position(board_size - 1 - index, position.y)
        if self is BoardShift.UP:
            return Position(position.x, board_size - 1 - index)
        return Position(position.x, index)

    def row_position(self, position: Position) -> int:
        """The line a tile travels along for this direction."""
        if self in (BoardShift.LEFT, BoardShift.RIGHT):
            return position.y
        return position.x


@dataclass(frozen=True)
class Board:
    """Geometry of a square board."""

    size: int = BOARD_SIZE

    @property
    def physical_size(self) -> float:
        return self.size * TILE_SIZE + (self.size + 1) * TILE_SPACER

    def cell_position_to_physical(self, pos: int) -> float:
        offset = -self.physical_size / 2.0 + 0.5 * TILE_SIZE
        return offset + pos * TILE_SIZE + (pos + 1) * TILE_SPACER

    def cells(self) -> Iterator[Position]:
        for x, y in itertools.product(range(self.size), repeat=2):
            yield Position(x, y)


class Game:
    """A running game: board, tiles, score and run state."""

    def __init__(self, size: int = BOARD_SIZE, rng: random.Random | None = None) -> None:
        self.board = Board(size)
        self.rng = rng if rng is not None else random.Random()
        self.tiles: list[Tile] = []
        self.score = 0
        self.score_best = 0
        self.state = RunState.PLAYING
        self.reset()

    def reset(self) -> None:
        """Clear the board, zero the score and start playing with fresh tiles."""
        self.tiles = []
        self.score = 0
        self.state = RunState.PLAYING
        self.spawn_starting_tiles()

    def spawn_starting_tiles(self) -> list[Tile]:
        cells = list(self.board.cells())
        chosen = self.rng.sample(cells, min(2, len(cells)))
        new_tiles = [Tile(pos) for pos in chosen]
        self.tiles.extend(new_tiles)
        return new_tiles

    def spawn_tile(self) -> Tile | None:
        """Place a new tile on a random empty cell; None when the board is full."""
        occupied = {tile.position for tile in self.tiles}
        empty = [pos for pos in self.board.cells() if pos not in occupied]
        if not empty:
            return None
        tile = Tile(self.rng.choice(empty))
        self.tiles.append(tile)
        return tile

    def shift(self, direction: BoardShift) -> int:
        """Slide all tiles one way, merging equal neighbours; returns points gained."""
        if self.state is not RunState.PLAYING:
            return 0
        size = self.board.size
        queue = deque(sorted(self.tiles, key=lambda t: direction.sort_key(t.position)))
        removed: set[int] = set()
        gained = 0
        column = 0
        while queue:
            tile = queue.popleft()
            tile.position = direction.column_position(size, tile.position, column)
            if not queue:
                break
            row = direction.row_position(tile.position)
            upcoming = queue[0]
            if row != direction.row_position(upcoming.position):
                column = 0
            elif tile.value != upcoming.value:
                column += 1
            else:
                queue.popleft()
                tile.value += upcoming.value
                gained += tile.value
                removed.add(upcoming.id)
                if queue:
                    if row != direction.row_position(queue[0].position):
                        column = 0
                    else:
                        column += 1
        self.tiles = [tile for tile in self.tiles if tile.id not in removed]
        self.score += gained
        self.spawn_tile()
        self.score_best = max(self.score_best, self.score)
        self.check_game_over()
        return gained

    def has_move(self) -> bool:
        """Whether any two orthogonal neighbours carry the same value."""
        values = {tile.position: tile.value for tile in self.tiles}
        size = self.board.size
        for tile in self.tiles:
            for dx, dy in ((-1, 0), (0, 1), (1, 0), (0, -1)):
                x, y = tile.position.x - dx, tile.position.y - dy
                if 0 <= x < size and 0 <= y < size and values.get(Position(x, y)) == tile.value:
                    return True
        return False

    def check_game_over(self) -> RunState:
        """End the game when the board is full and nothing can merge."""
        if len(self.tiles) == self.board.size**2 and not self.has_move():
            self.state = RunState.GAME_OVER
        return self.state

    def toggle_state(self) -> RunState:
        """End a running game, or start a new one after game over."""
        if self.state is RunState.PLAYING:
            self.state = RunState.GAME_OVER
        else:
            self.reset()
        return self.state