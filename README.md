# twoeleven

A desktop version of the 2048 sliding-tile puzzle, drawn with pygame.

Tiles sit on a 4×4 board. Each arrow key slides every tile as far as it can
go in that direction. When two tiles with the same number meet, they merge
into one tile that holds their sum, and the sum is added to your score.
After every arrow-key press a new tile with the value 2 appears on a free
cell, if there is one. The game ends when all sixteen cells are full and no
two neighbouring tiles hold the same number.

## Installing

```
pip install .
```

This installs pygame as well.

## Playing

```
twoeleven
```

To make tile placement repeatable, pass a seed:

```
twoeleven --seed 42
```

- Arrow keys: slide the tiles left, right, up or down. While a game is
  over, arrow keys do nothing.
- The button in the top right corner reads "End Game" while you play and
  ends the current game. Once a game is over it reads "New Game" and starts
  a new one.
- The two score boxes show the score of the current game ("Score") and the
  best score reached since the window was opened ("Best").

Tiles slide to their new cells with a short (100 ms) eased animation.

## Using the game logic from code

The rules live in `twoeleven.board` and do not need a window:

```python
import random

from twoeleven.board import BoardShift, Game

game = Game(rng=random.Random(1))
gained = game.shift(BoardShift.LEFT)   # points gained by merges
print(game.score, game.score_best, game.has_move(), game.state)
```

- `Game(size=4, rng=None)` starts with two tiles on random cells.
- `Game.shift(direction)` moves and merges tiles, adds a new tile, updates
  the scores and checks for the end of the game. It returns the points
  gained, or 0 without changing anything when the game is already over.
- `Game.toggle_state()` ends a running game, or resets and starts a new one
  after game over.
- `BoardShift.from_key("left")` maps the names `left`, `right`, `up` and
  `down` to a direction and raises `ValueError` for anything else.

`twoeleven.colors` holds the palette as RGBA tuples, together with
`lcha_to_rgba` and `hex_to_rgba` for converting colour notations.

`twoeleven.app.GameApp` wraps a `Game` in a pygame window; its `run()`
method opens the window and plays until it is closed. Calling
`twoeleven.app.main()` starts it in the same way the `twoeleven` command does.

## What it does not do

- The best score is kept only while the window is open; nothing is saved
  to disk.
- Text is drawn with pygame's built-in default font; no font files are
  shipped.

## Running the tests

```
pip install ".[test]"
pytest
```