"""Window, animation and interface of the game, drawn with pygame."""

from __future__ import annotations

import argparse
import random
from dataclasses import dataclass, field
from typing import Sequence

import pygame

from twoeleven import colors
from twoeleven.board import TILE_SIZE, BoardShift, Game, RunState

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
MOVE_DURATION_MS = 100.0
UI_PADDING = 50
BUTTON_WIDTH = 130
BUTTON_HEIGHT = 50
SCORE_GAP = 20
SCORE_PADDING_X = 20
SCORE_PADDING_Y = 10
TITLE_FONT_SIZE = 40
TILE_FONT_SIZE = 40
SCORE_LABEL_FONT_SIZE = 15
SCORE_VALUE_FONT_SIZE = 20
BUTTON_FONT_SIZE = 20

_KEY_NAMES = {
    pygame.K_LEFT: "left",
    pygame.K_RIGHT: "right",
    pygame.K_UP: "up",
    pygame.K_DOWN: "down",
}


def ease_quadratic_in_out(t: float) -> float:
    """Quadratic ease-in-out over 0..1; inputs outside that range are clamped."""
    t = min(max(t, 0.0), 1.0)
    if t < 0.5:
        return 2.0 * t * t
    return 1.0 - (-2.0 * t + 2.0) ** 2 / 2.0


@dataclass
class TileSprite:
    """On-screen position of a tile, easing towards where the tile now sits."""

    x: float
    y: float
    duration_ms: float = MOVE_DURATION_MS
    _start: tuple[float, float] = field(init=False, repr=False)
    _target: tuple[float, float] = field(init=False, repr=False)
    _elapsed: float = field(init=False, repr=False, default=0.0)

    def __post_init__(self) -> None:
        self._start = (self.x, self.y)
        self._target = (self.x, self.y)
        self._elapsed = self.duration_ms

    @property
    def target(self) -> tuple[float, float]:
        return self._target

    @property
    def moving(self) -> bool:
        return self._elapsed < self.duration_ms

    def move_to(self, x: float, y: float) -> None:
        """Start easing from the current position to (x, y)."""
        self._start = (self.x, self.y)
        self._target = (x, y)
        self._elapsed = 0.0

    def update(self, elapsed_ms: float) -> tuple[float, float]:
        """Advance the animation by elapsed_ms and return the new position."""
        self._elapsed = min(self._elapsed + elapsed_ms, self.duration_ms)
        progress = 1.0 if self.duration_ms <= 0 else self._elapsed / self.duration_ms
        factor = ease_quadratic_in_out(progress)
        sx, sy = self._start
        tx, ty = self._target
        self.x = sx + (tx - sx) * factor
        self.y = sy + (ty - sy) * factor
        return (self.x, self.y)


@dataclass(frozen=True)
class Button:
    """A rectangular button in screen coordinates."""

    left: int
    top: int
    width: int
    height: int

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.left, self.top, self.width, self.height)

    def contains(self, pos: Sequence[float]) -> bool:
        x, y = pos
        return self.left <= x < self.left + self.width and self.top <= y < self.top + self.height

    def interaction_color(
        self, mouse_pos: Sequence[float] | None, pressed: bool
    ) -> tuple[int, int, int, int]:
        """Background colour for the given mouse state."""
        if mouse_pos is None or not self.contains(mouse_pos):
            return colors.BUTTON_NORMAL
        return colors.BUTTON_PRESSED if pressed else colors.BUTTON_HOVERED


class GameApp:
    """Ties a Game to the window: input, animation and drawing."""

    def __init__(
        self,
        game: Game | None = None,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
    ) -> None:
        self.game = game if game is not None else Game()
        self.width = width
        self.height = height
        self.button = Button(
            width - UI_PADDING - BUTTON_WIDTH, UI_PADDING, BUTTON_WIDTH, BUTTON_HEIGHT
        )
        self.sprites: dict[int, TileSprite] = {}
        self.mouse_pos: tuple[int, int] | None = None
        self.mouse_pressed = False
        self._fonts: dict[int, pygame.font.Font] = {}
        self.sync_sprites()

    def handle_key(self, key: str) -> BoardShift | None:
        """Shift the board for an arrow key; other keys are ignored."""
        try:
            direction = BoardShift.from_key(key)
        except ValueError:
            return None
        if self.game.state is not RunState.PLAYING:
            return None
        self.game.shift(direction)
        return direction

    def handle_click(self, pos: Sequence[float]) -> bool:
        """Toggle the run state when the click lands on the button."""
        if not self.button.contains(pos):
            return False
        self.game.toggle_state()
        self.sync_sprites()
        return True

    def button_label(self) -> str:
        if self.game.state is RunState.PLAYING:
            return "End Game"
        return "New Game"

    def score_texts(self) -> tuple[str, str]:
        return (str(self.game.score), str(self.game.score_best))

    def _physical(self, x: int, y: int) -> tuple[float, float]:
        board = self.game.board
        return (board.cell_position_to_physical(x), board.cell_position_to_physical(y))

    def sync_sprites(self) -> None:
        """Create, drop and retarget sprites so they follow the game's tiles."""
        live = {tile.id: tile for tile in self.game.tiles}
        for tile_id in list(self.sprites):
            if tile_id not in live:
                del self.sprites[tile_id]
        for tile_id, tile in live.items():
            target = self._physical(tile.position.x, tile.position.y)
            sprite = self.sprites.get(tile_id)
            if sprite is None:
                self.sprites[tile_id] = TileSprite(*target)
            elif sprite.target != target:
                sprite.move_to(*target)

    def update(self, elapsed_ms: float) -> None:
        self.sync_sprites()
        for sprite in self.sprites.values():
            sprite.update(elapsed_ms)

    def _to_screen(self, x: float, y: float) -> tuple[float, float]:
        return (self.width / 2.0 + x, self.height / 2.0 - y)

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _blit_centered(
        self, surface: pygame.Surface, text: str, size: int, color, center: tuple[float, float]
    ) -> pygame.Rect:
        rendered = self._font(size).render(text, True, color[:3])
        rect = rendered.get_rect(center=(int(center[0]), int(center[1])))
        surface.blit(rendered, rect)
        return rect

    def _draw_board(self, surface: pygame.Surface) -> None:
        board = self.game.board
        side = board.physical_size
        cx, cy = self._to_screen(0.0, 0.0)
        board_rect = pygame.Rect(0, 0, int(side), int(side))
        board_rect.center = (int(cx), int(cy))
        surface.fill(colors.BOARD, board_rect)
        for cell in board.cells():
            px, py = self._to_screen(*self._physical(cell.x, cell.y))
            rect = pygame.Rect(0, 0, int(TILE_SIZE), int(TILE_SIZE))
            rect.center = (int(px), int(py))
            surface.fill(colors.TILE_PLACEHOLDER, rect)

    def _draw_tiles(self, surface: pygame.Surface) -> None:
        for tile in self.game.tiles:
            sprite = self.sprites.get(tile.id)
            if sprite is None:
                continue
            px, py = self._to_screen(sprite.x, sprite.y)
            rect = pygame.Rect(0, 0, int(TILE_SIZE), int(TILE_SIZE))
            rect.center = (int(px), int(py))
            surface.fill(colors.TILE, rect)
            self._blit_centered(surface, str(tile.value), TILE_FONT_SIZE, colors.BLACK, rect.center)

    def _draw_score_boxes(self, surface: pygame.Surface) -> None:
        boxes = []
        for label, value in zip(("Score", "Best"), self.score_texts()):
            label_surface = self._font(SCORE_LABEL_FONT_SIZE).render(label, True, colors.WHITE[:3])
            value_surface = self._font(SCORE_VALUE_FONT_SIZE).render(value, True, colors.WHITE[:3])
            box_width = max(label_surface.get_width(), value_surface.get_width()) + 2 * SCORE_PADDING_X
            box_height = label_surface.get_height() + value_surface.get_height() + 2 * SCORE_PADDING_Y
            boxes.append((label_surface, value_surface, box_width, box_height))
        total = sum(box[2] for box in boxes) + SCORE_GAP * (len(boxes) - 1)
        left = (self.width - total) // 2
        for label_surface, value_surface, box_width, box_height in boxes:
            rect = pygame.Rect(left, UI_PADDING, box_width, box_height)
            surface.fill(colors.SCORE_BOX, rect)
            label_rect = label_surface.get_rect(midtop=(rect.centerx, rect.top + SCORE_PADDING_Y))
            surface.blit(label_surface, label_rect)
            value_rect = value_surface.get_rect(midtop=(rect.centerx, label_rect.bottom))
            surface.blit(value_surface, value_rect)
            left += box_width + SCORE_GAP

    def draw(self, surface: pygame.Surface) -> None:
        """Render the whole frame onto surface."""
        surface.fill(colors.BACKGROUND)
        self._draw_board(surface)
        self._draw_tiles(surface)

        title = self._font(TITLE_FONT_SIZE).render("2048", True, colors.WHITE[:3])
        surface.blit(title, (UI_PADDING, UI_PADDING))
        self._draw_score_boxes(surface)

        rect = self.button.rect
        surface.fill(self.button.interaction_color(self.mouse_pos, self.mouse_pressed), rect)
        self._blit_centered(surface, self.button_label(), BUTTON_FONT_SIZE, colors.BUTTON_TEXT, rect.center)

    def run(self) -> None:
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            screen = pygame.display.set_mode((self.width, self.height))
            pygame.display.set_caption("2048")
            clock = pygame.time.Clock()
            running = True
            while running:
                elapsed = clock.tick(60)
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        name = _KEY_NAMES.get(event.key)
                        if name is not None:
                            self.handle_key(name)
                    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                        self.handle_click(event.pos)
                self.mouse_pos = pygame.mouse.get_pos()
                self.mouse_pressed = bool(pygame.mouse.get_pressed()[0])
                self.update(elapsed)
                self.draw(screen)
                pygame.display.flip()
        finally:
            self._fonts.clear()
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="twoeleven", description="Play 2048.")
    parser.add_argument("--seed", type=int, default=None, help="seed for tile placement")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    GameApp(Game(rng=rng)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())