"""The game board: a grid of tiles the player fires missiles at."""

from typing import Callable, List, Optional, Sequence, Tuple

import pygame

from battleship.atlas_manager import AtlasID, AtlasManager, atlas_manager
from battleship.bullet import Bullet
from battleship.effect_manager import EffectID, EffectManager, effect_manager
from battleship.resources import ResID, ResourcesManager, resources_manager
from battleship.tile import TILE_SIZE, Tile, TileStatus

BOARD_COLOR = (30, 63, 102)
GRID_COLOR = (10, 55, 50, 120)
MISSILE_SPEED = 400.0
MISSILE_ORIGIN = (0, 0)
CURSOR_SIZE = 30


def _set_cursor_visible(visible: bool) -> None:
    try:
        pygame.mouse.set_visible(visible)
    except pygame.error:
        pass


class Board:
    """A grid of tiles; clicking an unexplored tile fires a missile at it.

    ``tiles`` is indexed as ``tiles[column][row]``.
    """

    def __init__(
        self,
        rows: int = 10,
        cols: int = 10,
        *,
        resources: Optional[ResourcesManager] = None,
        atlases: Optional[AtlasManager] = None,
        effects: Optional[EffectManager] = None,
    ) -> None:
        if resources is None:
            resources = resources_manager()
        self.atlases = atlases if atlases is not None else atlas_manager()
        self.effects = effects if effects is not None else effect_manager()

        self.set_target_texture = resources.get_texture(ResID.TEX_SET_TARGET)
        self.tile_textures = {
            TileStatus.HIT: resources.get_texture(ResID.TEX_TILE_HIT),
            TileStatus.MISS: resources.get_texture(ResID.TEX_TILE_MISS),
            TileStatus.SOMETHING: resources.get_texture(ResID.TEX_TILE_UNKNOWN),
        }

        self.rows = rows
        self.cols = cols
        self.tiles: List[List[Tile]] = []
        self.set_size(rows, cols)

        self.x = 0
        self.y = 0
        self.on_animation = False
        self.move_in_board = False
        self.click_in_board = False
        self.mouse_pos: Tuple[int, int] = (0, 0)
        self.target: Tuple[int, int] = (0, 0)
        self.target_center: Tuple[int, int] = (0, 0)
        self.missile: Optional[Bullet] = None

        self.rect_select_target = pygame.Rect(0, 0, 0, 0)
        self.rect_water_splash = pygame.Rect(0, 0, 0, 0)
        self.rect_explosion = pygame.Rect(0, 0, 0, 0)

        self.effects.set_on_finished(EffectID.SELECT_TARGET, self._launch_missile)
        self.effects.set_on_finished(
            EffectID.WATER_SPLASH_SINGLE, self._settle(TileStatus.MISS)
        )
        self.effects.set_on_finished(EffectID.EXPLOSION, self._settle(TileStatus.HIT))

    @property
    def target_tile(self) -> Tile:
        column, row = self.target
        return self.tiles[column][row]

    def _launch_missile(self) -> None:
        self.missile = Bullet(self.atlases.get_atlas(AtlasID.MISSILE))
        self.missile.fire(MISSILE_ORIGIN, self.target_center, MISSILE_SPEED)

    def _settle(self, status: TileStatus) -> Callable[[], None]:
        def settle() -> None:
            self.on_animation = False
            self.target_tile.status = status

        return settle

    def set_size(self, rows: int, cols: int) -> None:
        """Replace the grid with a fresh one of ``rows`` by ``cols`` tiles."""
        self.rows = rows
        self.cols = cols
        self.tiles = [[Tile() for _ in range(rows)] for _ in range(cols)]

    def set_board_pos(self, point: Sequence[int]) -> None:
        self.x, self.y = int(point[0]), int(point[1])

    def is_inside(self, x: int, y: int) -> bool:
        return (
            self.x <= x < self.x + TILE_SIZE * self.cols
            and self.y <= y < self.y + TILE_SIZE * self.rows
        )

    def on_update(self, delta: float) -> None:
        self.effects.on_update(delta)
        if self.missile is None:
            return
        self.missile.on_update(delta)
        if self.missile.valid:
            return
        self.missile = None
        if self.target_tile.has_ship:
            self.effects.show_effect(EffectID.EXPLOSION, self.rect_explosion, 0.0)
        else:
            self.effects.show_effect(EffectID.WATER_SPLASH_SINGLE, self.rect_water_splash, 0.0)

    def on_input(self, event: pygame.event.Event) -> None:
        pos = getattr(event, "pos", None)
        if pos is None:
            return
        x, y = int(pos[0]), int(pos[1])
        self._on_mouse_move(x, y)
        if self.on_animation:
            return
        self._on_mouse_click(event, x, y)

    def _on_mouse_move(self, x: int, y: int) -> None:
        self.move_in_board = self.is_inside(x, y)
        if self.move_in_board:
            self.mouse_pos = (x, y)

    def _on_mouse_click(self, event: pygame.event.Event, x: int, y: int) -> None:
        if not self.is_inside(x, y):
            self.click_in_board = False
            _set_cursor_visible(True)
            return
        _set_cursor_visible(False)
        self.click_in_board = True
        if event.type != pygame.MOUSEBUTTONUP or event.button != pygame.BUTTON_LEFT:
            return

        column = (x - self.x) // TILE_SIZE
        row = (y - self.y) // TILE_SIZE
        self.target = (column, row)
        left = self.x + column * TILE_SIZE
        top = self.y + row * TILE_SIZE
        self.target_center = (left + TILE_SIZE // 2, top + TILE_SIZE // 2)

        if self.target_tile.status not in (TileStatus.UNKNOWN, TileStatus.SOMETHING):
            return
        self.rect_select_target = pygame.Rect(left - 20, top - 20, TILE_SIZE + 40, TILE_SIZE + 40)
        self.rect_water_splash = pygame.Rect(left - 20, top, TILE_SIZE + 40, TILE_SIZE)
        self.rect_explosion = pygame.Rect(left - 20, top - 40, TILE_SIZE + 40, TILE_SIZE + 40)
        self.effects.show_effect(EffectID.SELECT_TARGET, self.rect_select_target, 0.0)
        self.on_animation = True

    def _draw_grid(self, surface: pygame.Surface) -> None:
        width = self.cols * TILE_SIZE
        height = self.rows * TILE_SIZE
        pygame.draw.rect(surface, BOARD_COLOR, (self.x, self.y, width, height))
        for column in range(self.cols + 1):
            x = self.x + column * TILE_SIZE
            pygame.draw.line(surface, GRID_COLOR, (x, self.y), (x, self.y + height))
        for row in range(self.rows + 1):
            y = self.y + row * TILE_SIZE
            pygame.draw.line(surface, GRID_COLOR, (self.x, y), (self.x + width, y))

    def on_render(self, surface: pygame.Surface) -> None:
        self._draw_grid(surface)
        for column, tiles in enumerate(self.tiles):
            for row, tile in enumerate(tiles):
                texture = self.tile_textures.get(tile.status)
                if texture is None:
                    continue
                image = pygame.transform.scale(texture, (TILE_SIZE, TILE_SIZE))
                surface.blit(image, (self.x + column * TILE_SIZE, self.y + row * TILE_SIZE))

        self.effects.on_render(surface)
        if self.missile is not None:
            self.missile.on_render(surface)

        if self.move_in_board:
            cursor = pygame.transform.scale(self.set_target_texture, (CURSOR_SIZE, CURSOR_SIZE))
            mx, my = self.mouse_pos
            surface.blit(cursor, (mx - CURSOR_SIZE // 2, my - CURSOR_SIZE // 2))