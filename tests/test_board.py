import pygame
import pytest

from battleship.atlas_manager import AtlasManager
from battleship.board import BOARD_COLOR, Board
from battleship.effect_manager import EffectManager
from battleship.resources import ResID, ResourcesManager
from battleship.tile import TILE_SIZE, TileStatus


def _surface(color, size=(TILE_SIZE, TILE_SIZE)):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


@pytest.fixture
def resources():
    manager = ResourcesManager()
    manager.textures.update(
        {
            ResID.TEX_SET_TARGET: _surface((9, 9, 9)),
            ResID.TEX_TILE_HIT: _surface((200, 0, 0)),
            ResID.TEX_TILE_MISS: _surface((1, 2, 3)),
            ResID.TEX_TILE_UNKNOWN: _surface((0, 200, 0)),
        }
    )
    return manager


@pytest.fixture
def effects():
    manager = EffectManager()
    manager.init_all_effects(AtlasManager())
    return manager


@pytest.fixture
def board(resources, effects):
    return Board(resources=resources, atlases=AtlasManager(), effects=effects)


def _click(board, pos, button=pygame.BUTTON_LEFT):
    board.on_input(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button))
    board.on_input(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=button))


def _center(column, row):
    return (column * TILE_SIZE + TILE_SIZE // 2, row * TILE_SIZE + TILE_SIZE // 2)


def test_set_size_builds_column_major_grid(board):
    board.set_size(3, 5)
    assert len(board.tiles) == 5
    assert all(len(column) == 3 for column in board.tiles)
    assert all(tile.status is TileStatus.UNKNOWN for column in board.tiles for tile in column)


def test_is_inside_respects_position_and_size(board):
    board.set_size(3, 5)
    board.set_board_pos((100, 50))
    assert board.is_inside(100, 50)
    assert board.is_inside(100 + TILE_SIZE * 5 - 1, 50 + TILE_SIZE * 3 - 1)
    assert not board.is_inside(99, 50)
    assert not board.is_inside(100 + TILE_SIZE * 5, 50)
    assert not board.is_inside(100, 50 + TILE_SIZE * 3)


def test_click_starts_target_effect(board, effects):
    _click(board, _center(2, 3))
    assert board.on_animation
    assert board.target == (2, 3)
    assert len(effects.playing) == 1
    assert effects.playing[0].rect.collidepoint(*_center(2, 3))


def test_right_click_does_nothing(board, effects):
    _click(board, _center(2, 3), button=pygame.BUTTON_RIGHT)
    assert not board.on_animation
    assert effects.playing == []


def test_click_outside_board_does_nothing(board, effects):
    _click(board, (TILE_SIZE * 10 + 5, 5))
    assert not board.on_animation
    assert not board.click_in_board
    assert effects.playing == []


def test_clicks_ignored_while_animating(board, effects):
    _click(board, _center(2, 3))
    _click(board, _center(5, 5))
    assert board.target == (2, 3)
    assert len(effects.playing) == 1


def test_miss_sequence_marks_tile_missed(board, effects):
    _click(board, _center(2, 3))
    board.on_update(0.2)
    assert board.missile is not None
    assert effects.playing == []
    board.on_update(1.0)
    assert board.missile is None
    assert len(effects.playing) == 1
    board.on_update(0.2)
    assert board.tiles[2][3].status is TileStatus.MISS
    assert not board.on_animation


def test_hit_sequence_marks_tile_hit(board):
    board.tiles[4][1].place_ship()
    _click(board, _center(4, 1))
    for delta in (0.2, 1.0, 0.2):
        board.on_update(delta)
    assert board.tiles[4][1].status is TileStatus.HIT
    assert not board.on_animation


def test_already_missed_tile_cannot_be_targeted(board, effects):
    board.tiles[1][1].status = TileStatus.MISS
    _click(board, _center(1, 1))
    assert not board.on_animation
    assert effects.playing == []


def test_render_draws_background_and_tile_textures(board):
    board.tiles[1][1].status = TileStatus.MISS
    surface = pygame.Surface((600, 600))
    board.on_render(surface)
    assert surface.get_at(_center(0, 0))[:3] == BOARD_COLOR
    assert surface.get_at(_center(1, 1))[:3] == (1, 2, 3)


def test_render_draws_target_cursor_when_hovering(board):
    surface = pygame.Surface((600, 600))
    board.on_input(pygame.event.Event(pygame.MOUSEMOTION, pos=(200, 200), rel=(0, 0), buttons=(0, 0, 0)))
    assert board.move_in_board
    board.on_render(surface)
    assert surface.get_at((200, 200))[:3] == (9, 9, 9)

    board.on_input(pygame.event.Event(pygame.MOUSEMOTION, pos=(590, 590), rel=(0, 0), buttons=(0, 0, 0)))
    assert not board.move_in_board


def test_events_without_position_are_ignored(board, effects):
    board.on_input(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    assert not board.move_in_board
    assert effects.playing == []