"""The concrete scenes of the game."""

import enum
from typing import Callable, Optional

import pygame

from battleship.board import Board
from battleship.button import Button
from battleship.resources import ResID, ResourcesManager, resources_manager
from battleship.scene_manager import Scene
from battleship.text_textures import TextTextureManager, text_texture_manager


class SceneType(enum.Enum):
    MENU = enum.auto()
    SETTING = enum.auto()
    CLASSIC_PVE = enum.auto()
    CLASSIC_PVP = enum.auto()
    CLASSIC_SETUP = enum.auto()
    NEW_TYPE_PVE = enum.auto()
    NEW_TYPE_PVP = enum.auto()
    NEW_TYPE_SETUP = enum.auto()


MENU_WINDOW_SIZE = (400, 600)
CLASSIC_WINDOW_SIZE = (1280, 720)
CLASSIC_BUTTON_RECT = (100, 50, 200, 70)
CLASSIC_BUTTON_TEXT = "Classic PVE"


def _resize_window(scene: Scene, width: int, height: int) -> None:
    scene.window_width = width
    scene.window_height = height
    if pygame.display.get_surface() is not None:
        pygame.display.set_mode((width, height))


class MenuScene(Scene):
    """The start screen with a button that opens the classic game."""

    def __init__(
        self,
        on_classic: Optional[Callable[[], None]] = None,
        *,
        message: Optional[pygame.Surface] = None,
        resources: Optional[ResourcesManager] = None,
        texts: Optional[TextTextureManager] = None,
    ) -> None:
        if message is None:
            if resources is None:
                resources = resources_manager()
            if texts is None:
                texts = text_texture_manager()
            message = texts.get_text_texture(resources.get_font(ResID.FONT_72), CLASSIC_BUTTON_TEXT)
        self.classic = Button(CLASSIC_BUTTON_RECT, CLASSIC_BUTTON_RECT, message, on_click=on_classic)
        self.active = False

    def on_enter(self) -> None:
        _resize_window(self, *MENU_WINDOW_SIZE)
        self.active = True

    def on_exit(self) -> None:
        self.active = False

    def on_update(self, delta: float) -> None:
        pass

    def on_render(self, surface: pygame.Surface) -> None:
        self.classic.on_render(surface)

    def on_input(self, event: pygame.event.Event) -> None:
        self.classic.process_event(event)


class ClassicSetupScene(Scene):
    """The classic ten-by-ten board."""

    def __init__(self, board: Optional[Board] = None) -> None:
        self.board = board if board is not None else Board()
        self.active = False

    def on_enter(self) -> None:
        _resize_window(self, *CLASSIC_WINDOW_SIZE)
        self.board.set_size(10, 10)
        self.active = True

    def on_exit(self) -> None:
        self.active = False

    def on_update(self, delta: float) -> None:
        self.board.on_update(delta)

    def on_render(self, surface: pygame.Surface) -> None:
        self.board.on_render(surface)

    def on_input(self, event: pygame.event.Event) -> None:
        self.board.on_input(event)


class SettingScene(Scene):
    """The settings screen; it has no content yet."""

    def __init__(self) -> None:
        self.active = False

    def on_enter(self) -> None:
        self.active = True

    def on_exit(self) -> None:
        self.active = False

    def on_update(self, delta: float) -> None:
        pass

    def on_render(self, surface: pygame.Surface) -> None:
        pass

    def on_input(self, event: pygame.event.Event) -> None:
        pass