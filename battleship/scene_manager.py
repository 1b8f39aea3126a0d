"""Scenes and the manager that switches between them."""

import abc
import functools
from typing import Optional

import pygame


class Scene(abc.ABC):
    """One screen of the game."""

    window_width = 10
    window_height = 10
    background_color = (100, 100, 100, 255)

    @abc.abstractmethod
    def on_enter(self) -> None:
        """Called when the scene becomes current."""

    @abc.abstractmethod
    def on_exit(self) -> None:
        """Called when another scene replaces this one."""

    @abc.abstractmethod
    def on_update(self, delta: float) -> None:
        """Advance the scene by ``delta`` seconds."""

    @abc.abstractmethod
    def on_render(self, surface: pygame.Surface) -> None:
        """Draw the scene."""

    @abc.abstractmethod
    def on_input(self, event: pygame.event.Event) -> None:
        """Handle one input event."""


class SceneManager:
    """Forwards the game loop to the current scene."""

    def __init__(self) -> None:
        self.current_scene: Optional[Scene] = None

    def _current(self) -> Scene:
        if self.current_scene is None:
            raise RuntimeError("no current scene")
        return self.current_scene

    def set_current_scene(self, scene: Scene) -> None:
        """Make ``scene`` current without leaving the previous one."""
        self.current_scene = scene
        scene.on_enter()

    def switch_to(self, scene: Scene) -> None:
        """Leave the current scene and enter ``scene``."""
        self._current().on_exit()
        self.current_scene = scene
        scene.on_enter()

    def on_update(self, delta: float) -> None:
        self._current().on_update(delta)

    def on_render(self, surface: pygame.Surface) -> None:
        self._current().on_render(surface)

    def on_input(self, event: pygame.event.Event) -> None:
        self._current().on_input(event)


@functools.lru_cache(maxsize=None)
def scene_manager() -> SceneManager:
    """The shared application-wide scene manager."""
    return SceneManager()