"""The top-level game: window, main loop and scene switching."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Union

import pygame

from battleship.atlas_manager import AtlasManager, atlas_manager
from battleship.board import Board
from battleship.effect_manager import EffectManager, effect_manager
from battleship.resources import ResourceError, ResourcesManager, resources_manager
from battleship.scene_manager import Scene, SceneManager, scene_manager
from battleship.scene_pool import ScenePool
from battleship.scenes import ClassicSetupScene, MenuScene, SceneType
from battleship.text_textures import TextTextureManager, text_texture_manager

WINDOW_TITLE = "Battle Ship!"
WINDOW_SIZE = (1280, 720)
DEFAULT_FPS = 60


class GameManager:
    """Opens the window, loads every asset and runs the scenes."""

    def __init__(
        self,
        resource_dir: Union[str, Path] = "res",
        fps: int = DEFAULT_FPS,
        *,
        resources: Optional[ResourcesManager] = None,
        atlases: Optional[AtlasManager] = None,
        effects: Optional[EffectManager] = None,
        scenes: Optional[SceneManager] = None,
        texts: Optional[TextTextureManager] = None,
    ) -> None:
        self.fps = fps
        self.resources = resources if resources is not None else resources_manager()
        self.atlases = atlases if atlases is not None else atlas_manager()
        self.effects = effects if effects is not None else effect_manager()
        self.scenes = scenes if scenes is not None else scene_manager()
        self.texts = texts if texts is not None else text_texture_manager()
        self.quit_requested = False

        pygame.init()
        try:
            pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=2048)
        except pygame.error:
            pass
        pygame.display.set_caption(WINDOW_TITLE)
        pygame.display.set_mode(WINDOW_SIZE)

        self.resources.load(resource_dir)
        self.atlases.load_atlas(self.resources)
        self.effects.init_all_effects(self.atlases)

        self.pool = ScenePool(
            {SceneType.MENU: self._make_menu, SceneType.CLASSIC_SETUP: self._make_classic_setup}
        )

    def __enter__(self) -> "GameManager":
        return self

    def __exit__(self, *exc_info: object) -> None:
        pygame.quit()

    def _make_menu(self) -> Scene:
        return MenuScene(
            lambda: self.switch_scene(SceneType.CLASSIC_SETUP),
            resources=self.resources,
            texts=self.texts,
        )

    def _make_classic_setup(self) -> Scene:
        board = Board(resources=self.resources, atlases=self.atlases, effects=self.effects)
        return ClassicSetupScene(board)

    def _scene(self, scene_type: SceneType) -> Scene:
        scene = self.pool.get_scene(scene_type)
        if scene is None:
            raise ValueError(f"scene {scene_type.name} is not available")
        return scene

    def run(self) -> int:
        """Show the menu and run the main loop until the window is closed."""
        self.scenes.set_current_scene(self._scene(SceneType.MENU))
        clock = pygame.time.Clock()
        while not self.quit_requested:
            for event in pygame.event.get():
                self.on_input(event)
            delta = clock.tick(self.fps) / 1000.0
            self.on_update(delta)
            self.on_render()
        return 0

    def on_input(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.quit_requested = True
        self.scenes.on_input(event)

    def on_update(self, delta: float) -> None:
        self.scenes.on_update(delta)

    def on_render(self) -> None:
        surface = pygame.display.get_surface()
        scene = self.scenes.current_scene
        if surface is None or scene is None:
            return
        surface.fill(scene.background_color)
        self.scenes.on_render(surface)
        pygame.display.flip()

    def switch_scene(self, scene_type: SceneType) -> None:
        self.scenes.switch_to(self._scene(scene_type))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="battleship", description="Play Battle Ship.")
    parser.add_argument("--resources", default="res", help="directory holding the game assets")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS, help="frame rate cap")
    args = parser.parse_args(argv)
    try:
        game = GameManager(args.resources, args.fps)
    except (ResourceError, pygame.error) as exc:
        print(f"battleship: {exc}", file=sys.stderr)
        pygame.quit()
        return 1
    with game:
        return game.run()


if __name__ == "__main__":
    sys.exit(main())