"""Lazily created scenes, one per scene type."""

from typing import Callable, Dict, Mapping, Optional

from battleship.scene_manager import Scene
from battleship.scenes import ClassicSetupScene, MenuScene, SceneType

SceneFactory = Callable[[], Scene]


class ScenePool:
    """Creates each scene on first request and hands out the same one afterwards."""

    def __init__(self, factories: Optional[Mapping[SceneType, SceneFactory]] = None) -> None:
        if factories is None:
            factories = {SceneType.MENU: MenuScene, SceneType.CLASSIC_SETUP: ClassicSetupScene}
        self._factories: Dict[SceneType, SceneFactory] = dict(factories)
        self._scenes: Dict[SceneType, Scene] = {}

    def get_scene(self, scene_type: SceneType) -> Optional[Scene]:
        """The scene for ``scene_type``, or None if that kind of scene is not available."""
        scene = self._scenes.get(scene_type)
        if scene is None:
            factory = self._factories.get(scene_type)
            if factory is None:
                return None
            scene = self._scenes[scene_type] = factory()
        return scene

    def delete_scene(self, scene_type: SceneType) -> None:
        """Drop the scene so that the next request creates a new one."""
        self._scenes.pop(scene_type, None)