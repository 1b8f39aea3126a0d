import pygame
import pytest

from battleship.scene_manager import Scene, SceneManager, scene_manager


class _Recorder(Scene):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def on_enter(self):
        self.log.append((self.name, "enter"))

    def on_exit(self):
        self.log.append((self.name, "exit"))

    def on_update(self, delta):
        self.log.append((self.name, "update", delta))

    def on_render(self, surface):
        self.log.append((self.name, "render", surface))

    def on_input(self, event):
        self.log.append((self.name, "input", event))


def test_scene_is_abstract():
    with pytest.raises(TypeError):
        Scene()


def test_set_and_switch_order():
    log = []
    manager = SceneManager()
    menu, setup = _Recorder("menu", log), _Recorder("setup", log)
    manager.set_current_scene(menu)
    manager.switch_to(setup)
    assert log == [("menu", "enter"), ("menu", "exit"), ("setup", "enter")]
    assert manager.current_scene is setup


def test_forwards_to_current_scene():
    log = []
    manager = SceneManager()
    manager.set_current_scene(_Recorder("menu", log))
    surface = pygame.Surface((1, 1))
    event = pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 2))
    manager.on_update(0.5)
    manager.on_render(surface)
    manager.on_input(event)
    assert log[1:] == [("menu", "update", 0.5), ("menu", "render", surface), ("menu", "input", event)]


def test_no_current_scene_raises():
    manager = SceneManager()
    with pytest.raises(RuntimeError):
        manager.on_update(0.1)
    with pytest.raises(RuntimeError):
        manager.switch_to(_Recorder("menu", []))


def test_default_scene_attributes():
    manager = SceneManager()
    manager.set_current_scene(_Recorder("menu", []))
    current = manager.current_scene
    assert current.background_color == (100, 100, 100, 255)
    assert (current.window_width, current.window_height) == (10, 10)


def test_shared_instance_keeps_current_scene():
    log = []
    scene = _Recorder("shared", log)
    scene_manager().set_current_scene(scene)
    assert scene_manager().current_scene is scene
    assert log == [("shared", "enter")]