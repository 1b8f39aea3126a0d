import pygame

from battleship.atlas import Atlas
from battleship.effect import Effect

RED = pygame.Color(255, 0, 0, 255)
BLACK = pygame.Color(0, 0, 0, 255)


def _solid(color, size=(2, 2)):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def test_clone_copies_configuration():
    atlas = Atlas(["a", "b"])
    callback = lambda: None  # noqa: E731
    prototype = Effect(atlas, interval=0.15, loop=True, on_finished=callback)
    copy = prototype.clone()
    assert copy is not prototype
    assert copy.atlas is atlas
    assert copy.interval == 0.15
    assert copy.on_finished is callback
    assert copy.loop is False


def test_play_at_resets_state():
    effect = Effect(Atlas(["a", "b", "c"]), interval=1.0, on_finished=lambda: None)
    for _ in range(3):
        effect.on_update(1.0)
    assert effect.finished is True
    effect.play_at((4, 5), 0)
    assert effect.finished is False
    assert effect.frame_index == 0
    assert effect.active is True
    assert effect.position == (4, 5)
    assert effect.rect is None


def test_play_in_stores_rect():
    effect = Effect(Atlas(["a"]))
    effect.play_in((1, 2, 3, 4), 0)
    assert effect.rect == pygame.Rect(1, 2, 3, 4)
    assert effect.active is True


def test_finishes_after_last_frame():
    calls = []
    effect = Effect(Atlas(["a", "b"]), interval=1.0, on_finished=lambda: calls.append(1))
    effect.play_at((0, 0))
    effect.on_update(1.0)
    assert effect.finished is False
    effect.on_update(1.0)
    assert effect.finished is True
    assert calls == [1]


def test_render_at_point():
    effect = Effect(Atlas([_solid(RED)]))
    effect.play_at((3, 3))
    target = pygame.Surface((8, 8))
    effect.on_render(target)
    assert target.get_at((3, 3)) == RED
    assert target.get_at((0, 0)) == BLACK


def test_render_in_rect_scales():
    effect = Effect(Atlas([_solid(RED)]))
    effect.play_in(pygame.Rect(0, 0, 6, 6))
    target = pygame.Surface((8, 8))
    effect.on_render(target)
    assert target.get_at((5, 5)) == RED
    assert target.get_at((6, 6)) == BLACK