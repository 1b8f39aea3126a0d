"""Prototype effects and the list of effects currently playing."""

import enum
import functools
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import pygame

from battleship.atlas_manager import AtlasID, AtlasManager, atlas_manager
from battleship.effect import Effect


class EffectID(enum.Enum):
    SELECT_TARGET = enum.auto()
    WATER_SPLASH_SINGLE = enum.auto()
    WATER_SPLASH_PLURAL = enum.auto()
    EXPLOSION = enum.auto()
    EXPLOSION_TWICE = enum.auto()


EFFECT_SETTINGS: Dict[EffectID, Tuple[AtlasID, float]] = {
    EffectID.SELECT_TARGET: (AtlasID.GET_TARGET, 0.15),
    EffectID.WATER_SPLASH_SINGLE: (AtlasID.MISSING_TARGET, 0.1),
    EffectID.EXPLOSION: (AtlasID.EXPLOSION_BIG, 0.1),
    EffectID.EXPLOSION_TWICE: (AtlasID.EXPLOSION, 0.1),
}


class EffectManager:
    """Spawns copies of prototype effects and updates them until they finish."""

    def __init__(self) -> None:
        self._prototypes: Dict[EffectID, Effect] = {}
        self.playing: List[Effect] = []

    def init_all_effects(self, atlases: Optional[AtlasManager] = None) -> None:
        """Create one non-looping prototype per known effect."""
        if atlases is None:
            atlases = atlas_manager()
        self._prototypes = {
            effect_id: Effect(atlases.get_atlas(atlas_id), interval=interval, loop=False)
            for effect_id, (atlas_id, interval) in EFFECT_SETTINGS.items()
        }

    def _prototype(self, effect_id: EffectID) -> Effect:
        try:
            return self._prototypes[effect_id]
        except KeyError:
            raise KeyError(f"effect {effect_id.name} not found") from None

    def show_effect(self, effect_id: EffectID, where: Sequence[int], angle: float = 0.0) -> Effect:
        """Start a copy of the effect at a point ``(x, y)`` or in a rect ``(x, y, w, h)``."""
        effect = self._prototype(effect_id).clone()
        if len(where) == 4:
            effect.play_in(where, angle)
        else:
            effect.play_at(where, angle)
        self.playing.append(effect)
        return effect

    def set_on_finished(self, effect_id: EffectID, callback: Optional[Callable[[], None]]) -> None:
        """Set the callback that effects started from now on call when they end."""
        self._prototype(effect_id).on_finished = callback

    def on_update(self, delta: float) -> None:
        for effect in list(self.playing):
            effect.on_update(delta)
        self.playing[:] = [effect for effect in self.playing if not effect.finished]

    def on_render(self, surface: pygame.Surface) -> None:
        for effect in self.playing:
            effect.on_render(surface)


@functools.lru_cache(maxsize=None)
def effect_manager() -> EffectManager:
    """The shared application-wide effect manager."""
    return EffectManager()