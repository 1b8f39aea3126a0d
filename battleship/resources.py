"""Loading and lookup of fonts, sounds, music and textures."""

import enum
import functools
from pathlib import Path
from typing import Any, Dict, Union

import pygame


class ResourceError(Exception):
    """A resource could not be loaded or was never loaded."""


class ResID(enum.Enum):
    FONT_16 = enum.auto()
    FONT_24 = enum.auto()
    FONT_48 = enum.auto()
    FONT_72 = enum.auto()
    FONT_128 = enum.auto()

    TEX_TILE_HIT = enum.auto()
    TEX_TILE_MISS = enum.auto()
    TEX_TILE_UNKNOWN = enum.auto()

    TEX_MISSILE_0001 = enum.auto()
    TEX_MISSILE_0002 = enum.auto()
    TEX_MISSILE_0003 = enum.auto()

    TEX_SET_TARGET = enum.auto()

    TEX_GET_TARGET_0001 = enum.auto()
    TEX_GET_TARGET_0002 = enum.auto()
    TEX_GET_TARGET_0003 = enum.auto()
    TEX_GET_TARGET_0004 = enum.auto()
    TEX_GET_TARGET_0005 = enum.auto()

    TEX_EXPLOSION_0001 = enum.auto()
    TEX_EXPLOSION_0002 = enum.auto()
    TEX_EXPLOSION_0003 = enum.auto()
    TEX_EXPLOSION_0004 = enum.auto()
    TEX_EXPLOSION_0005 = enum.auto()
    TEX_EXPLOSION_0006 = enum.auto()
    TEX_EXPLOSION_0007 = enum.auto()
    TEX_EXPLOSION_0008 = enum.auto()
    TEX_EXPLOSION_0009 = enum.auto()
    TEX_EXPLOSION_0010 = enum.auto()
    TEX_EXPLOSION_0011 = enum.auto()
    TEX_EXPLOSION_0012 = enum.auto()
    TEX_EXPLOSION_0013 = enum.auto()
    TEX_EXPLOSION_0014 = enum.auto()
    TEX_EXPLOSION_0015 = enum.auto()
    TEX_EXPLOSION_0016 = enum.auto()

    TEX_EXPLOSION_BIG_0001 = enum.auto()
    TEX_EXPLOSION_BIG_0002 = enum.auto()
    TEX_EXPLOSION_BIG_0003 = enum.auto()
    TEX_EXPLOSION_BIG_0004 = enum.auto()
    TEX_EXPLOSION_BIG_0005 = enum.auto()
    TEX_EXPLOSION_BIG_0006 = enum.auto()
    TEX_EXPLOSION_BIG_0007 = enum.auto()
    TEX_EXPLOSION_BIG_0008 = enum.auto()
    TEX_EXPLOSION_BIG_0009 = enum.auto()
    TEX_EXPLOSION_BIG_0010 = enum.auto()
    TEX_EXPLOSION_BIG_0011 = enum.auto()
    TEX_EXPLOSION_BIG_0012 = enum.auto()

    TEX_MISS_TARGET_0001 = enum.auto()
    TEX_MISS_TARGET_0002 = enum.auto()
    TEX_MISS_TARGET_0003 = enum.auto()
    TEX_MISS_TARGET_0004 = enum.auto()
    TEX_MISS_TARGET_0005 = enum.auto()
    TEX_MISS_TARGET_0006 = enum.auto()
    TEX_MISS_TARGET_0007 = enum.auto()
    TEX_MISS_TARGET_0008 = enum.auto()
    TEX_MISS_TARGET_0009 = enum.auto()
    TEX_MISS_TARGET_0010 = enum.auto()


FONT_FILE = "Basketball.otf"

FONT_SIZES: Dict[ResID, int] = {
    ResID.FONT_16: 16,
    ResID.FONT_24: 24,
    ResID.FONT_48: 48,
    ResID.FONT_72: 72,
    ResID.FONT_128: 128,
}


def _frame_files(member_prefix: str, count: int, folder: str, stem: str) -> Dict[ResID, str]:
    return {
        ResID[f"{member_prefix}_{number:04d}"]: f"{folder}/{stem}_{number:04d}.png"
        for number in range(1, count + 1)
    }


TEXTURE_FILES: Dict[ResID, str] = {
    ResID.TEX_SET_TARGET: "set_target.png",
    ResID.TEX_TILE_HIT: "tile_hit.png",
    ResID.TEX_TILE_MISS: "tile_miss.png",
    ResID.TEX_TILE_UNKNOWN: "tile_unknow.png",
    **_frame_files("TEX_MISSILE", 3, "missile_on_fire", "missile"),
    **_frame_files("TEX_GET_TARGET", 5, "get_target", "get_target"),
    **_frame_files("TEX_EXPLOSION", 16, "explosion", "explosion"),
    **_frame_files("TEX_EXPLOSION_BIG", 12, "explosion_big", "explosion_big"),
    **_frame_files("TEX_MISS_TARGET", 10, "miss_target", "missed"),
}


class ResourcesManager:
    """Holds every loaded asset, keyed by ResID."""

    def __init__(self) -> None:
        self.fonts: Dict[ResID, Any] = {}
        self.sounds: Dict[ResID, Any] = {}
        self.music: Dict[ResID, Any] = {}
        self.textures: Dict[ResID, pygame.Surface] = {}

    def load(self, base_dir: Union[str, Path] = "res") -> None:
        """Load all fonts and textures from ``base_dir``; raise ResourceError on failure."""
        base = Path(base_dir)
        if not pygame.font.get_init():
            pygame.font.init()

        font_path = base / FONT_FILE
        for res_id, size in FONT_SIZES.items():
            try:
                self.fonts[res_id] = pygame.font.Font(str(font_path), size)
            except (OSError, pygame.error) as exc:
                raise ResourceError(f"cannot load font {font_path}: {exc}") from exc

        for res_id, relative in TEXTURE_FILES.items():
            path = base / relative
            try:
                self.textures[res_id] = pygame.image.load(str(path))
            except (OSError, pygame.error) as exc:
                raise ResourceError(f"cannot load texture {path}: {exc}") from exc

    @staticmethod
    def _lookup(pool: Dict[ResID, Any], res_id: ResID, kind: str) -> Any:
        try:
            return pool[res_id]
        except KeyError:
            raise ResourceError(f"{kind} {res_id.name} not loaded") from None

    def get_font(self, res_id: ResID) -> Any:
        return self._lookup(self.fonts, res_id, "font")

    def get_sound(self, res_id: ResID) -> Any:
        return self._lookup(self.sounds, res_id, "sound")

    def get_music(self, res_id: ResID) -> Any:
        return self._lookup(self.music, res_id, "music")

    def get_texture(self, res_id: ResID) -> pygame.Surface:
        return self._lookup(self.textures, res_id, "texture")


@functools.lru_cache(maxsize=None)
def resources_manager() -> ResourcesManager:
    """The shared application-wide resource manager."""
    return ResourcesManager()