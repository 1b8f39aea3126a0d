"""Building the animation atlases out of loaded textures."""

import enum
import functools
from typing import Dict, Optional, Tuple

from battleship.atlas import Atlas
from battleship.resources import ResID, ResourceError, ResourcesManager, resources_manager


class AtlasID(enum.Enum):
    MISSILE = enum.auto()
    GET_TARGET = enum.auto()
    MISSING_TARGET = enum.auto()
    EXPLOSION = enum.auto()
    EXPLOSION_BIG = enum.auto()


def _frames(prefix: str, count: int) -> Tuple[ResID, ...]:
    return tuple(ResID[f"{prefix}_{number:04d}"] for number in range(1, count + 1))


ATLAS_FRAMES: Dict[AtlasID, Tuple[ResID, ...]] = {
    AtlasID.MISSILE: _frames("TEX_MISSILE", 3),
    AtlasID.GET_TARGET: _frames("TEX_GET_TARGET", 5),
    AtlasID.MISSING_TARGET: _frames("TEX_MISS_TARGET", 10),
    AtlasID.EXPLOSION: _frames("TEX_EXPLOSION", 16),
    AtlasID.EXPLOSION_BIG: _frames("TEX_EXPLOSION_BIG", 12),
}


class AtlasManager:
    """Holds one atlas per AtlasID once they have been loaded."""

    def __init__(self) -> None:
        self._pool: Dict[AtlasID, Atlas] = {}
        self.loaded = False

    def load_atlas(self, resources: Optional[ResourcesManager] = None) -> None:
        """Assemble every atlas from ``resources``; raise ResourceError if a frame is missing."""
        if resources is None:
            resources = resources_manager()
        pool: Dict[AtlasID, Atlas] = {}
        for atlas_id, frame_ids in ATLAS_FRAMES.items():
            atlas = Atlas()
            frames = [resources.get_texture(res_id) for res_id in frame_ids]
            if not atlas.add_textures(*frames):
                raise ResourceError(f"atlas {atlas_id.name} has a missing frame")
            pool[atlas_id] = atlas
        self._pool = pool
        self.loaded = True

    def get_atlas(self, atlas_id: AtlasID) -> Optional[Atlas]:
        """The atlas for ``atlas_id``, or None while atlases are not loaded."""
        if not self.loaded:
            return None
        try:
            return self._pool[atlas_id]
        except KeyError:
            raise ResourceError(f"atlas {atlas_id.name} not loaded") from None


@functools.lru_cache(maxsize=None)
def atlas_manager() -> AtlasManager:
    """The shared application-wide atlas manager."""
    return AtlasManager()