"""An ordered collection of animation frames."""

from typing import Any, Iterable, Iterator, List, Optional


class Atlas:
    """Frames of one animation, looked up by index with wrap-around."""

    def __init__(self, textures: Iterable[Any] = ()) -> None:
        self._textures: List[Any] = list(textures)

    def clear(self) -> None:
        self._textures.clear()

    def __len__(self) -> int:
        return len(self._textures)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._textures)

    def add_texture(self, texture: Any) -> None:
        self._textures.append(texture)

    def add_textures(self, *args: Any) -> bool:
        """Append all frames; add nothing and return False if none given or any is None."""
        if not args or any(texture is None for texture in args):
            return False
        self._textures.extend(args)
        return True

    def get_texture(self, index: int) -> Optional[Any]:
        """Return the frame at ``index`` modulo the frame count, or None if empty."""
        if not self._textures:
            return None
        return self._textures[index % len(self._textures)]