"""Frame-based sprite animation."""

from typing import Any, Callable, Optional, Sequence

import pygame

from battleship.atlas import Atlas
from battleship.timer import Timer


class Animation:
    """Steps through the frames of an atlas at a fixed interval."""

    def __init__(
        self,
        atlas: Optional[Atlas] = None,
        interval: float = 0.1,
        loop: bool = True,
        on_finished: Optional[Callable[[], None]] = None,
    ) -> None:
        self.atlas = atlas
        self.loop = loop
        self.on_finished = on_finished
        self.finished = False
        self.frame_index = 0
        self._timer = Timer(wait_time=interval, one_shot=False, on_timeout=self._next_frame)

    @property
    def interval(self) -> float:
        return self._timer.wait_time

    @interval.setter
    def interval(self, value: float) -> None:
        self._timer.wait_time = value

    @property
    def current_texture(self) -> Optional[Any]:
        if self.atlas is None:
            return None
        return self.atlas.get_texture(self.frame_index)

    def _next_frame(self) -> None:
        self.frame_index += 1
        count = len(self.atlas) if self.atlas is not None else 0
        if self.frame_index >= count:
            self.frame_index = 0 if self.loop else max(count - 1, 0)
            if not self.loop and self.on_finished is not None:
                self.on_finished()
                self.finished = True

    def reset(self) -> None:
        """Go back to the first frame and restart the frame timer."""
        self._timer.restart()
        self.frame_index = 0

    def on_update(self, delta: float) -> None:
        self._timer.on_update(delta)

    def pause(self) -> None:
        self._timer.pause()

    def resume(self) -> None:
        self._timer.resume()

    def on_render(self, surface: pygame.Surface, target: Sequence[int], angle: float = 0.0) -> None:
        """Draw the current frame.

        ``target`` is either a rectangle (the frame is scaled to fill it) or a
        top-left point (the frame keeps its size). ``angle`` is in degrees,
        clockwise, about the centre of the destination.
        """
        texture = self.current_texture
        if texture is None:
            return
        if len(target) == 4:
            rect = pygame.Rect(target)
            image = pygame.transform.scale(texture, rect.size)
        else:
            width, height = texture.get_size()
            rect = pygame.Rect(int(target[0]), int(target[1]), width, height)
            image = texture
        if angle:
            image = pygame.transform.rotate(image, -angle)
        surface.blit(image, image.get_rect(center=rect.center))