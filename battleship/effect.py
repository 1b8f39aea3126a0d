"""One-off visual effects played at a point or inside a rectangle."""

from typing import Callable, Optional, Sequence, Tuple

import pygame

from battleship.animation import Animation
from battleship.atlas import Atlas


class Effect(Animation):
    """An animation that remembers where and at what angle it is played."""

    def __init__(
        self,
        atlas: Optional[Atlas] = None,
        interval: float = 0.1,
        loop: bool = False,
        on_finished: Optional[Callable[[], None]] = None,
    ) -> None:
        super().__init__(atlas, interval, loop, on_finished)
        self.angle = 0.0
        self.active = False
        self.position: Tuple[int, int] = (0, 0)
        self.rect: Optional[pygame.Rect] = None

    def clone(self) -> "Effect":
        """A fresh copy sharing frames, interval and callback; clones always play once."""
        return Effect(self.atlas, self.interval, loop=False, on_finished=self.on_finished)

    def _start(self, angle: float) -> None:
        self.angle = angle
        self.active = True
        self.reset()
        self.finished = False

    def play_at(self, pos: Sequence[int], angle: float = 0.0) -> None:
        """Start playing with the frame's top-left corner at ``pos``."""
        self.position = (int(pos[0]), int(pos[1]))
        self.rect = None
        self._start(angle)

    def play_in(self, rect: Sequence[int], angle: float = 0.0) -> None:
        """Start playing with frames scaled to fill ``rect``."""
        self.rect = pygame.Rect(rect)
        self._start(angle)

    def on_render(self, surface: pygame.Surface) -> None:  # type: ignore[override]
        target = self.rect if self.rect is not None else self.position
        super().on_render(surface, target, self.angle)