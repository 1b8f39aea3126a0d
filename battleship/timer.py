"""A repeating countdown timer driven by frame deltas."""

from dataclasses import dataclass, field
from typing import Callable, Optional


@dataclass
class Timer:
    """Calls ``on_timeout`` each time ``wait_time`` seconds have accumulated."""

    wait_time: float = 0.0
    one_shot: bool = False
    on_timeout: Optional[Callable[[], None]] = None
    elapsed: float = field(default=0.0, init=False)
    paused: bool = field(default=False, init=False)
    shot: bool = field(default=False, init=False)

    def restart(self) -> None:
        """Clear the accumulated time and allow a one-shot timer to fire again."""
        self.elapsed = 0.0
        self.shot = False

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def on_update(self, delta: float) -> None:
        """Advance by ``delta`` seconds, firing at most once per call."""
        if self.paused:
            return
        self.elapsed += delta
        if self.elapsed >= self.wait_time:
            can_fire = not self.one_shot or not self.shot
            self.shot = True
            if can_fire and self.on_timeout is not None:
                self.on_timeout()
            self.elapsed -= self.wait_time