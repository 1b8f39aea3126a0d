"""A clickable rectangular button."""

import enum
from typing import Any, Callable, Optional, Sequence

import pygame


class ButtonStatus(enum.Enum):
    IDLE = enum.auto()
    HOVERED = enum.auto()
    PUSHED = enum.auto()


class Button:
    """Drawn with flat colours or with one texture per status; calls ``on_click``."""

    def __init__(
        self,
        rect: Sequence[int],
        message_rect: Optional[Sequence[int]] = None,
        message: Optional[pygame.Surface] = None,
        sound_down: Any = None,
        sound_up: Any = None,
        *,
        idle_color: Sequence[int] = (255, 255, 255, 255),
        hovered_color: Sequence[int] = (200, 200, 200, 255),
        pushed_color: Sequence[int] = (150, 150, 150, 255),
        frame_color: Sequence[int] = (0, 0, 0, 255),
        textures: Optional[Sequence[Optional[pygame.Surface]]] = None,
        on_click: Optional[Callable[[], None]] = None,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.message = message
        self.message_rect = pygame.Rect(message_rect if message_rect is not None else self.rect)
        self.sound_down = sound_down
        self.sound_up = sound_up
        self.colors = {
            ButtonStatus.IDLE: pygame.Color(*idle_color),
            ButtonStatus.HOVERED: pygame.Color(*hovered_color),
            ButtonStatus.PUSHED: pygame.Color(*pushed_color),
        }
        self.frame_color = pygame.Color(*frame_color)
        self.textures = None
        if textures is not None:
            textures = tuple(textures)
            if len(textures) != len(ButtonStatus) or any(t is None for t in textures):
                raise ValueError("a button needs idle, hovered and pushed textures")
            self.textures = dict(zip(ButtonStatus, textures))
        self.on_click = on_click
        self.status = ButtonStatus.IDLE
        self.held = False
        self.click_count = 0

    def on_render(self, surface: pygame.Surface) -> None:
        if self.textures is None:
            pygame.draw.rect(surface, self.colors[self.status], self.rect)
            pygame.draw.rect(surface, self.frame_color, self.rect, 1)
        else:
            texture = pygame.transform.scale(self.textures[self.status], self.rect.size)
            surface.blit(texture, self.rect)
        if self.message is not None:
            message = pygame.transform.scale(self.message, self.message_rect.size)
            surface.blit(message, self.message_rect)

    def process_event(self, event: pygame.event.Event) -> None:
        """Update the status from a mouse event; ignored while the button is held."""
        if self.held:
            return
        if event.type == pygame.MOUSEMOTION:
            inside = self.check_cursor_hit(*event.pos)
            if self.status is ButtonStatus.IDLE and inside:
                self.status = ButtonStatus.HOVERED
            elif self.status is ButtonStatus.HOVERED and not inside:
                self.status = ButtonStatus.IDLE
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == pygame.BUTTON_LEFT:
            if self.check_cursor_hit(*event.pos):
                self.status = ButtonStatus.PUSHED
                if self.sound_down is not None:
                    self.sound_down.play()
        elif event.type == pygame.MOUSEBUTTONUP and event.button == pygame.BUTTON_LEFT:
            if self.status is ButtonStatus.PUSHED:
                self.click_count += 1
                self.status = ButtonStatus.IDLE
                if self.sound_up is not None:
                    self.sound_up.play()
                if self.check_cursor_hit(*event.pos) and self.on_click is not None:
                    self.on_click()

    def check_cursor_hit(self, x: int, y: int) -> bool:
        return bool(self.rect.collidepoint(x, y))

    def hold(self) -> None:
        """Stop reacting to events."""
        self.held = True

    def release(self) -> None:
        """React to events again."""
        self.held = False