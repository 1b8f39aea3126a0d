"""Cache of rendered text surfaces."""

import functools
from typing import Any, Dict, Sequence

import pygame

STYLE_BOLD = 0x01
STYLE_ITALIC = 0x02
STYLE_UNDERLINE = 0x04

DEFAULT_TEXT_COLOR = (0, 0, 0, 255)


def make_text_key(text: str, style: int, color: Sequence[int]) -> str:
    """The cache key for ``text`` drawn in ``style`` and ``color``."""
    c = pygame.Color(*color)
    return f"{text}|{style}|{c.r},{c.g},{c.b},{c.a}"


def _font_style(font: Any) -> int:
    style = 0
    if font.get_bold():
        style |= STYLE_BOLD
    if font.get_italic():
        style |= STYLE_ITALIC
    if font.get_underline():
        style |= STYLE_UNDERLINE
    return style


class TextTextureManager:
    """Renders text once per text, style and colour and reuses the result."""

    def __init__(self) -> None:
        self._pool: Dict[str, pygame.Surface] = {}

    def get_text_texture(
        self,
        font: Any,
        text: str,
        bold: bool = False,
        color: Sequence[int] = DEFAULT_TEXT_COLOR,
    ) -> pygame.Surface:
        """Rendered ``text``; turning on ``bold`` leaves the font bold afterwards."""
        if font is None:
            raise ValueError(f"font is missing for text {text!r}")
        style = _font_style(font)
        if bold:
            style |= STYLE_BOLD
        key = make_text_key(text, style, color)
        cached = self._pool.get(key)
        if cached is not None:
            return cached
        if bold:
            font.set_bold(True)
        surface = font.render(text, True, pygame.Color(*color))
        self._pool[key] = surface
        return surface


@functools.lru_cache(maxsize=None)
def text_texture_manager() -> TextTextureManager:
    """The shared application-wide text cache."""
    return TextTextureManager()