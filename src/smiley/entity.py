"""Positioned, drawable surface.

The position is the *center* of the sprite, not its top-left corner.
"""

from __future__ import annotations

import pygame


class SceneEntity:
    def __init__(self, surface: pygame.Surface, x: int = 0, y: int = 0) -> None:
        self.surface = surface
        self.x = int(x)
        self.y = int(y)

    @property
    def position(self) -> tuple[int, int]:
        return (self.x, self.y)

    def bounding_rect(self) -> pygame.Rect:
        """Rect of the surface centered on the entity position."""
        w, h = self.surface.get_size()
        return pygame.Rect(self.x - w // 2, self.y - h // 2, w, h)

    def draw(self, dest: pygame.Surface) -> None:
        dest.blit(self.surface, self.bounding_rect())

    def set_position(self, x: int, y: int) -> None:
        # Off-screen is fine, it just won't show up
        self.x = int(x)
        self.y = int(y)

    def translate(self, dx: int, dy: int) -> None:
        self.x += int(dx)
        self.y += int(dy)

    def replace_surface(self, surface: pygame.Surface) -> None:
        """Take ownership of ``surface``; the old one is dropped here."""
        self.surface = surface

    def release(self) -> None:
        self.surface = None


__all__ = ["SceneEntity"]
