from typing import Protocol

import pygame


class Drawable(Protocol):
    def draw(self, dest: pygame.Surface) -> None: ...  # noqa: D401
