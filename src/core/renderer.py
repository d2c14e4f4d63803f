"""Full-frame software renderer.

Every frame clears the whole window and composites every entity again; no
dirty-rect tracking.
"""

from __future__ import annotations

from typing import Callable, Iterable

import pygame

from config import BACKGROUND_COLOR
from core.drawable import Drawable


class SceneRenderer:
    def __init__(
        self,
        present: Callable[[], None],
        *,
        background=BACKGROUND_COLOR,
    ) -> None:
        self.present = present
        self.background = background
        self.frames = 0

    def render(
        self,
        window_surface: pygame.Surface,
        entities_back_to_front: Iterable[Drawable],
    ) -> None:
        window_surface.fill(self.background)
        for entity in entities_back_to_front:
            entity.draw(window_surface)
        self.present()
        self.frames += 1


__all__ = ["SceneRenderer"]
