"""Smiley: a SceneEntity paired with the color its surface was built from.

The surface is always rebuilt through ``build_face`` whenever the color
changes, so ``smiley.color`` and what ends up on screen never disagree.
"""

from __future__ import annotations

import random
from typing import NamedTuple, Optional

import pygame

from config import RANDOM_CHANNEL_MIN, RANDOM_CHANNEL_SPAN
from smiley.entity import SceneEntity
from smiley.face import build_face


class Color(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255


def _clamp_channel(v: int) -> int:
    """Clamp an int to the 8-bit range [0, 255]."""
    if v < 0:
        return 0
    if v > 255:
        return 255
    return v


def _checked_color(color) -> Color:
    """Coerce to Color, rejecting channels outside [0, 255]."""
    color = Color(*color)
    if any(not 0 <= c <= 255 for c in color):
        raise ValueError(f"color channels must be in [0, 255], got {tuple(color)}")
    return color


class Smiley:
    def __init__(
        self,
        entity: SceneEntity,
        color: Color,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.entity = entity
        self.color = Color(*color)
        # Falls back to the module-level generator (the random module itself)
        self.rng = rng or random

    @classmethod
    def create(
        cls, x: int, y: int, color, *, rng: Optional[random.Random] = None
    ) -> "Smiley":
        color = _checked_color(color)
        return cls(SceneEntity(build_face(color), x, y), color, rng=rng)

    # ------------------------------------------------------------------
    # Color
    # ------------------------------------------------------------------
    def set_color(self, color) -> None:
        color = _checked_color(color)
        # Build before swapping so a failed allocation leaves the old pair
        # intact.
        surface = build_face(color)
        self.entity.replace_surface(surface)
        self.color = color

    def mutate_color(self, delta: int) -> None:
        """Drift each RGB channel by a random offset in [-delta, delta].

        Channels are clamped to [0, 255]; alpha is reset to fully opaque.
        """
        if delta < 0:
            raise ValueError(f"delta must be >= 0, got {delta}")
        r, g, b, _ = self.color
        self.set_color(
            Color(
                _clamp_channel(r + self.rng.randint(-delta, delta)),
                _clamp_channel(g + self.rng.randint(-delta, delta)),
                _clamp_channel(b + self.rng.randint(-delta, delta)),
                255,
            )
        )

    def randomize_color(self) -> None:
        self.set_color(
            Color(
                RANDOM_CHANNEL_MIN + self.rng.randrange(RANDOM_CHANNEL_SPAN),
                RANDOM_CHANNEL_MIN + self.rng.randrange(RANDOM_CHANNEL_SPAN),
                RANDOM_CHANNEL_MIN + self.rng.randrange(RANDOM_CHANNEL_SPAN),
                255,
            )
        )

    # ------------------------------------------------------------------
    # Entity delegation
    # ------------------------------------------------------------------
    @property
    def surface(self) -> pygame.Surface:
        return self.entity.surface

    @property
    def x(self) -> int:
        return self.entity.x

    @property
    def y(self) -> int:
        return self.entity.y

    @property
    def position(self) -> tuple[int, int]:
        return self.entity.position

    def set_position(self, x: int, y: int) -> None:
        self.entity.set_position(x, y)

    def translate(self, dx: int, dy: int) -> None:
        self.entity.translate(dx, dy)

    def bounding_rect(self) -> pygame.Rect:
        return self.entity.bounding_rect()

    def draw(self, dest: pygame.Surface) -> None:
        self.entity.draw(dest)

    def release(self) -> None:
        self.entity.release()

    def __repr__(self) -> str:
        return f"Smiley(pos={self.position}, color={tuple(self.color)})"


__all__ = ["Color", "Smiley"]
