"""Face sprite factory.

Builds the small per-pixel-alpha surface every smiley draws with. Drawing is
done purely with ``Surface.fill`` which overwrites pixels (alpha included)
instead of blending, so the eye and mouth cut-outs end up exactly as
transparent as the drop shadow.
"""

from __future__ import annotations

import numpy as np
import pygame
from pygame import surfarray

from config import (
    FACE_SIZE,
    HEAD_RECT,
    SHADOW_RECT,
    EYE_RECTS,
    MOUTH_RECT,
    SHADOW_COLOR,
)


def build_face(color) -> pygame.Surface:
    """Return a new FACE_SIZE surface depicting a face in ``color``.

    Parameters
    ----------
    color : tuple
        RGBA (or RGB) color of the head.

    Raises ``pygame.error`` if the backend can't allocate the surface.
    """
    surface = pygame.Surface(FACE_SIZE, pygame.SRCALPHA, 32)
    surface.fill(SHADOW_COLOR, SHADOW_RECT)
    surface.fill(color, HEAD_RECT)
    for rect in (*EYE_RECTS, MOUTH_RECT):
        surface.fill(SHADOW_COLOR, rect)
    # Full alpha modulation is a no-op; the flag asks SDL to RLE-encode for
    # faster blits.
    surface.set_alpha(255, pygame.RLEACCEL)
    return surface


def alpha_mask(surface: pygame.Surface) -> np.ndarray:
    """Copy of the per-pixel alpha plane, indexed ``[x, y]``."""
    return surfarray.array_alpha(surface)


def describe_face(surface: pygame.Surface) -> str:
    """One-line summary of a face surface for verbose output."""
    alpha = alpha_mask(surface)
    w, h = surface.get_size()
    opaque = int(np.count_nonzero(alpha == 255))
    clear = int(np.count_nonzero(alpha == 0))
    translucent = alpha.size - opaque - clear
    return f"{w}x{h} opaque={opaque} translucent={translucent} clear={clear}"


__all__ = ["build_face", "alpha_mask", "describe_face"]
