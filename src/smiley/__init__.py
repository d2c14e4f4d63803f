"""Smiley package: face sprite factory and the two entity types.

    from smiley import Smiley, Color
"""

from .face import build_face, alpha_mask, describe_face
from .entity import SceneEntity
from .smiley import Color, Smiley

__all__ = [
    "build_face",
    "alpha_mask",
    "describe_face",
    "SceneEntity",
    "Color",
    "Smiley",
]
