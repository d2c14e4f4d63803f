"""Tests for the face sprite factory."""

import pygame

from config import SHADOW_COLOR
from smiley.face import alpha_mask, build_face, describe_face

YELLOW = (255, 220, 0, 255)


def px(surface, x, y):
    return tuple(surface.get_at((x, y)))


class TestBuildFace:
    def test_size_and_alpha(self):
        face = build_face(YELLOW)
        assert face.get_size() == (100, 100)
        assert face.get_flags() & pygame.SRCALPHA

    def test_head_is_color(self):
        face = build_face(YELLOW)
        assert px(face, 45, 45) == YELLOW
        assert px(face, 0, 0) == YELLOW
        assert px(face, 89, 89) == YELLOW

    def test_rgb_color_is_opaque(self):
        face = build_face((10, 20, 30))
        assert px(face, 45, 45) == (10, 20, 30, 255)

    def test_drop_shadow(self):
        face = build_face(YELLOW)
        assert px(face, 95, 95) == SHADOW_COLOR
        assert px(face, 50, 95) == SHADOW_COLOR
        assert px(face, 95, 50) == SHADOW_COLOR

    def test_corners_outside_shadow_are_clear(self):
        face = build_face(YELLOW)
        assert px(face, 5, 95)[3] == 0
        assert px(face, 95, 5)[3] == 0

    def test_eyes_and_mouth_replace_alpha(self):
        """Cut-outs take the shadow color verbatim, no blending with the head."""
        face = build_face(YELLOW)
        assert px(face, 25, 25) == SHADOW_COLOR
        assert px(face, 60, 30) == SHADOW_COLOR
        assert px(face, 40, 65) == SHADOW_COLOR

    def test_new_surface_each_call(self):
        assert build_face(YELLOW) is not build_face(YELLOW)


class TestDiagnostics:
    def test_alpha_mask(self):
        mask = alpha_mask(build_face(YELLOW))
        assert mask.shape == (100, 100)
        assert mask[45, 45] == 255
        assert mask[25, 25] == SHADOW_COLOR[3]
        assert mask[5, 95] == 0

    def test_describe_face_counts(self):
        # head 90*90 minus eyes (2*15*20) and mouth (50*10)
        # shadow strip 90*90 - 80*80 plus the cut-outs
        assert describe_face(build_face(YELLOW)) == (
            "100x100 opaque=7000 translucent=2800 clear=200"
        )
