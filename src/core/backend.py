"""Thin pygame wrapper: init/teardown, the window, events and the clock.

Everything the scene core needs from SDL goes through here so the rest of
the code never touches ``pygame.display`` or ``pygame.event`` directly.
"""

from __future__ import annotations

from typing import Optional, Tuple

import pygame


class BackendError(RuntimeError):
    """pygame couldn't be initialised or the window couldn't be created."""


class PygameBackend:
    def __init__(self) -> None:
        self._inited = False
        self._min_size: Tuple[int, int] = (0, 0)
        self._flags = pygame.RESIZABLE

    def init(self) -> None:
        # pygame.init() doesn't raise; a missing video driver leaves the
        # display module uninitialised.
        pygame.init()
        if not pygame.display.get_init():
            error = pygame.get_error()
            pygame.quit()
            raise BackendError(f"pygame init failed: {error}")
        self._inited = True

    def create_window(
        self,
        title: str,
        size: Tuple[int, int],
        min_size: Tuple[int, int] = (0, 0),
    ) -> pygame.Surface:
        self._min_size = (int(min_size[0]), int(min_size[1]))
        pygame.display.set_caption(title)
        try:
            return pygame.display.set_mode(self._clamp_size(size), self._flags)
        except pygame.error as e:
            raise BackendError(f"could not create window: {e}") from e

    def _clamp_size(self, size: Tuple[int, int]) -> Tuple[int, int]:
        min_w, min_h = self._min_size
        return (max(min_w, int(size[0])), max(min_h, int(size[1])))

    def window_surface(self) -> pygame.Surface:
        # Owned by pygame; callers borrow it and never free it
        return pygame.display.get_surface()

    def present(self) -> None:
        pygame.display.flip()

    def poll_event(self, timeout_ms: int) -> Optional[pygame.event.Event]:
        """Wait up to ``timeout_ms`` for one event; None on timeout."""
        event = pygame.event.wait(timeout_ms)
        if event.type == pygame.NOEVENT:
            return None
        if event.type == pygame.VIDEORESIZE:
            clamped = self._clamp_size(event.size)
            if clamped != tuple(event.size):
                pygame.display.set_mode(clamped, self._flags)
        return event

    def now_ms(self) -> int:
        return pygame.time.get_ticks()

    def shutdown(self) -> None:
        if not self._inited:
            return
        pygame.quit()
        self._inited = False


__all__ = ["BackendError", "PygameBackend"]
