"""Polling loop and input dispatch.

One iteration (``step``) does, in order:

1. read the clock,
2. wait a few milliseconds for a single event,
3. run the periodic color drift if a full tick interval has passed,
4. dispatch the event (if any) to the smileys.

``scene.done`` is only checked at the top of each iteration, so a frame that
is already being mutated/rendered always completes.
"""

from __future__ import annotations

from typing import Callable, Optional

import pygame

from config import POLL_TIMEOUT_MS, SMILEY1_DRIFT, SMILEY2_DRIFT, MOVE_STEP
from core.renderer import SceneRenderer
from core.scene import Scene

# Anything that changes what's visible in the window triggers a full redraw
WINDOW_EVENTS = frozenset(
    (
        pygame.VIDEOEXPOSE,
        pygame.VIDEORESIZE,
        pygame.WINDOWSHOWN,
        pygame.WINDOWEXPOSED,
        pygame.WINDOWRESIZED,
        pygame.WINDOWSIZECHANGED,
        pygame.WINDOWMAXIMIZED,
        pygame.WINDOWRESTORED,
    )
)

QUIT_KEYS = frozenset((pygame.K_ESCAPE, pygame.K_q))

# key -> (dx, dy) in units of MOVE_STEP
ARROW_KEYS = {
    pygame.K_LEFT: (-1, 0),
    pygame.K_RIGHT: (1, 0),
    pygame.K_UP: (0, -1),
    pygame.K_DOWN: (0, 1),
}


class InputDispatcher:
    def __init__(
        self,
        scene: Scene,
        renderer: SceneRenderer,
        *,
        window_surface: Callable[[], pygame.Surface],
        poll_event: Callable[[int], Optional[pygame.event.Event]],
        now_ms: Callable[[], int],
        poll_timeout_ms: int = POLL_TIMEOUT_MS,
    ) -> None:
        self.scene = scene
        self.renderer = renderer
        self.window_surface = window_surface
        self.poll_event = poll_event
        self.now_ms = now_ms
        self.poll_timeout_ms = poll_timeout_ms

    # ------------------------------------------------------------------
    def redraw(self) -> None:
        self.renderer.render(self.window_surface(), self.scene.draw_order())

    def run(self) -> None:
        while not self.scene.done:
            self.step()

    def step(self) -> None:
        current_time = self.now_ms()
        event = self.poll_event(self.poll_timeout_ms)
        self.tick(current_time)
        if event is not None:
            self.dispatch(event)

    # ------------------------------------------------------------------
    def tick(self, current_time: int) -> bool:
        """Drift both smileys' colors once per tick interval.

        Returns True if a tick fired.
        """
        scene = self.scene
        if current_time - scene.last_tick < scene.tick_interval:
            return False
        scene.smiley1.mutate_color(SMILEY1_DRIFT)
        scene.smiley2.mutate_color(SMILEY2_DRIFT)
        self.redraw()
        scene.last_tick = current_time
        if scene.verbose:
            print(
                f"[Tick] t={current_time} "
                f"smiley1={tuple(scene.smiley1.color)} "
                f"smiley2={tuple(scene.smiley2.color)}"
            )
        return True

    def dispatch(self, event: pygame.event.Event) -> None:
        scene = self.scene
        if scene.verbose:
            print(f"[Input] {pygame.event.event_name(event.type)} {event.dict}")

        if event.type in WINDOW_EVENTS:
            self.redraw()
        elif event.type == pygame.QUIT:
            scene.done = True
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._on_pointer_press(event)
        elif event.type == pygame.KEYDOWN:
            self._on_key(event)

    def _on_pointer_press(self, event: pygame.event.Event) -> None:
        pos = getattr(event, "pos", None)
        if pos is None:
            return
        x, y = pos
        self.scene.smiley1.set_position(x, y)
        self.redraw()

    def _on_key(self, event: pygame.event.Event) -> None:
        key = getattr(event, "key", None)
        if key is None:
            return
        scene = self.scene
        if key in QUIT_KEYS:
            scene.done = True
        elif key == pygame.K_SPACE:
            scene.smiley1.randomize_color()
            scene.smiley2.randomize_color()
            self.redraw()
        elif key in ARROW_KEYS:
            dx, dy = ARROW_KEYS[key]
            scene.smiley2.translate(dx * MOVE_STEP, dy * MOVE_STEP)
            self.redraw()


__all__ = ["InputDispatcher", "WINDOW_EVENTS", "QUIT_KEYS", "ARROW_KEYS"]
