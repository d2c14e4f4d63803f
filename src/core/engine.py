"""Engine: backend setup, scene construction, the main loop and teardown.

Separates concerns:
- PygameBackend: SDL init/quit, window, events, clock.
- Scene: the two smileys and the loop state.
- SceneRenderer: clear -> composite -> present.
- InputDispatcher: the polling loop itself.
"""

from __future__ import annotations

import random
from typing import Optional, Tuple

from config import *
from core.backend import PygameBackend
from core.dispatcher import InputDispatcher
from core.renderer import SceneRenderer
from core.scene import Scene
from smiley import Smiley, describe_face


class Engine:
    def __init__(
        self,
        *,
        size: Tuple[int, int] = (WIDTH, HEIGHT),
        verbose: bool = VERBOSE,
        seed: Optional[int] = None,
        backend: Optional[PygameBackend] = None,
    ) -> None:
        self.backend = backend or PygameBackend()
        self.backend.init()
        try:
            self.backend.create_window(TITLE, size, (MIN_WIDTH, MIN_HEIGHT))
            rng = random.Random(seed)
            self.scene = Scene(
                smiley1=Smiley.create(*SMILEY1_START, SMILEY1_COLOR, rng=rng),
                smiley2=Smiley.create(*SMILEY2_START, SMILEY2_COLOR, rng=rng),
                verbose=verbose,
                last_tick=self.backend.now_ms(),
            )
        except Exception:
            self.backend.shutdown()
            raise
        self.renderer = SceneRenderer(self.backend.present)
        self.dispatcher = InputDispatcher(
            self.scene,
            self.renderer,
            window_surface=self.backend.window_surface,
            poll_event=self.backend.poll_event,
            now_ms=self.backend.now_ms,
        )

        if verbose:
            surf = self.backend.window_surface()
            print(f"[Engine] window {surf.get_width()}x{surf.get_height()}")
            for name, s in (("smiley1", self.scene.smiley1), ("smiley2", self.scene.smiley2)):
                print(f"[Smiley] {name} at {s.position}: {describe_face(s.surface)}")

    # ------------------------------------------------------------------
    def run(self) -> None:
        try:
            self.dispatcher.redraw()
            self.dispatcher.run()
        finally:
            self.shutdown()

    def shutdown(self) -> None:
        if self.scene.verbose:
            print(f"[Engine] shutting down after {self.renderer.frames} frames")
        self.scene.release()
        self.backend.shutdown()

    # ------------------------------------------------------------------
