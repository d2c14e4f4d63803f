from __future__ import annotations

from dataclasses import dataclass
from typing import List

from config import TICK_INTERVAL_MS
from smiley import Smiley


@dataclass
class Scene:
    """The two smileys plus the loop state the dispatcher threads through.

    ``smiley1`` is drawn last so it sits on top when they overlap.
    """

    smiley1: Smiley
    smiley2: Smiley
    done: bool = False
    verbose: bool = False
    tick_interval: int = TICK_INTERVAL_MS
    last_tick: int = 0

    def draw_order(self) -> List[Smiley]:
        """Smileys back to front."""
        return [self.smiley2, self.smiley1]

    def release(self) -> None:
        for s in self.draw_order():
            s.release()
