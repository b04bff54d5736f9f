"""ProgressBar component - determinate or indeterminate progress."""

from __future__ import annotations

import math
import threading
import time
from typing import Callable

from tessera.events import NoopEventHandler
from tessera.screen import STYLE_DEFAULT, Screen, Style

# Eighth-block partial cells, empty to full.
BLOCKS = " ▏▎▍▌▋▊▉█"

# Milliseconds per cell of indeterminate movement
_INDETERMINATE_STEP_MS = 200


class ProgressBar(NoopEventHandler):
    """ProgressBar component - determinate or indeterminate progress.

    Progress may be updated from a worker thread; the value is guarded by
    a lock so a draw never sees a torn update.  The indeterminate
    animation advances with wall time, so it only moves when something
    redraws (the application's redraw timer, for instance).
    """

    def __init__(
        self,
        style: Style = STYLE_DEFAULT,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.style = style
        self._clock = clock
        self._lock = threading.Lock()
        self._progress = 0
        self._max = 100
        self._indeterminate = True
        self._indeterminate_start = clock()

    @property
    def progress(self) -> int:
        with self._lock:
            return self._progress

    @property
    def max(self) -> int:
        return self._max

    @property
    def indeterminate(self) -> bool:
        return self._indeterminate

    def set_progress(self, progress: int) -> None:
        with self._lock:
            self._progress = max(0, min(progress, self._max))

    def increment(self, increment: int) -> None:
        with self._lock:
            self._progress = max(0, min(self._progress + increment, self._max))

    def set_max(self, maximum: int) -> None:
        with self._lock:
            self._max = max(1, maximum)
            self._progress = min(self._progress, self._max)

    def set_indeterminate(self, indeterminate: bool) -> None:
        self._indeterminate = indeterminate
        self._indeterminate_start = self._clock()

    def draw(self, screen: Screen) -> None:
        width, _ = screen.size()
        if width <= 0:
            return
        if self._indeterminate:
            bar_width = width // 6
            elapsed_ms = (self._clock() - self._indeterminate_start) * 1000
            pos = int(elapsed_ms // _INDETERMINATE_STEP_MS) % (width + bar_width)
            for x in range(pos - bar_width, pos):
                screen.set_cell(x, 0, self.style, BLOCKS[8])
            return

        with self._lock:
            progress, maximum = self._progress, self._max
        filled = progress * width / maximum
        blocks = math.floor(filled)
        partial = math.floor((filled - blocks) * 8)
        for x in range(blocks):
            screen.set_cell(x, 0, self.style, BLOCKS[8])
        if blocks < width:
            screen.set_cell(blocks, 0, self.style, BLOCKS[partial])
