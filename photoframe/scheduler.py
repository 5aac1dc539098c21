# scheduler.py

import heapq
import itertools
import logging
from typing import Any, Callable, List, Optional, Tuple

from photoframe.constants import DEBOUNCE_MS

logger = logging.getLogger(__name__)


# --- Timer hosts ---
#
# Anything with tkinter's `after(ms, func)` / `after_cancel(id)` pair can drive the
# scheduler, a `tk.Tk` root included.

class ManualTimerHost:
    """
    Virtual-clock timer host for headless sessions and tests.

    Nothing fires on its own; `advance(ms)` moves the clock and runs every callback
    that has come due, in due-time order, including ones scheduled while advancing.
    """

    def __init__(self):
        self.now = 0
        self._queue: List[Tuple[int, int, Callable[[], Any]]] = []
        self._cancelled = set()
        self._ids = itertools.count(1)

    def after(self, ms: int, func: Callable[[], Any]) -> int:
        timer_id = next(self._ids)
        heapq.heappush(self._queue, (self.now + max(0, int(ms)), timer_id, func))
        return timer_id

    def after_cancel(self, timer_id: int):
        self._cancelled.add(timer_id)

    @property
    def pending(self) -> int:
        return sum(1 for _, tid, _ in self._queue if tid not in self._cancelled)

    def advance(self, ms: int = 0):
        target = self.now + max(0, int(ms))
        while self._queue and self._queue[0][0] <= target:
            due, timer_id, func = heapq.heappop(self._queue)
            if timer_id in self._cancelled:
                self._cancelled.discard(timer_id)
                continue
            self.now = due
            func()
        self.now = target

    def run_pending(self):
        """Run everything already queued, however far in the future."""
        while self._queue:
            self.advance(self._queue[0][0] - self.now)


class RenderScheduler:
    """
    Decides when the session re-renders.

    Text edits are debounced: each one restarts a `debounce_ms` quiescence timer and
    only its expiry renders. Every other committed change renders straight away and
    drops a pending debounce, since that render already picks up the latest text.
    Drag feedback goes to the overlay callback and never renders.
    """

    def __init__(self, timer_host, render: Callable[[], Any],
                 overlay: Optional[Callable[[], Any]] = None,
                 debounce_ms: int = DEBOUNCE_MS):
        self.timer_host = timer_host
        self._render = render
        self._overlay = overlay
        self.debounce_ms = debounce_ms
        self._pending_id = None
        self.render_count = 0

    @property
    def pending(self) -> bool:
        return self._pending_id is not None

    def text_changed(self):
        self._cancel_pending()
        self._pending_id = self.timer_host.after(self.debounce_ms, self._on_debounce_expired)

    def _on_debounce_expired(self):
        self._pending_id = None
        logger.debug("Caption debounce expired; rendering.")
        self._run_render()

    def request_render(self, reason: str = ''):
        self._cancel_pending()
        logger.debug("Render requested%s.", f" ({reason})" if reason else '')
        return self._run_render()

    def overlay_changed(self):
        if self._overlay is not None:
            self._overlay()

    def cancel(self):
        self._cancel_pending()

    def _cancel_pending(self):
        if self._pending_id is not None:
            self.timer_host.after_cancel(self._pending_id)
            self._pending_id = None

    def _run_render(self):
        self.render_count += 1
        return self._render()
