from __future__ import annotations

import logging
import threading
from typing import Callable

logger = logging.getLogger(__name__)

_CALLBACK_EXCEPTIONS = (OSError, RuntimeError, ValueError)


class TimerScheduler:
    """Runs delayed callbacks on daemon timer threads.

    Callbacks are not cancelled when superseded; whichever fires last wins.
    """

    def __init__(self):
        self._timers: list[threading.Timer] = []
        self._lock = threading.Lock()

    def schedule(self, delay_seconds: float, callback: Callable[[], object]) -> threading.Timer:
        timer = threading.Timer(max(0.0, float(delay_seconds)), self._safe_run, args=(callback,))
        timer.daemon = True
        with self._lock:
            self._timers = [item for item in self._timers if item.is_alive()]
            self._timers.append(timer)
        timer.start()
        return timer

    @staticmethod
    def _safe_run(callback: Callable[[], object]) -> None:
        try:
            callback()
        except _CALLBACK_EXCEPTIONS:
            logger.exception("Scheduled dashboard callback failed")

    def pending(self) -> int:
        with self._lock:
            return sum(1 for timer in self._timers if timer.is_alive())

    def wait(self, timeout: float | None = None) -> None:
        """Block until every timer, including ones scheduled meanwhile, has run."""
        while True:
            with self._lock:
                alive = [timer for timer in self._timers if timer.is_alive()]
            if not alive:
                return
            for timer in alive:
                timer.join(timeout)
            if timeout is not None:
                return

    def cancel_all(self) -> None:
        with self._lock:
            timers, self._timers = self._timers, []
        for timer in timers:
            timer.cancel()


__all__ = ["TimerScheduler"]
