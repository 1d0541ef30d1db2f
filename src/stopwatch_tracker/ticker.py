"""Periodic display refresh on a background thread."""

from __future__ import annotations

import logging
import threading
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Ticker:
    """Call ``callback`` every ``interval`` seconds until cancelled.

    Cancellation only signals the thread; it never waits for it to finish.
    """

    def __init__(self, interval: float, callback: Callable[[], None]) -> None:
        self._interval = interval
        self._callback = callback
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        logger.debug("Ticker started with %.3fs interval.", self._interval)

    def cancel(self) -> None:
        self._stop_event.set()

    @property
    def cancelled(self) -> bool:
        return self._stop_event.is_set()

    def is_alive(self) -> bool:
        return bool(self._thread and self._thread.is_alive())

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        while not self._stop_event.is_set():
            try:
                self._callback()
            except Exception:  # pragma: no cover - keeps the refresh loop alive
                logger.exception("Display refresh failed.")
            # Sleep in an interruptible manner.
            self._stop_event.wait(self._interval)
