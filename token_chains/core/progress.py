"""
Background "still searching" ticker.

The ticker only knows whether it has been stopped. It never sees the
graph or the search state; the single ``threading.Event`` is the whole
interface between the searching thread and the ticker thread.
"""

import threading
from typing import Callable, Optional

from token_chains.constants import TICKER_INTERVAL_SECONDS, TICKER_MESSAGE


class ProgressTicker:
    """Emit a message every ``interval`` seconds until stopped."""

    def __init__(
        self,
        interval: float = TICKER_INTERVAL_SECONDS,
        message: str = TICKER_MESSAGE,
        emit: Callable[[str], None] = print,
    ):
        if interval <= 0:
            raise ValueError(f"Ticker interval must be positive, got {interval}")
        self.interval = interval
        self.message = message
        self.emit = emit
        self.ticks = 0
        self._done = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "ProgressTicker":
        if self._thread is not None:
            raise RuntimeError("ProgressTicker can only be started once")
        self._thread = threading.Thread(
            target=self._run, name="progress-ticker", daemon=True
        )
        self._thread.start()
        return self

    def stop(self) -> None:
        """Signal completion and block until the ticker thread has exited."""
        self._done.set()
        if self._thread is not None:
            self._thread.join()

    def _run(self) -> None:
        # wait() returns True as soon as stop() sets the event
        while not self._done.wait(self.interval):
            self.ticks += 1
            self.emit(self.message)

    def __enter__(self) -> "ProgressTicker":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
