from __future__ import annotations
import logging
import threading
import time

logger = logging.getLogger(__name__)


class SearchCancelled(Exception):
    """Raised at a suspension point once cancellation has been requested."""


class SearchBusyError(RuntimeError):
    """A run was started while another one is still active."""


class ControlSignal:
    """
    Flags a caller uses to steer a running search: cancel, pause, single step,
    and the pacing interval (seconds) waited at every suspension point.

    All state sits behind one condition variable, so the caller may live on
    another thread (a GUI loop) while the search blocks in `wait()`. The
    interval is read live: changing it wakes a waiting search, which then
    measures the elapsed time against the new value.
    """

    def __init__(self, interval: float = 0.0, paused: bool = False):
        if interval < 0:
            raise ValueError(f"interval must be non-negative, got {interval}")
        self._cond = threading.Condition()
        self._interval = float(interval)
        self._paused = paused
        self._cancelled = False
        self._step_pending = False
        self._blocked = False

    @property
    def interval(self) -> float:
        with self._cond:
            return self._interval

    @interval.setter
    def interval(self, value: float) -> None:
        if value < 0:
            raise ValueError(f"interval must be non-negative, got {value}")
        with self._cond:
            self._interval = float(value)
            self._cond.notify_all()

    @property
    def paused(self) -> bool:
        with self._cond:
            return self._paused

    @property
    def cancelled(self) -> bool:
        with self._cond:
            return self._cancelled

    @property
    def blocked(self) -> bool:
        """True while the search sits paused at a suspension point."""
        with self._cond:
            return self._blocked

    def pause(self) -> None:
        with self._cond:
            self._paused = True
            self._cond.notify_all()

    def resume(self) -> None:
        with self._cond:
            self._paused = False
            self._step_pending = False
            self._blocked = False
            self._cond.notify_all()

    def toggle_pause(self) -> bool:
        with self._cond:
            paused = not self._paused
        if paused:
            self.pause()
        else:
            self.resume()
        return paused

    def step(self) -> bool:
        """
        Let exactly one suspension point elapse, then pause again. Ignored
        unless paused, and while an earlier step is still in flight.
        """
        with self._cond:
            if not self._paused or self._step_pending:
                return False
            self._step_pending = True
            self._blocked = False
            self._cond.notify_all()
            return True

    def step_back(self) -> bool:
        logger.warning("Step backward is not possible with this recursive algorithm.")
        return False

    def cancel(self) -> None:
        with self._cond:
            self._cancelled = True
            self._cond.notify_all()

    def reset(self) -> None:
        """Clear all flags before reusing the signal for a new run."""
        with self._cond:
            self._paused = False
            self._cancelled = False
            self._step_pending = False
            self._blocked = False
            self._cond.notify_all()

    def check(self) -> None:
        with self._cond:
            if self._cancelled:
                raise SearchCancelled()

    def wait(self) -> None:
        """
        Suspension point. Returns after the pacing interval, blocks without
        timeout while paused, raises SearchCancelled as soon as cancellation
        is seen.
        """
        with self._cond:
            start = time.monotonic()
            while True:
                if self._cancelled:
                    raise SearchCancelled()
                if self._paused and not self._step_pending:
                    self._blocked = True
                    self._cond.notify_all()
                    self._cond.wait()
                    self._blocked = False
                    start = time.monotonic()
                    continue
                remaining = start + self._interval - time.monotonic()
                if remaining <= 0:
                    # a granted step is used up by this suspension point
                    self._step_pending = False
                    return
                self._cond.wait(remaining)

    def wait_until_blocked(self, timeout: float | None = None) -> bool:
        """Block the caller until the search is parked at a paused suspension point."""
        with self._cond:
            return self._cond.wait_for(lambda: self._blocked, timeout)
