from __future__ import annotations

import threading
from typing import Callable, Generic, Optional, ParamSpec

P = ParamSpec("P")

DEFAULT_DEBOUNCE_WAIT = 0.02  # seconds


class Debounced(Generic[P]):
    """
    Callable wrapper that postpones ``callback`` until calls stop arriving.

    Every call cancels the pending one and restarts the ``wait`` timer, so only
    the arguments of the last call in a burst reach the callback. The callback
    runs on a timer thread.
    """

    def __init__(self, callback: Callable[P, object], wait: float = DEFAULT_DEBOUNCE_WAIT) -> None:
        if wait < 0:
            raise ValueError(f"wait must be non-negative, got {wait}")
        self._callback = callback
        self.wait = wait
        self._timer: Optional[threading.Timer] = None
        self._lock = threading.Lock()

    def __call__(self, *args: P.args, **kwargs: P.kwargs) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = threading.Timer(self.wait, self._callback, args=args, kwargs=kwargs)
            self._timer.daemon = True
            self._timer.start()

    @property
    def pending(self) -> bool:
        timer = self._timer
        return timer is not None and timer.is_alive()

    def join(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the pending call, if any, has run or been cancelled.

        Returns False if ``timeout`` expired while the call was still pending.
        """
        timer = self._timer
        if timer is None:
            return True
        timer.join(timeout)
        return not timer.is_alive()

    def cancel(self) -> None:
        """Drop the pending call, if any."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None


def debounce(callback: Callable[P, object], wait: float = DEFAULT_DEBOUNCE_WAIT) -> Debounced[P]:
    return Debounced(callback, wait)
