"""A one-shot, resettable signal that remembers being set until consumed."""

from __future__ import annotations

import threading


class Monitor:
    """A latch-like signal shared between threads.

    A call to :meth:`signal` sets the monitor and wakes at most one waiter.
    If nobody is waiting, the signal is remembered, so the next call to
    :meth:`wait` returns at once. Each successful wait consumes the signal.
    Repeated signals do not accumulate.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._signaled = False

    @property
    def signaled(self) -> bool:
        """Whether a signal is pending."""
        with self._cond:
            return self._signaled

    def signal(self) -> None:
        """Set the monitor and wake one waiting thread."""
        with self._cond:
            self._signaled = True
            self._cond.notify()

    def reset(self) -> None:
        """Clear a pending signal."""
        with self._cond:
            self._signaled = False

    def wait(self) -> None:
        """Block until the monitor is signaled, then consume the signal."""
        with self._cond:
            self._cond.wait_for(lambda: self._signaled)
            self._signaled = False