"""A bounded, thread-safe FIFO of strings with an end-of-input signal."""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Iterator

from strpipe.monitor import Monitor


class QueueFinishedError(RuntimeError):
    """Raised when putting into a queue that has been marked finished."""

    def __init__(self) -> None:
        super().__init__("Queue is finished")


class ConsumerProducer:
    """A bounded queue connecting producers with consumers.

    :meth:`put` blocks while the queue is full and :meth:`get` blocks while
    it is empty. After :meth:`signal_finished`, no more items are accepted;
    items already queued can still be taken, and :meth:`get` then returns
    ``None`` once the queue is drained.
    """

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("Capacity must be greater than 0")
        self._capacity = capacity
        self._items: deque[str] = deque()
        self._finished = False
        lock = threading.Lock()
        self._not_empty = threading.Condition(lock)
        self._not_full = threading.Condition(lock)
        self._finished_monitor = Monitor()

    @property
    def capacity(self) -> int:
        """Maximum number of items the queue holds."""
        return self._capacity

    @property
    def finished(self) -> bool:
        """Whether the queue has been marked finished."""
        with self._not_empty:
            return self._finished

    def __len__(self) -> int:
        with self._not_empty:
            return len(self._items)

    def put(self, item: str) -> None:
        """Append ``item``, blocking while the queue is full.

        Raises :class:`QueueFinishedError` if the queue is, or becomes,
        finished before the item could be stored.
        """
        if item is None:
            raise ValueError("Item is None")
        with self._not_full:
            if self._finished:
                raise QueueFinishedError()
            while len(self._items) >= self._capacity:
                self._not_full.wait()
                if self._finished:
                    raise QueueFinishedError()
            self._items.append(item)
            self._not_empty.notify()

    def get(self) -> str | None:
        """Remove and return the oldest item, blocking while empty.

        Returns ``None`` when the queue is finished and has been drained.
        """
        with self._not_empty:
            while not self._items:
                if self._finished:
                    return None
                self._not_empty.wait()
            item = self._items.popleft()
            self._not_full.notify()
            return item

    def __iter__(self) -> Iterator[str]:
        while (item := self.get()) is not None:
            yield item

    def signal_finished(self) -> None:
        """Mark the queue finished and wake blocked producers and consumers."""
        with self._not_empty:
            self._finished = True
            self._not_empty.notify_all()
            self._not_full.notify_all()
        self._finished_monitor.signal()

    def wait_finished(self) -> None:
        """Block until :meth:`signal_finished` has been called."""
        self._finished_monitor.wait()