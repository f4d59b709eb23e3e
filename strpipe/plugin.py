"""A pipeline stage: a bounded queue drained by a worker thread."""

from __future__ import annotations

import threading
from collections.abc import Callable

from strpipe.channel import ConsumerProducer, QueueFinishedError
from strpipe.transforms import Transform, get_transform

PlaceWork = Callable[[str], object]


class PluginError(RuntimeError):
    """Raised when a pipeline stage cannot do what was asked."""


class Plugin:
    """A stage that transforms queued strings and hands them downstream.

    Strings passed to :meth:`place_work` are queued; a worker thread takes
    them in order, applies the transform and passes each result to the
    function given to :meth:`attach`, if any.
    """

    def __init__(self, name: str, transform: Transform, queue_size: int) -> None:
        self.name = name
        self._transform = transform
        self._next_place_work: PlaceWork | None = None
        self._closed = False
        self._finished = threading.Event()
        try:
            self._queue = ConsumerProducer(queue_size)
        except ValueError as exc:
            raise PluginError("Could not initialize plugin queue") from exc
        self._thread = threading.Thread(
            target=self._consume, name=f"plugin-{name}", daemon=True
        )
        try:
            self._thread.start()
        except RuntimeError as exc:
            raise PluginError("Could not create consumer thread") from exc

    @property
    def finished(self) -> bool:
        """Whether the worker has drained the queue and stopped."""
        return self._finished.is_set()

    def _log_error(self, message: str) -> None:
        print(f"[ERROR][{self.name}] - {message}", flush=True)

    def _consume(self) -> None:
        try:
            for item in self._queue:
                output = self._transform(item)
                next_place_work = self._next_place_work
                if next_place_work is not None:
                    try:
                        next_place_work(output)
                    except PluginError as exc:
                        self._log_error(str(exc))
        finally:
            self._finished.set()

    def _ensure_open(self) -> None:
        if self._closed:
            raise PluginError("Plugin context not initialized")

    def place_work(self, text: str) -> None:
        """Queue ``text`` for processing, blocking while the queue is full."""
        self._ensure_open()
        try:
            self._queue.put(text)
        except (QueueFinishedError, ValueError) as exc:
            raise PluginError(str(exc)) from exc

    def attach(self, next_place_work: PlaceWork | None) -> None:
        """Send every result on to ``next_place_work``."""
        self._next_place_work = next_place_work

    def wait_finished(self) -> None:
        """Stop accepting work and wait until everything queued is processed."""
        self._ensure_open()
        self._queue.signal_finished()
        try:
            self._thread.join()
        except RuntimeError as exc:
            raise PluginError("Could not join consumer thread") from exc

    def fini(self) -> None:
        """Finish the remaining work and release the stage."""
        self.wait_finished()
        self._closed = True

    def __enter__(self) -> Plugin:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self._closed:
            self.fini()


def load_plugin(name: str, queue_size: int) -> Plugin:
    """Create and start the stage called ``name``."""
    try:
        transform = get_transform(name)
    except ValueError as exc:
        raise PluginError(str(exc)) from exc
    return Plugin(name, transform, queue_size)