from __future__ import annotations

import queue
import threading
from typing import Callable, Iterable, Optional, Protocol

from .events import KeyEvent, monotonic_ms


class InputEventSource(Protocol):
    """Where key events come from (keyboard hook, serial reader, test feed)."""

    def start(self) -> None:
        raise NotImplementedError

    def stop(self) -> None:
        raise NotImplementedError

    def poll(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        raise NotImplementedError


class QueueEventSource(InputEventSource):
    """In-process source: producers ``push`` events, the capture polls them.

    Events pushed while the source is stopped are dropped. ``push_key`` stamps
    events with ``clock``; a capture built on this source expires its buffer with
    the same clock.
    """

    def __init__(self, *, clock: Callable[[], float] = monotonic_ms):
        self.clock = clock
        self._queue: "queue.Queue[KeyEvent]" = queue.Queue()
        self._running = threading.Event()

    @property
    def running(self) -> bool:
        return self._running.is_set()

    def start(self) -> None:
        self._running.set()

    def stop(self) -> None:
        self._running.clear()
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                break

    def push(self, event: KeyEvent) -> bool:
        if not self.running:
            return False
        self._queue.put(event)
        return True

    def push_key(self, key: str, context: Optional[str] = None) -> bool:
        return self.push(KeyEvent(key, self.clock(), context))

    def push_all(self, events: Iterable[KeyEvent]) -> int:
        return sum(1 for e in events if self.push(e))

    def poll(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        try:
            if timeout is None:
                return self._queue.get_nowait()
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None
