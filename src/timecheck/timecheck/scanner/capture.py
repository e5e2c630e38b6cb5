from __future__ import annotations

import logging
import threading
from typing import Callable, Iterable, Optional

from .classifier import InputClassifier
from .events import monotonic_ms
from .source import InputEventSource

logger = logging.getLogger(__name__)


class ScanCapture:
    """Owns the scanner input stream: start/stop, classify, hand codes to ``on_scan``.

    Events coming from a context listed in ``disabled_contexts`` (text fields where
    people type deliberately) are passed over untouched. Without an explicit
    ``clock`` the capture reuses the source's ``clock`` when it has one, so event
    stamps and buffer expiry share a time base.
    """

    def __init__(
        self,
        source: InputEventSource,
        on_scan: Callable[[str], object],
        *,
        classifier: Optional[InputClassifier] = None,
        disabled_contexts: Iterable[str] = (),
        clock: Optional[Callable[[], float]] = None,
    ):
        self._source = source
        self._on_scan = on_scan
        self._classifier = classifier or InputClassifier()
        self._disabled = set(disabled_contexts)
        self._clock = clock or getattr(source, "clock", None) or monotonic_ms
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        if self._running:
            return
        self._classifier.reset()
        self._source.start()
        self._running = True
        logger.debug("Scan capture started")

    def stop(self) -> None:
        if not self._running:
            return
        self._source.stop()
        self._classifier.reset()
        self._running = False
        logger.debug("Scan capture stopped")

    def disable(self, context: str) -> None:
        self._disabled.add(context)

    def enable(self, context: str) -> None:
        self._disabled.discard(context)

    def pump(self, *, timeout: Optional[float] = None) -> list[str]:
        """Drain pending events; returns the codes emitted during this call."""
        emitted: list[str] = []
        if not self._running:
            return emitted

        event = self._source.poll(timeout)
        while event is not None:
            if event.context not in self._disabled:
                code = self._classifier.feed(event)
                if code:
                    logger.debug("Scanned code %r", code)
                    emitted.append(code)
                    self._on_scan(code)
            event = self._source.poll()

        self._classifier.expire(self._clock())
        return emitted

    def run(self, stop_event: threading.Event, *, poll_interval: float = 0.05) -> None:
        """Blocking loop for a kiosk thread."""
        self.start()
        try:
            while not stop_event.is_set():
                self.pump(timeout=poll_interval)
        finally:
            self.stop()
