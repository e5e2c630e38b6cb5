from __future__ import annotations

from typing import Optional

from ..core.constants import DEFAULT_INACTIVITY_MS, DEFAULT_INTER_CHAR_MS, DEFAULT_MIN_SCAN_LENGTH
from .events import KeyEvent


class InputClassifier:
    """Turns a keystroke stream into scanned codes.

    A barcode scanner types its payload in a fast burst followed by Enter. Characters
    separated by more than ``inter_char_ms`` start a fresh buffer, so slow human
    typing never gets glued onto a scan remnant. On the terminator, buffers shorter
    than ``min_length`` are dropped as noise. A buffer idle for longer than
    ``inactivity_ms`` is cleared without emitting.

    Never raises: bad input produces no code.
    """

    def __init__(
        self,
        *,
        inter_char_ms: float = DEFAULT_INTER_CHAR_MS,
        min_length: int = DEFAULT_MIN_SCAN_LENGTH,
        inactivity_ms: float = DEFAULT_INACTIVITY_MS,
    ):
        self.inter_char_ms = float(inter_char_ms)
        self.min_length = int(min_length)
        self.inactivity_ms = float(inactivity_ms)
        self._buffer: list[str] = []
        self._last_at: Optional[float] = None

    @property
    def buffer(self) -> str:
        return "".join(self._buffer)

    def reset(self) -> None:
        self._buffer.clear()
        self._last_at = None

    def expire(self, now_ms: float) -> bool:
        """Clear a stale partial scan. Returns True if something was discarded."""
        if self._buffer and self._last_at is not None and now_ms - self._last_at > self.inactivity_ms:
            self.reset()
            return True
        return False

    def feed(self, event: KeyEvent) -> Optional[str]:
        self.expire(event.at_ms)

        if event.is_terminator:
            code = self.buffer.strip()
            self.reset()
            if len(code) < self.min_length:
                return None
            return code

        if not event.is_printable:
            # Modifier / navigation keys (Shift, Tab, ...)
            return None

        if self._buffer and self._last_at is not None and event.at_ms - self._last_at > self.inter_char_ms:
            self._buffer = [event.key]
        else:
            self._buffer.append(event.key)
        self._last_at = event.at_ms
        return None
