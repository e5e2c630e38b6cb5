from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

TERMINATOR_KEYS = frozenset({"\n", "\r", "Enter", "Return"})


def monotonic_ms() -> float:
    """Default clock for key timestamps and buffer expiry."""
    return time.monotonic() * 1000.0


@dataclass(frozen=True)
class KeyEvent:
    """One character arrival from the keyboard wedge / scanner.

    ``context`` names the UI area that had focus (e.g. ``"employee-form"``) so a
    capture can ignore areas where people type on purpose. ``at_ms`` must come from
    the same clock the capture expires buffers with (``monotonic_ms`` by default);
    wall-clock epoch values would keep an idle buffer alive forever.
    """

    key: str
    at_ms: float
    context: Optional[str] = None

    @property
    def is_terminator(self) -> bool:
        return self.key in TERMINATOR_KEYS

    @property
    def is_printable(self) -> bool:
        return len(self.key) == 1 and self.key.isprintable()
