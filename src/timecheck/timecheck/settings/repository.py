from __future__ import annotations

from typing import Optional, Protocol

from .model import SystemSettings


class SettingsRepository(Protocol):
    def get(self) -> Optional[SystemSettings]:
        raise NotImplementedError

    def save(self, settings: SystemSettings) -> SystemSettings:
        raise NotImplementedError
