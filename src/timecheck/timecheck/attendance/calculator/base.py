from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked/overtime hours)."""

    @abstractmethod
    def worked_hours(self, check_in: datetime, check_out: datetime) -> float:
        raise NotImplementedError

    @abstractmethod
    def overtime_hours(self, total_hours: float, standard_shift_hours: float) -> float:
        raise NotImplementedError
