from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import WorkSchedule


class ScheduleRepository(Protocol):
    def list_all(self) -> Sequence[WorkSchedule]:
        raise NotImplementedError

    def get_by_id(self, schedule_id: int) -> Optional[WorkSchedule]:
        raise NotImplementedError

    def create(self, schedule: WorkSchedule) -> WorkSchedule:
        """Insert a schedule; ``schedule.schedule_id`` is ignored and assigned by the store."""

        raise NotImplementedError

    def update(self, schedule: WorkSchedule) -> Optional[WorkSchedule]:
        """Overwrite every field of an existing schedule. Returns None if it is gone."""

        raise NotImplementedError
