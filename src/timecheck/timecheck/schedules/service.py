from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import parse_hhmm
from ..common.responses import parse_bool
from ..common.validators import require_non_empty
from ..core.exceptions import ScheduleNotFound, ValidationError
from .model import WorkSchedule
from .repository import ScheduleRepository

logger = logging.getLogger(__name__)

# API field name -> model attribute
_FIELDS = {
    "name": "name",
    "entryTime": "entry_time",
    "exitTime": "exit_time",
    "breakfastOutTime": "breakfast_out_time",
    "breakfastInTime": "breakfast_in_time",
    "lunchOutTime": "lunch_out_time",
    "lunchInTime": "lunch_in_time",
    "overtimeEnabled": "overtime_enabled",
}
_REQUIRED_TIMES = {"entry_time": "Entry time", "exit_time": "Exit time"}
_BREAKS = (
    ("breakfast_out_time", "breakfast_in_time", "Breakfast"),
    ("lunch_out_time", "lunch_in_time", "Lunch"),
)
# Read-only fields a client may echo back.
_IGNORED = {"id", "createdAt"}


def _hhmm(value) -> Optional[str]:
    return value.strftime("%H:%M") if value else None


class ScheduleService:
    """Quản lý lịch làm việc: CRUD + late-arrival check against the entry time."""

    def __init__(self, schedules: ScheduleRepository):
        self._schedules = schedules

    def list_all(self) -> Sequence[WorkSchedule]:
        return self._schedules.list_all()

    def get(self, schedule_id) -> WorkSchedule:
        schedule = self._schedules.get_by_id(self.parse_id(schedule_id))
        if not schedule:
            raise ScheduleNotFound("Work schedule not found")
        return schedule

    def exists(self, schedule_id: int) -> bool:
        return self._schedules.get_by_id(schedule_id) is not None

    def create(self, data: Mapping[str, Any]) -> WorkSchedule:
        values = self._parse(data)
        if "name" not in values:
            raise ValidationError("Name is required")
        for attr, label in _REQUIRED_TIMES.items():
            if values.get(attr) is None:
                raise ValidationError(f"{label} is required")

        schedule = WorkSchedule(schedule_id=0, **values)
        self._validate(schedule)
        created = self._schedules.create(schedule)
        logger.info("Created work schedule %s (%s)", created.schedule_id, created.name)
        return created

    def update(self, schedule_id, changes: Mapping[str, Any]) -> WorkSchedule:
        current = self.get(schedule_id)
        values = self._parse(changes)
        for attr, label in _REQUIRED_TIMES.items():
            if attr in values and values[attr] is None:
                raise ValidationError(f"{label} is required")

        schedule = replace(current, **values)
        self._validate(schedule)
        updated = self._schedules.update(schedule)
        if not updated:
            raise ScheduleNotFound("Work schedule not found")
        logger.info("Work schedule %s updated: %s", updated.schedule_id, ", ".join(sorted(values)) or "no changes")
        return updated

    def is_late_arrival(self, schedule_id: int, *, checked_in_at: datetime, tolerance_minutes: int) -> Optional[bool]:
        """True when the check-in falls after entry time plus tolerance.

        Returns None when the schedule no longer exists; the scan itself is already stored.
        """
        schedule = self._schedules.get_by_id(schedule_id)
        if not schedule:
            logger.warning("Employee references missing work schedule %s", schedule_id)
            return None
        entry = datetime.combine(checked_in_at.date(), schedule.entry_time)
        return checked_in_at > entry + timedelta(minutes=int(tolerance_minutes))

    @staticmethod
    def parse_id(value) -> int:
        try:
            schedule_id = int(value)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Invalid work schedule id: {value!r}") from exc
        if schedule_id <= 0:
            raise ValidationError(f"Invalid work schedule id: {value!r}")
        return schedule_id

    @staticmethod
    def to_dict(schedule: WorkSchedule) -> dict:
        return {
            "id": schedule.schedule_id,
            "name": schedule.name,
            "entryTime": _hhmm(schedule.entry_time),
            "breakfastOutTime": _hhmm(schedule.breakfast_out_time),
            "breakfastInTime": _hhmm(schedule.breakfast_in_time),
            "lunchOutTime": _hhmm(schedule.lunch_out_time),
            "lunchInTime": _hhmm(schedule.lunch_in_time),
            "exitTime": _hhmm(schedule.exit_time),
            "overtimeEnabled": schedule.overtime_enabled,
            "createdAt": schedule.created_at.isoformat() if schedule.created_at else None,
        }

    @staticmethod
    def _parse(data: Mapping[str, Any]) -> dict:
        values: dict[str, Any] = {}
        for key, value in data.items():
            if key in _IGNORED:
                continue
            attr = _FIELDS.get(key, key if key in _FIELDS.values() else None)
            if attr is None:
                raise ValidationError(f"Unknown schedule field: {key}")

            if attr == "name":
                values[attr] = require_non_empty(value, "Name")
            elif attr == "overtime_enabled":
                values[attr] = parse_bool(value)
            elif value is None or str(value).strip() == "":
                values[attr] = None
            else:
                values[attr] = parse_hhmm(value, key)
        return values

    @staticmethod
    def _validate(schedule: WorkSchedule) -> None:
        if schedule.entry_time >= schedule.exit_time:
            raise ValidationError("Entry time must be before exit time")

        for out_attr, in_attr, label in _BREAKS:
            out_time = getattr(schedule, out_attr)
            in_time = getattr(schedule, in_attr)
            if (out_time is None) != (in_time is None):
                raise ValidationError(f"{label} break needs both out and in times")
            if out_time is None:
                continue
            if out_time >= in_time:
                raise ValidationError(f"{label} break must end after it starts")
            if out_time < schedule.entry_time or in_time > schedule.exit_time:
                raise ValidationError(f"{label} break must fall within the working hours")
