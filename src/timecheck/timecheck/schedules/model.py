from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from typing import Optional


@dataclass(frozen=True)
class WorkSchedule:
    """Thực thể miền (domain): Lịch làm việc (work schedule).

    Breaks are optional pairs (out, in) that must sit between entry and exit.
    """

    schedule_id: int
    name: str
    entry_time: time
    exit_time: time
    breakfast_out_time: Optional[time] = None
    breakfast_in_time: Optional[time] = None
    lunch_out_time: Optional[time] = None
    lunch_in_time: Optional[time] = None
    overtime_enabled: bool = False
    created_at: Optional[datetime] = None
