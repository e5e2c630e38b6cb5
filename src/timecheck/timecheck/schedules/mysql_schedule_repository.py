from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import WorkSchedule
from .repository import ScheduleRepository

_COLUMNS = """
    schedule_id, name, entry_time, breakfast_out_time, breakfast_in_time,
    lunch_out_time, lunch_in_time, exit_time, overtime_enabled, created_at
"""


def _to_schedule(r: Dict[str, Any]) -> WorkSchedule:
    return WorkSchedule(
        schedule_id=int(r["schedule_id"]),
        name=r["name"],
        entry_time=normalize_mysql_time(r["entry_time"]),
        exit_time=normalize_mysql_time(r["exit_time"]),
        breakfast_out_time=normalize_mysql_time(r.get("breakfast_out_time")),
        breakfast_in_time=normalize_mysql_time(r.get("breakfast_in_time")),
        lunch_out_time=normalize_mysql_time(r.get("lunch_out_time")),
        lunch_in_time=normalize_mysql_time(r.get("lunch_in_time")),
        overtime_enabled=bool(r.get("overtime_enabled")),
        created_at=r.get("created_at"),
    )


def _params(schedule: WorkSchedule) -> tuple:
    return (
        schedule.name,
        schedule.entry_time,
        schedule.breakfast_out_time,
        schedule.breakfast_in_time,
        schedule.lunch_out_time,
        schedule.lunch_in_time,
        schedule.exit_time,
        1 if schedule.overtime_enabled else 0,
    )


class MySQLScheduleRepository(ScheduleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[WorkSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM work_schedules ORDER BY schedule_id")
            return [_to_schedule(r) for r in fetchall(cur)]

    def get_by_id(self, schedule_id: int) -> Optional[WorkSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM work_schedules WHERE schedule_id=%s", (int(schedule_id),))
            r = fetchone(cur)
            return _to_schedule(r) if r else None

    def create(self, schedule: WorkSchedule) -> WorkSchedule:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_schedules(
                    name, entry_time, breakfast_out_time, breakfast_in_time,
                    lunch_out_time, lunch_in_time, exit_time, overtime_enabled
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _params(schedule),
            )
            schedule_id = int(cur.lastrowid)
        return self.get_by_id(schedule_id) or schedule

    def update(self, schedule: WorkSchedule) -> Optional[WorkSchedule]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_schedules
                SET name=%s, entry_time=%s, breakfast_out_time=%s, breakfast_in_time=%s,
                    lunch_out_time=%s, lunch_in_time=%s, exit_time=%s, overtime_enabled=%s
                WHERE schedule_id=%s
                """,
                _params(schedule) + (int(schedule.schedule_id),),
            )
        return self.get_by_id(schedule.schedule_id)
