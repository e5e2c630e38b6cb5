from __future__ import annotations

from typing import Optional

from ..core.enums import DailyCyclePolicy
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchone
from .model import SystemSettings
from .repository import SettingsRepository

_SETTINGS_ID = 1


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> Optional[SystemSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT company_name, timezone, cooldown_seconds, standard_shift_hours,
                       entry_tolerance_minutes, daily_cycle_policy
                FROM system_settings
                WHERE settings_id=%s
                """,
                (_SETTINGS_ID,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return SystemSettings(
                company_name=r["company_name"],
                timezone=r["timezone"],
                cooldown_seconds=int(r["cooldown_seconds"]),
                standard_shift_hours=as_float(r["standard_shift_hours"]),
                entry_tolerance_minutes=int(r["entry_tolerance_minutes"]),
                daily_cycle_policy=DailyCyclePolicy(r["daily_cycle_policy"]),
            )

    def save(self, settings: SystemSettings) -> SystemSettings:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO system_settings
                    (settings_id, company_name, timezone, cooldown_seconds,
                     standard_shift_hours, entry_tolerance_minutes, daily_cycle_policy)
                VALUES (%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    company_name=VALUES(company_name),
                    timezone=VALUES(timezone),
                    cooldown_seconds=VALUES(cooldown_seconds),
                    standard_shift_hours=VALUES(standard_shift_hours),
                    entry_tolerance_minutes=VALUES(entry_tolerance_minutes),
                    daily_cycle_policy=VALUES(daily_cycle_policy)
                """,
                (
                    _SETTINGS_ID,
                    settings.company_name,
                    settings.timezone,
                    int(settings.cooldown_seconds),
                    settings.standard_shift_hours,
                    int(settings.entry_tolerance_minutes),
                    settings.daily_cycle_policy.value,
                ),
            )
        return settings
