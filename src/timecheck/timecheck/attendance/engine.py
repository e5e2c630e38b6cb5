from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from ..common.locks import KeyedLocks
from ..core.enums import AttendanceAction, DailyCyclePolicy
from ..core.exceptions import CooldownActive, CycleComplete, InvalidInput
from ..employees.model import Employee
from ..settings.model import SystemSettings
from .calculator.base import HoursCalculator
from .calculator.standard_calculator import StandardHoursCalculator
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleOutcome:
    action: AttendanceAction
    record: AttendanceRecord
    hours_worked: float


class AttendanceToggleEngine:
    """Decides check-in vs check-out for one employee on one business day.

    States per (employee, work_date):

    * no record          -> create it with ``check_in_time = now`` (check-in)
    * checked in, open   -> cooldown check, then close it (check-out)
    * checked in and out -> ``CycleComplete`` (single policy) or a new cycle
                            once the cooldown has passed (unlimited policy)

    Each call does one read-then-write against the repository while holding the
    per-(employee, day) lock; rejected scans never write.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        settings_provider: Callable[[], SystemSettings],
        *,
        calculator: Optional[HoursCalculator] = None,
        locks: Optional[KeyedLocks] = None,
    ):
        self._attendance = attendance
        self._settings_provider = settings_provider
        self._calculator = calculator or StandardHoursCalculator()
        self._locks = locks or KeyedLocks()

    def toggle(self, employee: Employee, *, now: datetime) -> ToggleOutcome:
        settings = self._settings_provider()
        work_date = now.date()

        with self._locks.hold((employee.employee_id, work_date)):
            record = self._attendance.get_for_employee_and_date(employee.employee_id, work_date)

            if record is None or record.check_in_time is None:
                return self._check_in(employee, record, now=now, settings=settings)
            if record.check_out_time is None:
                return self._check_out(employee, record, now=now, settings=settings)
            return self._after_complete(employee, record, now=now, settings=settings)

    def _check_in(self, employee: Employee, record, *, now: datetime, settings: SystemSettings) -> ToggleOutcome:
        if record is None:
            created = self._attendance.create_checkin(
                employee_id=employee.employee_id,
                work_date=now.date(),
                check_in_time=now,
            )
            if created is None:
                # Lost the insert race against a simultaneous scan.
                raise CooldownActive(
                    "Another scan for this employee was just registered",
                    remaining_seconds=int(settings.cooldown_seconds),
                )
        else:
            # Row exists without a check-in (created externally); start the cycle on it.
            if not self._attendance.reset_cycle(
                record_id=record.record_id, check_in_time=now, previous_check_out=record.check_out_time
            ):
                raise CooldownActive(
                    "Another scan for this employee was just registered",
                    remaining_seconds=int(settings.cooldown_seconds),
                )
            created = AttendanceRecord(
                record_id=record.record_id,
                employee_id=record.employee_id,
                work_date=record.work_date,
                check_in_time=now,
            )

        logger.info("Employee %s checked in at %s (record id=%s)", employee.employee_id, now.isoformat(), created.record_id)
        return ToggleOutcome(action=AttendanceAction.CHECK_IN, record=created, hours_worked=0.0)

    def _check_out(
        self, employee: Employee, record: AttendanceRecord, *, now: datetime, settings: SystemSettings
    ) -> ToggleOutcome:
        elapsed = now - record.check_in_time
        if elapsed < timedelta(0):
            raise InvalidInput("Scan time is earlier than the recorded check-in")
        self._enforce_cooldown(employee, elapsed, settings)

        total = self._calculator.worked_hours(record.check_in_time, now)
        overtime = self._calculator.overtime_hours(total, settings.standard_shift_hours)

        if not self._attendance.update_checkout(
            record_id=record.record_id,
            check_out_time=now,
            total_hours=total,
            overtime_hours=overtime,
        ):
            # Conditional update lost: someone else closed the record first.
            raise CycleComplete("Employee has already completed check-in and check-out today")

        closed = AttendanceRecord(
            record_id=record.record_id,
            employee_id=record.employee_id,
            work_date=record.work_date,
            check_in_time=record.check_in_time,
            check_out_time=now,
            total_hours=total,
            overtime_hours=overtime,
        )
        logger.info(
            "Employee %s checked out at %s (record id=%s) worked: %.2fh overtime: %.2fh",
            employee.employee_id,
            now.isoformat(),
            record.record_id,
            total,
            overtime,
        )
        return ToggleOutcome(action=AttendanceAction.CHECK_OUT, record=closed, hours_worked=total)

    def _after_complete(
        self, employee: Employee, record: AttendanceRecord, *, now: datetime, settings: SystemSettings
    ) -> ToggleOutcome:
        if settings.daily_cycle_policy != DailyCyclePolicy.UNLIMITED:
            logger.info("Employee %s already completed today's cycle", employee.employee_id)
            raise CycleComplete("Employee has already completed check-in and check-out today")

        elapsed = now - record.check_out_time
        if elapsed < timedelta(0):
            raise InvalidInput("Scan time is earlier than the recorded check-out")
        self._enforce_cooldown(employee, elapsed, settings)

        if not self._attendance.reset_cycle(
            record_id=record.record_id, check_in_time=now, previous_check_out=record.check_out_time
        ):
            raise CooldownActive(
                "Another scan for this employee was just registered",
                remaining_seconds=int(settings.cooldown_seconds),
            )

        reopened = AttendanceRecord(
            record_id=record.record_id,
            employee_id=record.employee_id,
            work_date=record.work_date,
            check_in_time=now,
        )
        logger.info("Employee %s started a new cycle at %s (record id=%s)", employee.employee_id, now.isoformat(), record.record_id)
        return ToggleOutcome(action=AttendanceAction.CHECK_IN, record=reopened, hours_worked=0.0)

    @staticmethod
    def _enforce_cooldown(employee: Employee, elapsed: timedelta, settings: SystemSettings) -> None:
        cooldown = timedelta(seconds=settings.cooldown_seconds)
        if elapsed < cooldown:
            remaining = max(1, math.ceil((cooldown - elapsed).total_seconds()))
            logger.info("Scan for employee %s rejected by cooldown (%ss remaining)", employee.employee_id, remaining)
            raise CooldownActive(
                f"Please wait {remaining} seconds before scanning again",
                remaining_seconds=remaining,
            )
