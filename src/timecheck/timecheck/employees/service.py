from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.validators import require_non_empty
from ..core.enums import LookupKind
from ..core.exceptions import DuplicateEmployee, EmployeeNotFound, InactiveEmployee, InvalidInput, ValidationError
from ..schedules.service import ScheduleService
from .model import Employee, ScanInput
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

# Marks "leave the schedule link as it is" in update(); None unlinks.
UNCHANGED: Any = object()


class EmployeeService:
    """Use cases around employee records, including scan resolution."""

    def __init__(self, employees: EmployeeRepository, *, schedules: Optional[ScheduleService] = None):
        self._employees = employees
        self._schedules = schedules

    def resolve(self, scan: ScanInput) -> Employee:
        """Map a tagged scan to an active employee.

        Raises ``EmployeeNotFound`` for unknown identifiers and ``InactiveEmployee``
        for deactivated ones; both happen before any attendance state is touched.
        """
        value = (scan.value or "").strip()
        if not value:
            raise InvalidInput("Barcode or employee id is required")

        if scan.kind == LookupKind.BARCODE:
            employee = self._employees.get_by_barcode(value)
        else:
            employee = self._employees.get_by_id(value)

        if not employee:
            logger.info("Scan did not match any employee (%s=%r)", scan.kind.value, value)
            raise EmployeeNotFound("Employee not found")
        if not employee.is_active:
            logger.warning("Scan rejected for inactive employee %s", employee.employee_id)
            raise InactiveEmployee("Employee is inactive")
        return employee

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise EmployeeNotFound("Employee not found")
        return employee

    def list_all(self, *, include_inactive: bool = True) -> Sequence[Employee]:
        return self._employees.list_all(include_inactive=include_inactive)

    def create(
        self,
        *,
        employee_id: str,
        full_name: str,
        department: str,
        barcode: Optional[str] = None,
        is_active: bool = True,
        schedule_id: Any = None,
    ) -> Employee:
        employee_id = require_non_empty(employee_id, "Employee id")
        full_name = require_non_empty(full_name, "Full name")
        department = require_non_empty(department, "Department")
        barcode = (barcode or "").strip() or employee_id
        schedule_id = self._schedule_ref(schedule_id)

        if self._employees.get_by_id(employee_id):
            raise DuplicateEmployee("Employee id already exists")
        if self._employees.get_by_barcode(barcode):
            raise DuplicateEmployee("Barcode already assigned to another employee")

        created = self._employees.create(
            Employee(
                employee_id=employee_id,
                barcode=barcode,
                full_name=full_name,
                department=department,
                is_active=bool(is_active),
                schedule_id=schedule_id,
            )
        )
        logger.info("Created employee %s (barcode=%s)", created.employee_id, created.barcode)
        return created

    def update(
        self,
        employee_id: str,
        *,
        barcode: Optional[str] = None,
        full_name: Optional[str] = None,
        department: Optional[str] = None,
        is_active: Optional[bool] = None,
        schedule_id: Any = UNCHANGED,
    ) -> Employee:
        current = self.get(employee_id)

        if barcode is not None:
            barcode = require_non_empty(barcode, "Barcode")
            owner = self._employees.get_by_barcode(barcode)
            if owner and owner.employee_id != current.employee_id:
                raise DuplicateEmployee("Barcode already assigned to another employee")
        if full_name is not None:
            full_name = require_non_empty(full_name, "Full name")
        if department is not None:
            department = require_non_empty(department, "Department")
        if schedule_id is not UNCHANGED:
            schedule_id = self._schedule_ref(schedule_id)

        updated = self._employees.update(
            employee_id,
            barcode=barcode,
            full_name=full_name,
            department=department,
            is_active=is_active,
        )
        if not updated:
            raise EmployeeNotFound("Employee not found")
        if schedule_id is not UNCHANGED and schedule_id != updated.schedule_id:
            if not self._employees.set_schedule(employee_id, schedule_id):
                raise EmployeeNotFound("Employee not found")
            updated = self.get(employee_id)
            logger.info("Employee %s work schedule set to %s", employee_id, schedule_id)
        return updated

    def deactivate(self, employee_id: str) -> Employee:
        return self.update(employee_id, is_active=False)

    def delete(self, employee_id: str) -> None:
        if not self._employees.delete_by_id(employee_id):
            raise EmployeeNotFound("Employee not found")
        logger.info("Deleted employee %s", employee_id)

    def _schedule_ref(self, value: Any) -> Optional[int]:
        """Validate a schedule reference from input; blank means no schedule."""
        if value is None or str(value).strip() == "":
            return None
        schedule_id = ScheduleService.parse_id(value)
        if self._schedules is not None and not self._schedules.exists(schedule_id):
            raise ValidationError(f"Unknown work schedule: {schedule_id}")
        return schedule_id
