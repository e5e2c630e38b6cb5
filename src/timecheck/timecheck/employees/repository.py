from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Note (DIP): services depend on this interface, not on a concrete database.
    Barcode uniqueness is enforced by the store.
    """

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_barcode(self, barcode: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self, *, include_inactive: bool = True) -> Sequence[Employee]:
        raise NotImplementedError

    def create(self, employee: Employee) -> Employee:
        raise NotImplementedError

    def update(
        self,
        employee_id: str,
        *,
        barcode: Optional[str] = None,
        full_name: Optional[str] = None,
        department: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> Optional[Employee]:
        raise NotImplementedError

    def set_schedule(self, employee_id: str, schedule_id: Optional[int]) -> bool:
        """Link (or with None, unlink) a work schedule. Returns False if the employee is gone."""

        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> bool:
        raise NotImplementedError
