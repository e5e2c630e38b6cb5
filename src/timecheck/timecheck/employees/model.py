from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import LookupKind


@dataclass(frozen=True)
class Employee:
    """Thực thể miền (domain): Nhân viên.

    ``barcode`` is the value printed on the credential; it defaults to ``employee_id``.
    ``schedule_id`` optionally links the employee to a work schedule.
    """

    employee_id: str
    barcode: str
    full_name: str
    department: str
    is_active: bool = True
    schedule_id: Optional[int] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class ScanInput:
    """Tagged identifier: the caller decides whether it holds a barcode or an id."""

    kind: LookupKind
    value: str

    @classmethod
    def barcode(cls, value: str) -> "ScanInput":
        return cls(kind=LookupKind.BARCODE, value=value)

    @classmethod
    def employee_id(cls, value: str) -> "ScanInput":
        return cls(kind=LookupKind.ID, value=value)
