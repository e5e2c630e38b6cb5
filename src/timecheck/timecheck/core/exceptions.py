from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidInput(ValidationError):
    """Raised for unusable scan input (empty identifier, negative duration)."""


class DuplicateEmployee(ValidationError):
    """Raised when an employee id or barcode is already taken."""


class EmployeeNotFound(DomainError):
    """Raised when no employee matches the scanned identifier."""


class InactiveEmployee(EmployeeNotFound):
    """Raised when the matched employee is deactivated."""


class ScheduleNotFound(DomainError):
    """Raised when a work schedule id does not exist."""


class CooldownActive(DomainError):
    """Raised when a scan arrives inside the cooldown window."""

    def __init__(self, message: str, *, remaining_seconds: Optional[int] = None):
        super().__init__(message)
        self.remaining_seconds = remaining_seconds


class CycleComplete(DomainError):
    """Raised when the employee already checked in and out today."""


class StorageUnavailable(Exception):
    """Raised when the record store cannot be reached or fails mid-operation."""
