from __future__ import annotations

import pytest

from src.timecheck.timecheck.core.exceptions import DuplicateEmployee, EmployeeNotFound, InactiveEmployee, InvalidInput, ValidationError
from src.timecheck.timecheck.employees.model import ScanInput
from src.timecheck.timecheck.employees.service import EmployeeService
from src.timecheck.timecheck.schedules.service import ScheduleService


def test_resolve_by_barcode(employees_repo):
    svc = EmployeeService(employees_repo)
    assert svc.resolve(ScanInput.barcode("7501234567890")).employee_id == "GARL920304"


def test_resolve_by_id_does_not_fall_back_to_barcode(employees_repo):
    svc = EmployeeService(employees_repo)
    assert svc.resolve(ScanInput.employee_id("GARL920304")).barcode == "7501234567890"

    with pytest.raises(EmployeeNotFound):
        svc.resolve(ScanInput.employee_id("7501234567890"))


def test_resolve_trims_whitespace(employees_repo):
    svc = EmployeeService(employees_repo)
    assert svc.resolve(ScanInput.barcode("  MOJV040815 ")).employee_id == "MOJV040815"


def test_resolve_unknown_identifier(employees_repo):
    with pytest.raises(EmployeeNotFound):
        EmployeeService(employees_repo).resolve(ScanInput.barcode("NOPE123"))


def test_resolve_inactive_employee(employees_repo):
    with pytest.raises(InactiveEmployee):
        EmployeeService(employees_repo).resolve(ScanInput.barcode("PEHA881122"))


def test_resolve_empty_identifier(employees_repo):
    with pytest.raises(InvalidInput):
        EmployeeService(employees_repo).resolve(ScanInput.barcode("   "))


def test_create_defaults_barcode_to_id(employees_repo):
    svc = EmployeeService(employees_repo)
    created = svc.create(employee_id="LOMC990101", full_name="Carla López", department="Ventas")

    assert created.barcode == "LOMC990101"
    assert svc.resolve(ScanInput.barcode("LOMC990101")).full_name == "Carla López"


def test_create_rejects_duplicate_barcode(employees_repo):
    svc = EmployeeService(employees_repo)
    with pytest.raises(DuplicateEmployee):
        svc.create(employee_id="NEW0001", full_name="X", department="Y", barcode="7501234567890")


def test_create_requires_name(employees_repo):
    with pytest.raises(ValidationError):
        EmployeeService(employees_repo).create(employee_id="NEW0002", full_name=" ", department="Y")


def test_update_barcode_must_stay_unique(employees_repo):
    svc = EmployeeService(employees_repo)
    with pytest.raises(DuplicateEmployee):
        svc.update("MOJV040815", barcode="7501234567890")

    # Re-assigning an employee's own barcode is allowed.
    assert svc.update("MOJV040815", barcode="MOJV040815").barcode == "MOJV040815"


def test_deactivate_blocks_scans(employees_repo):
    svc = EmployeeService(employees_repo)
    svc.deactivate("MOJV040815")

    with pytest.raises(InactiveEmployee):
        svc.resolve(ScanInput.employee_id("MOJV040815"))


def test_delete_unknown_employee(employees_repo):
    with pytest.raises(EmployeeNotFound):
        EmployeeService(employees_repo).delete("GHOST")


def test_create_links_existing_schedule(employees_repo, schedules_repo):
    svc = EmployeeService(employees_repo, schedules=ScheduleService(schedules_repo))
    created = svc.create(employee_id="LOMC990101", full_name="Carla López", department="Ventas", schedule_id="1")
    assert created.schedule_id == 1


@pytest.mark.parametrize("schedule_id", [7, "abc", 0])
def test_create_rejects_unknown_schedule(employees_repo, schedules_repo, schedule_id):
    svc = EmployeeService(employees_repo, schedules=ScheduleService(schedules_repo))
    with pytest.raises(ValidationError):
        svc.create(employee_id="LOMC990101", full_name="Carla López", department="Ventas", schedule_id=schedule_id)
    assert employees_repo.get_by_id("LOMC990101") is None


def test_update_assigns_and_clears_schedule(employees_repo, schedules_repo):
    svc = EmployeeService(employees_repo, schedules=ScheduleService(schedules_repo))

    assert svc.update("MOJV040815", schedule_id=1).schedule_id == 1
    # Other edits leave the link alone.
    assert svc.update("MOJV040815", department="Logística").schedule_id == 1
    assert svc.update("MOJV040815", schedule_id=None).schedule_id is None


def test_update_with_unknown_schedule_changes_nothing(employees_repo, schedules_repo):
    svc = EmployeeService(employees_repo, schedules=ScheduleService(schedules_repo))
    with pytest.raises(ValidationError):
        svc.update("MOJV040815", department="Logística", schedule_id=9)
    assert employees_repo.get_by_id("MOJV040815").department == "Operaciones"
