from datetime import datetime

import pytest

from src.timecheck.timecheck.attendance.calculator.standard_calculator import StandardHoursCalculator, round2
from src.timecheck.timecheck.core.exceptions import InvalidInput


def test_worked_hours_rounds_half_up_to_two_decimals():
    calc = StandardHoursCalculator()
    # 1h 0m 18s = 1.005h exactly -> 1.01 (half-up), not banker's 1.0
    assert calc.worked_hours(datetime(2026, 1, 5, 8, 0, 0), datetime(2026, 1, 5, 9, 0, 18)) == 1.01


def test_worked_hours_uses_millisecond_precision():
    calc = StandardHoursCalculator()
    start = datetime(2026, 1, 5, 8, 0, 0)
    end = datetime(2026, 1, 5, 16, 17, 59, 999000)
    assert calc.worked_hours(start, end) == 8.30


def test_worked_hours_rejects_negative_duration():
    calc = StandardHoursCalculator()
    with pytest.raises(InvalidInput):
        calc.worked_hours(datetime(2026, 1, 5, 9, 0), datetime(2026, 1, 5, 8, 59))


def test_overtime_is_never_negative():
    calc = StandardHoursCalculator()
    assert calc.overtime_hours(7.75, 8) == 0
    assert calc.overtime_hours(8.0, 8) == 0
    assert calc.overtime_hours(9.33, 8) == 1.33


def test_round2_half_up():
    assert round2(2.675) == 2.68
    assert round2(0.125) == 0.13
