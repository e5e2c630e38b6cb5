from __future__ import annotations

from datetime import datetime, timedelta
from decimal import ROUND_HALF_UP, Decimal

from ...core.constants import MS_PER_HOUR
from ...core.exceptions import InvalidInput
from .base import HoursCalculator

_CENTS = Decimal("0.01")


def round2(value) -> float:
    """Round half-up to two decimals (2.675 -> 2.68, unlike built-in ``round``)."""
    return float(Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))


def elapsed_ms(start: datetime, end: datetime) -> int:
    return (end - start) // timedelta(milliseconds=1)


class StandardHoursCalculator(HoursCalculator):
    """Standard rule: wall-clock (out - in) in hours; overtime is the excess over the shift."""

    def worked_hours(self, check_in: datetime, check_out: datetime) -> float:
        ms = elapsed_ms(check_in, check_out)
        if ms < 0:
            raise InvalidInput("Check-out time is earlier than check-in time")
        hours = (Decimal(ms) / Decimal(MS_PER_HOUR)).quantize(_CENTS, rounding=ROUND_HALF_UP)
        return float(hours)

    def overtime_hours(self, total_hours: float, standard_shift_hours: float) -> float:
        excess = Decimal(str(total_hours)) - Decimal(str(standard_shift_hours))
        return round2(max(excess, Decimal(0)))
