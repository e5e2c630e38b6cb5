from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import (
    DEFAULT_COMPANY_NAME,
    DEFAULT_COOLDOWN_SECONDS,
    DEFAULT_ENTRY_TOLERANCE_MINUTES,
    DEFAULT_STANDARD_SHIFT_HOURS,
    DEFAULT_TIMEZONE,
)
from ..core.enums import DailyCyclePolicy


@dataclass(frozen=True)
class SystemSettings:
    """Cấu hình nghiệp vụ dùng chung (một dòng duy nhất trong CSDL).

    ``entry_tolerance_minutes`` is stored for a late-arrival policy; the toggle
    engine itself does not read it.
    """

    company_name: str = DEFAULT_COMPANY_NAME
    timezone: str = DEFAULT_TIMEZONE
    cooldown_seconds: int = DEFAULT_COOLDOWN_SECONDS
    standard_shift_hours: float = DEFAULT_STANDARD_SHIFT_HOURS
    entry_tolerance_minutes: int = DEFAULT_ENTRY_TOLERANCE_MINUTES
    daily_cycle_policy: DailyCyclePolicy = DailyCyclePolicy.SINGLE
