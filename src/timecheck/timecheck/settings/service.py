from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional

from ..common.datetime_utils import get_zone
from ..common.validators import require_non_empty, require_at_most, require_non_negative, require_positive
from ..core.constants import MAX_COOLDOWN_SECONDS, MAX_ENTRY_TOLERANCE_MINUTES, MAX_STANDARD_SHIFT_HOURS
from ..core.enums import DailyCyclePolicy
from ..core.exceptions import ValidationError
from .model import SystemSettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)

# API field name -> model attribute
_FIELDS = {
    "companyName": "company_name",
    "timezone": "timezone",
    "cooldownSeconds": "cooldown_seconds",
    "standardShiftHours": "standard_shift_hours",
    "entryToleranceMinutes": "entry_tolerance_minutes",
    "dailyCyclePolicy": "daily_cycle_policy",
}


class SettingsService:
    def __init__(self, settings: SettingsRepository, *, defaults: Optional[SystemSettings] = None):
        self._settings = settings
        self._defaults = defaults or SystemSettings()

    def current(self) -> SystemSettings:
        """Settings as stored, or the built-in defaults if the row is missing."""
        return self._settings.get() or self._defaults

    def update(self, changes: Mapping[str, Any]) -> SystemSettings:
        current = self.current()
        values: dict[str, Any] = {}

        for key, value in changes.items():
            attr = _FIELDS.get(key, key if key in _FIELDS.values() else None)
            if attr is None:
                raise ValidationError(f"Unknown setting: {key}")
            values[attr] = value

        if "company_name" in values:
            values["company_name"] = require_non_empty(values["company_name"], "Company name")
        if "timezone" in values:
            values["timezone"] = require_non_empty(values["timezone"], "Timezone")
            get_zone(values["timezone"])
        if "cooldown_seconds" in values:
            values["cooldown_seconds"] = int(
                require_at_most(
                    require_non_negative(values["cooldown_seconds"], "Cooldown seconds"),
                    "Cooldown seconds",
                    MAX_COOLDOWN_SECONDS,
                )
            )
        if "standard_shift_hours" in values:
            values["standard_shift_hours"] = require_at_most(
                require_positive(values["standard_shift_hours"], "Standard shift hours"),
                "Standard shift hours",
                MAX_STANDARD_SHIFT_HOURS,
            )
        if "entry_tolerance_minutes" in values:
            values["entry_tolerance_minutes"] = int(
                require_at_most(
                    require_non_negative(values["entry_tolerance_minutes"], "Entry tolerance minutes"),
                    "Entry tolerance minutes",
                    MAX_ENTRY_TOLERANCE_MINUTES,
                )
            )
        if "daily_cycle_policy" in values:
            try:
                values["daily_cycle_policy"] = DailyCyclePolicy(values["daily_cycle_policy"])
            except ValueError as exc:
                raise ValidationError(f"Unknown daily cycle policy: {values['daily_cycle_policy']!r}") from exc

        updated = self._settings.save(replace(current, **values))
        logger.info("System settings updated: %s", ", ".join(sorted(values)) or "no changes")
        return updated

    @staticmethod
    def to_dict(settings: SystemSettings) -> dict:
        return {
            "companyName": settings.company_name,
            "timezone": settings.timezone,
            "cooldownSeconds": settings.cooldown_seconds,
            "standardShiftHours": settings.standard_shift_hours,
            "entryToleranceMinutes": settings.entry_tolerance_minutes,
            "dailyCyclePolicy": settings.daily_cycle_policy.value,
        }
