from __future__ import annotations

import logging
from typing import Optional

from ..attendance.formatter import format_toggle_result
from ..attendance.service import AttendanceService
from ..core.exceptions import CooldownActive, DomainError
from ..employees.model import ScanInput

logger = logging.getLogger(__name__)


class KioskScanHandler:
    """``on_scan`` callback for a ScanCapture: registers the code as a barcode scan.

    Business rejections become a ``{success: False}`` payload for the screen;
    storage failures propagate to whoever runs the capture loop.
    """

    def __init__(self, attendance_service: AttendanceService):
        self._attendance = attendance_service
        self.last_result: Optional[dict] = None

    def __call__(self, code: str) -> dict:
        try:
            result = format_toggle_result(self._attendance.register_scan(ScanInput.barcode(code)))
        except DomainError as e:
            result = {"success": False, "message": str(e)}
            if isinstance(e, CooldownActive) and e.remaining_seconds is not None:
                result["remainingSeconds"] = e.remaining_seconds
            logger.info("Kiosk scan %r rejected: %s", code, e)
        self.last_result = result
        return result
