from __future__ import annotations

from enum import Enum


class AttendanceAction(str, Enum):
    """Kết quả của một lần quét: vào ca hoặc tan ca."""

    CHECK_IN = "check-in"
    CHECK_OUT = "check-out"


class LookupKind(str, Enum):
    """Cách định danh nhân viên trong một lần quét."""

    BARCODE = "barcode"
    ID = "id"


class DailyCyclePolicy(str, Enum):
    """Số chu kỳ vào/ra cho phép trong một ngày."""

    SINGLE = "single"
    UNLIMITED = "unlimited"
