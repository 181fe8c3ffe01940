from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance states stored in the `status` field."""

    PRESENT = "PRESENT"
    LATE = "LATE"
    SICK = "SICK"
    PERMIT = "PERMIT"
    ALPHA = "ALPHA"


class ErrorCode(str, Enum):
    """Error kinds surfaced by the check-in callable."""

    PERMISSION_DENIED = "permission-denied"
    INVALID_ARGUMENT = "invalid-argument"
    INTERNAL = "internal"

    @property
    def canonical_name(self) -> str:
        # Callable protocol spells status names as upper snake case.
        return self.value.replace("-", "_").upper()

    @property
    def http_status(self) -> int:
        return {
            ErrorCode.PERMISSION_DENIED: 403,
            ErrorCode.INVALID_ARGUMENT: 400,
            ErrorCode.INTERNAL: 500,
        }[self]
