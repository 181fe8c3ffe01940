from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.validators import optional_id, optional_text
from ..core.constants import (
    DEFAULT_CLASS_NAME,
    DEFAULT_GRADE,
    FIELD_CLASS_NAME,
    FIELD_DISTANCE_SCORE,
    FIELD_GRADE_NAME,
    FIELD_NAME,
    FIELD_SCHOOL_ID,
    FIELD_STATUS,
    FIELD_STUDENT_ID,
    FIELD_TIMESTAMP,
    FIELD_VERIFIED_BY,
    VERIFIED_BY,
)
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class CheckInRequest:
    """Payload sent by the mobile client to `secureCheckIn`.

    Fields are kept raw here: the service decides what is valid, in order.
    """

    iso_key: Any
    student_id: Any
    name: Any
    distance: Any
    class_name: str = DEFAULT_CLASS_NAME
    grade: str = DEFAULT_GRADE
    school_id: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CheckInRequest":
        return cls(
            iso_key=payload.get("isoKey"),
            student_id=payload.get("studentId"),
            name=payload.get("name"),
            distance=payload.get("distance"),
            class_name=optional_text(payload.get("className"), DEFAULT_CLASS_NAME),
            grade=optional_text(payload.get("grade"), DEFAULT_GRADE),
            school_id=optional_id(payload.get("schoolId")),
        )


@dataclass(frozen=True)
class AttendanceRecord:
    """Write model for one accepted check-in.

    `timestamp` is never set here; the store assigns it at write time.
    """

    student_id: str
    name: str
    class_name: str
    grade_name: str
    distance_score: float
    status: AttendanceStatus = AttendanceStatus.PRESENT
    verified_by: str = VERIFIED_BY
    school_id: Optional[str] = None

    def to_document(self, timestamp: Any) -> dict[str, Any]:
        doc: dict[str, Any] = {
            FIELD_STUDENT_ID: self.student_id,
            FIELD_NAME: self.name,
            FIELD_CLASS_NAME: self.class_name,
            FIELD_GRADE_NAME: self.grade_name,
            FIELD_TIMESTAMP: timestamp,
            FIELD_STATUS: self.status.value,
            FIELD_DISTANCE_SCORE: self.distance_score,
            FIELD_VERIFIED_BY: self.verified_by,
        }
        if self.school_id:
            doc[FIELD_SCHOOL_ID] = self.school_id
        return doc


@dataclass(frozen=True)
class CheckInResult:
    status: str
    message: str
    record_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"status": self.status, "message": self.message}
        if self.record_id:
            out["recordId"] = self.record_id
        return out


@dataclass(frozen=True)
class StoredDocument:
    """Raw document as read back from the store."""

    id: str
    data: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HistoryRecord:
    """Read-model for history queries and exports."""

    id: str
    student_id: str
    name: str
    timestamp: datetime
    status: str
    class_name: str
    grade_name: str
    verified_by: Optional[str] = None
