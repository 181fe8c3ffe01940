from __future__ import annotations

import logging
from datetime import date, tzinfo
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import as_local, day_bounds
from ..common.validators import require_non_empty
from ..core.constants import (
    ALL_CLASSES,
    FIELD_CLASS_NAME,
    FIELD_GRADE_NAME,
    FIELD_NAME,
    FIELD_STATUS,
    FIELD_STUDENT_ID,
    FIELD_TIMESTAMP,
    FIELD_VERIFIED_BY,
    UNKNOWN_NAME,
)
from ..core.enums import AttendanceStatus
from ..core.exceptions import InternalError, InvalidArgumentError, PermissionDeniedError
from .integrity import format_distance, has_valid_signature, parse_distance
from .model import AttendanceRecord, CheckInRequest, CheckInResult, HistoryRecord, StoredDocument
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

SUCCESS = "SUCCESS"


class CheckInService:
    """Validates check-in submissions before they reach the attendance store.

    Gate 1 compares the pre-shared key; gate 2 runs the distance integrity
    check. Nothing touches the store until both have passed, and a single
    `add` is the only write.
    """

    def __init__(self, attendance: AttendanceRepository, *, master_key: str):
        self._attendance = attendance
        self._master_key = master_key

    def secure_check_in(self, payload: Mapping[str, Any]) -> CheckInResult:
        request = CheckInRequest.from_payload(payload)

        if request.iso_key != self._master_key:
            logger.error("[SECURITY] Unrecognised client key, studentId=%s", request.student_id)
            raise PermissionDeniedError("Access denied: unrecognised or modified application")

        formatted = format_distance(request.distance)
        if not has_valid_signature(formatted):
            logger.error("[SECURITY] Distance tampering detected: %s", formatted)
            raise InvalidArgumentError("Access denied: biometric integrity check failed")

        record = AttendanceRecord(
            student_id=require_non_empty(request.student_id, "studentId"),
            name=require_non_empty(request.name, "name"),
            class_name=request.class_name,
            grade_name=request.grade,
            distance_score=parse_distance(request.distance),
            school_id=request.school_id,
        )

        try:
            record_id = self._attendance.add(record)
        except Exception as exc:
            logger.exception("Attendance write failed for studentId=%s", record.student_id)
            raise InternalError("Server failed to record attendance") from exc

        logger.info("Check-in recorded id=%s studentId=%s", record_id, record.student_id)
        return CheckInResult(
            status=SUCCESS,
            message=f"Attendance for {record.name} verified and recorded by the server",
            record_id=record_id,
        )


class AttendanceHistoryService:
    def __init__(self, attendance: AttendanceRepository, *, tz: tzinfo):
        self._attendance = attendance
        self._tz = tz

    def fetch_history(
        self,
        *,
        school_id: str,
        start: date,
        end: date,
        class_name: Optional[str] = None,
    ) -> list[HistoryRecord]:
        school_id = require_non_empty(school_id, "schoolId")
        if end < start:
            raise InvalidArgumentError("end date must not be before start date")

        start_dt, end_dt = day_bounds(start, end, self._tz)
        docs = self._attendance.list_between(
            school_id=school_id,
            start=start_dt,
            end=end_dt,
            class_name=self._class_filter(class_name),
        )

        records = [r for r in (self._to_history(d) for d in docs) if r is not None]
        records.sort(key=lambda r: r.timestamp, reverse=True)
        return records

    def build_history_rows(self, records: Sequence[HistoryRecord]) -> list[dict]:
        return [
            {
                "id": r.id,
                "date": r.timestamp.strftime("%Y-%m-%d"),
                "time": r.timestamp.strftime("%H:%M:%S"),
                "student_id": r.student_id,
                "name": r.name,
                "class_name": r.class_name,
                "grade_name": r.grade_name,
                "status": r.status,
                "verified_by": r.verified_by or "",
            }
            for r in records
        ]

    @staticmethod
    def _class_filter(class_name: Optional[str]) -> Optional[str]:
        if not class_name or not class_name.strip() or class_name == ALL_CLASSES:
            return None
        return class_name.strip()

    def _to_history(self, doc: StoredDocument) -> Optional[HistoryRecord]:
        # Records without a timestamp cannot be placed on a timeline.
        ts = as_local(doc.data.get(FIELD_TIMESTAMP), self._tz)
        if ts is None:
            return None

        return HistoryRecord(
            id=doc.id,
            student_id=str(doc.data.get(FIELD_STUDENT_ID) or ""),
            name=str(doc.data.get(FIELD_NAME) or UNKNOWN_NAME),
            timestamp=ts,
            status=str(doc.data.get(FIELD_STATUS) or AttendanceStatus.PRESENT.value),
            class_name=str(doc.data.get(FIELD_CLASS_NAME) or ""),
            grade_name=str(doc.data.get(FIELD_GRADE_NAME) or ""),
            verified_by=doc.data.get(FIELD_VERIFIED_BY),
        )
