from __future__ import annotations

from datetime import tzinfo
from typing import Any, Mapping, Sequence

from ..common.datetime_utils import as_local
from ..core.constants import (
    DEFAULT_LIVE_STATUS,
    FIELD_CLASS_NAME,
    FIELD_NAME,
    FIELD_STATUS,
    FIELD_TIMESTAMP,
    MISSING_CLASS,
    MISSING_TIME,
    TIME_FORMAT,
    UNKNOWN_NAME,
)
from .model import AttendanceStats, LiveLog

_PRESENT = {"PRESENT", "LATE"}
_SICK = {"SAKIT", "SICK"}
_PERMIT = {"IZIN", "PERMIT"}


def _text(data: Mapping[str, Any], key: str, default: str) -> str:
    # Non-string values read the same as a missing field.
    value = data.get(key)
    return value if isinstance(value, str) else default


def to_live_log(doc_id: str, data: Mapping[str, Any], tz: tzinfo) -> LiveLog:
    ts = as_local(data.get(FIELD_TIMESTAMP), tz)
    return LiveLog(
        id=doc_id,
        name=_text(data, FIELD_NAME, UNKNOWN_NAME),
        status=_text(data, FIELD_STATUS, DEFAULT_LIVE_STATUS).upper(),
        time=ts.strftime(TIME_FORMAT) if ts else MISSING_TIME,
        class_name=_text(data, FIELD_CLASS_NAME, MISSING_CLASS),
    )


def compute_stats(logs: Sequence[LiveLog]) -> AttendanceStats:
    present = sick = permit = alpha = 0
    for log in logs:
        if log.status in _PRESENT:
            present += 1
        elif log.status in _SICK:
            sick += 1
        elif log.status in _PERMIT:
            permit += 1
        else:
            alpha += 1

    return AttendanceStats(total=len(logs), present=present, sick=sick, permit=permit, alpha=alpha)
