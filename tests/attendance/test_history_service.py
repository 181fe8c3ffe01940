from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from src.attendance_cloud.attendance_cloud.attendance.model import StoredDocument
from src.attendance_cloud.attendance_cloud.attendance.service import AttendanceHistoryService
from src.attendance_cloud.attendance_cloud.common.datetime_utils import get_zone
from src.attendance_cloud.attendance_cloud.core.exceptions import InvalidArgumentError

JAKARTA = get_zone("Asia/Jakarta")


class FakeAttendanceRepo:
    def __init__(self, docs):
        self._docs = docs
        self.last_args = None

    def add(self, record):
        raise AssertionError("history must not write")

    def list_between(self, *, school_id, start, end, class_name=None):
        self.last_args = {"school_id": school_id, "start": start, "end": end, "class_name": class_name}
        return self._docs


def _docs():
    return [
        StoredDocument(
            id="a",
            data={
                "studentId": "S1",
                "name": "Budi",
                "className": "X-1",
                "gradeName": "X",
                "status": "PRESENT",
                "verifiedBy": "AzuraCloudShield",
                "timestamp": datetime(2026, 3, 2, 0, 15, tzinfo=timezone.utc),
            },
        ),
        StoredDocument(id="b", data={"studentId": "S2", "timestamp": datetime(2026, 3, 2, 3, 0, tzinfo=timezone.utc)}),
        StoredDocument(id="c", data={"studentId": "S3", "name": "No Time"}),
    ]


def test_history_maps_documents_and_skips_untimestamped():
    repo = FakeAttendanceRepo(_docs())
    svc = AttendanceHistoryService(repo, tz=JAKARTA)

    records = svc.fetch_history(school_id="SCH-01", start=date(2026, 3, 2), end=date(2026, 3, 2))

    assert [r.id for r in records] == ["b", "a"]
    b, a = records
    assert b.name == "Unknown"
    assert b.status == "PRESENT"
    assert a.timestamp.hour == 7  # 00:15 UTC in Jakarta
    assert a.class_name == "X-1"


def test_history_query_bounds_cover_whole_days():
    repo = FakeAttendanceRepo([])
    svc = AttendanceHistoryService(repo, tz=JAKARTA)

    svc.fetch_history(school_id="SCH-01", start=date(2026, 3, 1), end=date(2026, 3, 2))

    assert repo.last_args["start"] == datetime(2026, 3, 1, 0, 0, tzinfo=JAKARTA)
    assert repo.last_args["end"].date() == date(2026, 3, 2)
    assert repo.last_args["end"].hour == 23


@pytest.mark.parametrize("class_name, expected", [(None, None), ("", None), ("  ", None), ("Semua Kelas", None), ("X-1", "X-1")])
def test_class_filter_is_only_sent_for_a_real_class(class_name, expected):
    repo = FakeAttendanceRepo([])
    svc = AttendanceHistoryService(repo, tz=JAKARTA)

    svc.fetch_history(school_id="SCH-01", start=date(2026, 3, 1), end=date(2026, 3, 1), class_name=class_name)

    assert repo.last_args["class_name"] == expected


def test_history_requires_school_and_ordered_range():
    svc = AttendanceHistoryService(FakeAttendanceRepo([]), tz=JAKARTA)

    with pytest.raises(InvalidArgumentError):
        svc.fetch_history(school_id=" ", start=date(2026, 3, 1), end=date(2026, 3, 1))

    with pytest.raises(InvalidArgumentError):
        svc.fetch_history(school_id="SCH-01", start=date(2026, 3, 2), end=date(2026, 3, 1))


def test_history_rows_for_export():
    svc = AttendanceHistoryService(FakeAttendanceRepo(_docs()), tz=JAKARTA)
    records = svc.fetch_history(school_id="SCH-01", start=date(2026, 3, 2), end=date(2026, 3, 2))

    rows = svc.build_history_rows(records)

    assert rows[1] == {
        "id": "a",
        "date": "2026-03-02",
        "time": "07:15:00",
        "student_id": "S1",
        "name": "Budi",
        "class_name": "X-1",
        "grade_name": "X",
        "status": "PRESENT",
        "verified_by": "AzuraCloudShield",
    }
    assert rows[0]["verified_by"] == ""
