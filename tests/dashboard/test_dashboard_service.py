from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.attendance_cloud.attendance_cloud.attendance.model import StoredDocument
from src.attendance_cloud.attendance_cloud.common.datetime_utils import get_zone
from src.attendance_cloud.attendance_cloud.core.exceptions import InvalidArgumentError
from src.attendance_cloud.attendance_cloud.dashboard.service import DashboardService

JAKARTA = get_zone("Asia/Jakarta")


class FakeSubscription:
    def __init__(self):
        self.active = True

    def unsubscribe(self):
        self.active = False


class InMemoryDashboard:
    def __init__(self, docs):
        self.docs = docs
        self.queries = []
        self.listeners = []
        self.error_handlers = []

    def list_since(self, *, school_id, start):
        self.queries.append((school_id, start))
        return self.docs

    def listen_since(self, *, school_id, start, on_update, on_error=None):
        self.queries.append((school_id, start))
        sub = FakeSubscription()
        self.listeners.append(on_update)
        self.error_handlers.append(on_error)
        on_update(self.docs)
        return sub

    def push(self, docs):
        self.docs = docs
        for cb in self.listeners:
            cb(docs)


def _clock():
    # 2026-03-02 01:30 in Jakarta
    return datetime(2026, 3, 1, 18, 30, tzinfo=timezone.utc)


def test_start_of_today_is_local_midnight():
    svc = DashboardService(InMemoryDashboard([]), tz=JAKARTA, clock=_clock)

    start = svc.start_of_today()

    assert start == datetime(2026, 3, 2, 0, 0, tzinfo=JAKARTA)


def test_snapshot_today_maps_logs_and_stats():
    docs = [
        StoredDocument(id="1", data={"name": "Budi", "status": "PRESENT", "timestamp": _clock()}),
        StoredDocument(id="2", data={"name": "Sari"}),
    ]
    repo = InMemoryDashboard(docs)
    svc = DashboardService(repo, tz=JAKARTA, clock=_clock)

    logs, stats = svc.snapshot_today(" SCH-01 ")

    assert repo.queries == [("SCH-01", datetime(2026, 3, 2, 0, 0, tzinfo=JAKARTA))]
    assert [log.time for log in logs] == ["01:30", "--:--"]
    assert logs[1].status == "ALPHA"
    assert stats.total == 2 and stats.present == 1 and stats.alpha == 1


def test_snapshot_requires_school():
    svc = DashboardService(InMemoryDashboard([]), tz=JAKARTA, clock=_clock)

    with pytest.raises(InvalidArgumentError):
        svc.snapshot_today("")


def test_live_updates_replace_the_full_set():
    repo = InMemoryDashboard([StoredDocument(id="1", data={"name": "Budi", "status": "PRESENT"})])
    svc = DashboardService(repo, tz=JAKARTA, clock=_clock)
    received = []

    sub = svc.listen_to_live_today("SCH-01", lambda logs, stats: received.append((logs, stats)))

    repo.push(
        [
            StoredDocument(id="2", data={"name": "Sari", "status": "SAKIT"}),
            StoredDocument(id="1", data={"name": "Budi", "status": "PRESENT"}),
        ]
    )

    assert sub is not None
    assert len(received) == 2
    assert [log.id for log in received[0][0]] == ["1"]
    assert [log.id for log in received[1][0]] == ["2", "1"]
    assert received[1][1].sick == 1


def test_live_without_school_does_not_subscribe():
    repo = InMemoryDashboard([])
    svc = DashboardService(repo, tz=JAKARTA, clock=_clock)

    assert svc.listen_to_live_today("  ", lambda logs, stats: None) is None
    assert repo.queries == []


def test_live_error_handler_is_handed_to_the_repository():
    repo = InMemoryDashboard([])
    svc = DashboardService(repo, tz=JAKARTA, clock=_clock)
    errors = []

    svc.listen_to_live_today("SCH-01", lambda logs, stats: None, errors.append)
    repo.error_handlers[0](RuntimeError("boom"))

    assert [str(e) for e in errors] == ["boom"]
