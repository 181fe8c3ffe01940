from __future__ import annotations

import logging
from datetime import datetime, tzinfo
from typing import Callable, Optional, Sequence

from ..attendance.model import StoredDocument
from ..common.datetime_utils import now_local, start_of_day
from ..common.validators import require_non_empty
from .mapping import compute_stats, to_live_log
from .model import AttendanceStats, LiveLog
from .repository import DashboardRepository, ErrorCallback, Subscription

logger = logging.getLogger(__name__)

LiveUpdate = Callable[[list[LiveLog], AttendanceStats], None]


class DashboardService:
    """Today's attendance for one school, as a snapshot or a live feed."""

    def __init__(
        self,
        dashboard: DashboardRepository,
        *,
        tz: tzinfo,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._dashboard = dashboard
        self._tz = tz
        self._clock = clock or (lambda: now_local(tz))

    def start_of_today(self) -> datetime:
        return start_of_day(self._clock().astimezone(self._tz))

    def to_logs(self, docs: Sequence[StoredDocument]) -> list[LiveLog]:
        return [to_live_log(d.id, d.data, self._tz) for d in docs]

    def snapshot_today(self, school_id: str) -> tuple[list[LiveLog], AttendanceStats]:
        school_id = require_non_empty(school_id, "schoolId")
        docs = self._dashboard.list_since(school_id=school_id, start=self.start_of_today())
        logs = self.to_logs(docs)
        return logs, compute_stats(logs)

    def listen_to_live_today(
        self,
        school_id: str,
        on_update: LiveUpdate,
        on_error: Optional[ErrorCallback] = None,
    ) -> Optional[Subscription]:
        """Subscribe to today's logs; returns None when no school is given."""
        if not school_id or not school_id.strip():
            return None

        school_id = school_id.strip()
        logger.debug("Starting live monitor for school=%s", school_id)

        def handle(docs: Sequence[StoredDocument]) -> None:
            logs = self.to_logs(docs)
            on_update(logs, compute_stats(logs))

        return self._dashboard.listen_since(
            school_id=school_id,
            start=self.start_of_today(),
            on_update=handle,
            on_error=on_error,
        )
