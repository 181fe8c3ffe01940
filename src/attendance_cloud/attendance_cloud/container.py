from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Any

from .attendance.firestore_attendance_repository import FirestoreAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceHistoryService, CheckInService
from .common.datetime_utils import get_zone
from .core.constants import DEFAULT_MASTER_KEY, DEFAULT_TIMEZONE
from .dashboard.firestore_dashboard_repository import FirestoreDashboardRepository
from .dashboard.repository import DashboardRepository
from .dashboard.service import DashboardService
from .database.firestore_client import FirestoreConfig, create_firestore_client


@dataclass(frozen=True)
class Container:
    client: Any
    tz: tzinfo

    attendance_repo: AttendanceRepository
    dashboard_repo: DashboardRepository

    checkin_service: CheckInService
    history_service: AttendanceHistoryService
    dashboard_service: DashboardService


def wire_container(
    *,
    client: Any,
    attendance_repo: AttendanceRepository,
    dashboard_repo: DashboardRepository,
    master_key: str = DEFAULT_MASTER_KEY,
    timezone: str = DEFAULT_TIMEZONE,
) -> Container:
    tz = get_zone(timezone)
    return Container(
        client=client,
        tz=tz,
        attendance_repo=attendance_repo,
        dashboard_repo=dashboard_repo,
        checkin_service=CheckInService(attendance_repo, master_key=master_key),
        history_service=AttendanceHistoryService(attendance_repo, tz=tz),
        dashboard_service=DashboardService(dashboard_repo, tz=tz),
    )


def build_container(
    *,
    firestore_config: dict,
    master_key: str = DEFAULT_MASTER_KEY,
    timezone: str = DEFAULT_TIMEZONE,
) -> Container:
    config = FirestoreConfig(
        project_id=firestore_config.get("project_id") or None,
        credentials_path=firestore_config.get("credentials_path") or None,
        emulator_host=firestore_config.get("emulator_host") or None,
        app_name=str(firestore_config.get("app_name", "attendance-cloud")),
    )
    client = create_firestore_client(config)

    return wire_container(
        client=client,
        attendance_repo=FirestoreAttendanceRepository(client),
        dashboard_repo=FirestoreDashboardRepository(client),
        master_key=master_key,
        timezone=timezone,
    )
