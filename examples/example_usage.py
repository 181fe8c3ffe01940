"""Example: drive the service layer directly (no Flask).

Controllers stay thin; validation and mapping live in the services.
"""

import importlib

from config import get_settings_module

from src.attendance_cloud.attendance_cloud.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        firestore_config=settings.FIRESTORE_CONFIG,
        master_key=settings.CHECKIN_MASTER_KEY,
        timezone=settings.TIMEZONE,
    )

    result = container.checkin_service.secure_check_in(
        {
            "isoKey": settings.CHECKIN_MASTER_KEY,
            "studentId": "S1",
            "name": "Budi",
            "distance": 12.34561,
            "schoolId": "DEMO-SCHOOL",
        }
    )
    print(result.to_dict())

    logs, stats = container.dashboard_service.snapshot_today("DEMO-SCHOOL")
    for log in logs:
        print(log.to_dict())
    print(stats.to_dict())


if __name__ == "__main__":
    main()
