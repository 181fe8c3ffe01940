"""Submit demo check-ins through the validator (use against the Firestore emulator)."""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_cloud.attendance_cloud.container import build_container
from src.attendance_cloud.attendance_cloud.core.exceptions import DomainError

DEMO_SCHOOL = "DEMO-SCHOOL"
DEMO_CHECKINS = [
    {"studentId": "S001", "name": "Budi Santoso", "distance": 0.41231, "className": "X IPA 1", "grade": "X"},
    {"studentId": "S002", "name": "Siti Aminah", "distance": 0.38871, "className": "X IPA 1", "grade": "X"},
    {"studentId": "S003", "name": "Agus Pratama", "distance": 0.52001, "className": "XI IPS 2", "grade": "XI"},
    # Rejected: tampered distance
    {"studentId": "S004", "name": "Dewi Lestari", "distance": 0.45552, "className": "XI IPS 2", "grade": "XI"},
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(
        firestore_config=settings.FIRESTORE_CONFIG,
        master_key=settings.CHECKIN_MASTER_KEY,
        timezone=settings.TIMEZONE,
    )

    for item in DEMO_CHECKINS:
        payload = dict(item, isoKey=settings.CHECKIN_MASTER_KEY, schoolId=DEMO_SCHOOL)
        try:
            result = container.checkin_service.secure_check_in(payload)
            print(f"OK   {item['studentId']}: {result.message} ({result.record_id})")
        except DomainError as e:
            print(f"FAIL {item['studentId']}: [{e.code.value}] {e.message}")


if __name__ == "__main__":
    main()
