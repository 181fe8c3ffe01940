"""Export a school's attendance history to CSV.

Usage: python scripts/export_history.py SCHOOL_ID [START] [END]
Dates are YYYY-MM-DD; END defaults to today, START to a week before END.
"""

from __future__ import annotations

import csv
import importlib
import sys
from datetime import datetime, timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_cloud.attendance_cloud.attendance.controller import HISTORY_CSV_FIELDS
from src.attendance_cloud.attendance_cloud.common.datetime_utils import now_local, parse_iso_date
from src.attendance_cloud.attendance_cloud.container import build_container
from src.attendance_cloud.attendance_cloud.core.constants import DEFAULT_HISTORY_DAYS


def main(argv: list[str]) -> None:
    if not argv:
        raise SystemExit(__doc__)

    settings = importlib.import_module(get_settings_module())
    container = build_container(
        firestore_config=settings.FIRESTORE_CONFIG,
        master_key=settings.CHECKIN_MASTER_KEY,
        timezone=settings.TIMEZONE,
    )

    school_id = argv[0]
    end = parse_iso_date(argv[2]) if len(argv) > 2 else now_local(container.tz).date()
    start = parse_iso_date(argv[1]) if len(argv) > 1 else end - timedelta(days=DEFAULT_HISTORY_DAYS)

    records = container.history_service.fetch_history(school_id=school_id, start=start, end=end)
    rows = container.history_service.build_history_rows(records)

    out_dir = REPO_ROOT / "exports"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_{school_id}_{ts}.csv"

    with out_file.open("w", newline="", encoding="utf-8-sig") as f:
        writer = csv.DictWriter(f, fieldnames=HISTORY_CSV_FIELDS)
        writer.writeheader()
        writer.writerows(rows)

    print(f"OK: Exported {len(rows)} rows -> {out_file}")


if __name__ == "__main__":
    main(sys.argv[1:])
