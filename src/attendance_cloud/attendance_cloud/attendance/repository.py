from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, StoredDocument


class AttendanceRepository(Protocol):
    def add(self, record: AttendanceRecord) -> str:
        """Append one record; the store stamps `timestamp`. Returns the new id."""

        raise NotImplementedError

    def list_between(
        self,
        *,
        school_id: str,
        start: datetime,
        end: datetime,
        class_name: Optional[str] = None,
    ) -> Sequence[StoredDocument]:
        raise NotImplementedError
