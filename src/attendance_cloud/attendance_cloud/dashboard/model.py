from __future__ import annotations

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class LiveLog:
    """One display row of the live attendance board."""

    id: str
    name: str
    status: str
    time: str
    class_name: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status,
            "time": self.time,
            "className": self.class_name,
        }


@dataclass(frozen=True)
class AttendanceStats:
    total: int = 0
    present: int = 0
    sick: int = 0
    permit: int = 0
    alpha: int = 0

    def to_dict(self) -> dict:
        return asdict(self)
