from __future__ import annotations

from typing import Any, Iterable, List

from ..attendance.model import StoredDocument


def to_stored(snapshot: Any) -> StoredDocument:
    data = snapshot.to_dict() if snapshot.exists else None
    return StoredDocument(id=snapshot.id, data=dict(data or {}))


def to_stored_all(snapshots: Iterable[Any]) -> List[StoredDocument]:
    return [to_stored(s) for s in snapshots]
