from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from firebase_admin import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from ..attendance.model import StoredDocument
from ..core.constants import ATTENDANCE_COLLECTION, FIELD_SCHOOL_ID, FIELD_TIMESTAMP
from ..database.firestore_base import to_stored_all
from .repository import DashboardRepository, ErrorCallback, SnapshotCallback, Subscription

logger = logging.getLogger(__name__)


class FirestoreDashboardRepository(DashboardRepository):
    def __init__(self, client, *, collection: str = ATTENDANCE_COLLECTION):
        self._client = client
        self._collection = collection

    def _today_query(self, school_id: str, start: datetime):
        return (
            self._client.collection(self._collection)
            .where(filter=FieldFilter(FIELD_SCHOOL_ID, "==", school_id))
            .where(filter=FieldFilter(FIELD_TIMESTAMP, ">=", start))
            .order_by(FIELD_TIMESTAMP, direction=firestore.Query.DESCENDING)
        )

    def list_since(self, *, school_id: str, start: datetime) -> Sequence[StoredDocument]:
        return to_stored_all(self._today_query(school_id, start).stream())

    def listen_since(
        self,
        *,
        school_id: str,
        start: datetime,
        on_update: SnapshotCallback,
        on_error: Optional[ErrorCallback] = None,
    ) -> Subscription:
        def on_snapshot(docs, changes, read_time):
            # Runs on the watch thread.
            try:
                on_update(to_stored_all(docs))
            except Exception as exc:
                logger.exception("Live dashboard callback failed, school=%s", school_id)
                if on_error is not None:
                    on_error(exc)

        return self._today_query(school_id, start).on_snapshot(on_snapshot)
