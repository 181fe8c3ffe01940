from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from firebase_admin import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from ..core.constants import ATTENDANCE_COLLECTION, FIELD_CLASS_NAME, FIELD_SCHOOL_ID, FIELD_TIMESTAMP
from ..database.firestore_base import to_stored_all
from .model import AttendanceRecord, StoredDocument
from .repository import AttendanceRepository


class FirestoreAttendanceRepository(AttendanceRepository):
    def __init__(self, client, *, collection: str = ATTENDANCE_COLLECTION):
        self._client = client
        self._collection = collection

    def _ref(self):
        return self._client.collection(self._collection)

    def add(self, record: AttendanceRecord) -> str:
        _, doc_ref = self._ref().add(record.to_document(firestore.SERVER_TIMESTAMP))
        return doc_ref.id

    def list_between(
        self,
        *,
        school_id: str,
        start: datetime,
        end: datetime,
        class_name: Optional[str] = None,
    ) -> Sequence[StoredDocument]:
        query = (
            self._ref()
            .where(filter=FieldFilter(FIELD_SCHOOL_ID, "==", school_id))
            .where(filter=FieldFilter(FIELD_TIMESTAMP, ">=", start))
            .where(filter=FieldFilter(FIELD_TIMESTAMP, "<=", end))
        )
        if class_name:
            query = query.where(filter=FieldFilter(FIELD_CLASS_NAME, "==", class_name))
        return to_stored_all(query.stream())
