from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional, Protocol, Sequence

from ..attendance.model import StoredDocument

SnapshotCallback = Callable[[Sequence[StoredDocument]], None]
ErrorCallback = Callable[[Exception], None]


class Subscription(Protocol):
    def unsubscribe(self) -> None:
        raise NotImplementedError


class DashboardRepository(Protocol):
    def list_since(self, *, school_id: str, start: datetime) -> Sequence[StoredDocument]:
        """Documents of one school stamped at or after `start`, newest first."""

        raise NotImplementedError

    def listen_since(
        self,
        *,
        school_id: str,
        start: datetime,
        on_update: SnapshotCallback,
        on_error: Optional[ErrorCallback] = None,
    ) -> Subscription:
        """Register a live query; `on_update` receives the full visible set on every change.

        When handling a change raises, the exception goes to `on_error`; the watch stays open.
        """

        raise NotImplementedError
