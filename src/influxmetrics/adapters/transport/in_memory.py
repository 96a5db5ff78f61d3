"""In-memory transport adapter."""

import threading
from collections.abc import Sequence

from influxmetrics.core.errors import TransportError
from influxmetrics.core.models import MeasurementRecord


class InMemoryTransport:
    """In-memory implementation of TransportPort.

    Keeps every sent record in a list. Suitable for testing and dry runs
    where nothing should leave the process.

    Args:
        fail_with: When set, every send raises TransportError with this
            message instead of storing the records.
    """

    def __init__(self, fail_with: str | None = None) -> None:
        self._records: list[MeasurementRecord] = []
        self._lock = threading.Lock()
        self._fail_with = fail_with
        self.send_calls = 0
        self.closed = False

    def send(self, records: Sequence[MeasurementRecord]) -> None:
        """Store records, or raise TransportError if configured to fail."""
        with self._lock:
            self.send_calls += 1
            if self._fail_with is not None:
                raise TransportError(self._fail_with)
            self._records.extend(records)

    @property
    def records(self) -> list[MeasurementRecord]:
        """Snapshot of every record sent so far, in send order."""
        with self._lock:
            return list(self._records)

    def close(self) -> None:
        self.closed = True
