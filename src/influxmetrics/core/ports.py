"""Port interfaces for transports and emitters.

These protocols define the contracts adapters must implement. The emitter
depends only on TransportPort, never on a concrete transport.
"""

from collections.abc import Sequence
from contextlib import AbstractContextManager
from typing import Protocol, runtime_checkable

from influxmetrics.core.models import FieldValue, MeasurementRecord, SendResult


@runtime_checkable
class TransportPort(Protocol):
    """Port for fire-and-forget delivery of measurement records.

    Implementations must tolerate concurrent ``send`` calls without external
    locking. Examples: InfluxUDPTransport, InMemoryTransport.
    """

    def send(self, records: Sequence[MeasurementRecord]) -> None:
        """Send records without waiting for acknowledgement.

        Raises:
            TransportError: The records could not be handed to the network.
        """
        ...

    def close(self) -> None:
        """Release the underlying socket."""
        ...


@runtime_checkable
class EmitterPort(Protocol):
    """Port for the metric emission capability.

    Every method is best-effort and returns a SendResult instead of raising.
    Examples: MetricsEmitter, NullEmitter.
    """

    def record(
        self,
        name: str,
        fields: Sequence[str],
        values: Sequence[FieldValue],
        sample_rate: float = 1.0,
    ) -> SendResult:
        """Emit one measurement."""
        ...

    def increment(
        self, name: str, amount: int = 1, sample_rate: float = 1.0
    ) -> SendResult:
        """Emit ``value = +amount``."""
        ...

    def decrement(
        self, name: str, amount: int = 1, sample_rate: float = 1.0
    ) -> SendResult:
        """Emit ``value = -amount``."""
        ...

    def timing(self, name: str, start: float, sample_rate: float = 1.0) -> SendResult:
        """Emit microseconds elapsed since a ``time.perf_counter()`` instant."""
        ...

    def timing_raw(
        self, name: str, microseconds: int, sample_rate: float = 1.0
    ) -> SendResult:
        """Emit a precomputed duration in microseconds."""
        ...

    def timer(
        self, name: str, sample_rate: float = 1.0
    ) -> AbstractContextManager[None]:
        """Time the enclosed block and emit it as a timing."""
        ...

    def close(self) -> None:
        """Release the transport."""
        ...
