"""Best-effort metric emitters.

MetricsEmitter sends through a TransportPort; NullEmitter is the disabled
variant with the same interface. Neither ever raises from an emission call.
"""

import logging
import random
import time
from collections.abc import Generator, Sequence
from contextlib import contextmanager

from influxmetrics.core.errors import TransportError
from influxmetrics.core.models import FieldValue, MeasurementRecord, SendResult
from influxmetrics.core.ports import EmitterPort, TransportPort
from influxmetrics.core.sampling import should_send
from influxmetrics.core.timing import elapsed_microseconds

logger = logging.getLogger(__name__)

VALUE_FIELD = "value"
MICROSECONDS_FIELD = "microseconds"


class MetricsEmitter:
    """Emitter that samples, names and sends measurements over a transport.

    Example:
        ```python
        from influxmetrics import MetricsEmitter, InMemoryTransport

        emitter = MetricsEmitter(InMemoryTransport(), prefix="myapp")
        emitter.increment("requests")  # sends "myapp.requests value=1i"
        ```
    """

    def __init__(
        self,
        transport: TransportPort,
        prefix: str | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize the emitter.

        Args:
            transport: Transport the emitter owns for its whole lifetime.
            prefix: Namespace prepended as ``prefix.name``. None or "" disables
                prefixing. A trailing "." is accepted and not doubled.
            rng: Random source for sampling decisions. Defaults to the
                module-level generator.
        """
        self._transport = transport
        self._prefix = (prefix or "").rstrip(".")
        self._rng = rng

    @property
    def prefix(self) -> str | None:
        """Namespace prefix, or None when prefixing is off."""
        return self._prefix or None

    @property
    def transport(self) -> TransportPort:
        return self._transport

    def _measurement_name(self, name: str) -> str:
        if self._prefix:
            return f"{self._prefix}.{name}"
        return name

    def record(
        self,
        name: str,
        fields: Sequence[str],
        values: Sequence[FieldValue],
        sample_rate: float = 1.0,
    ) -> SendResult:
        """Emit one measurement, best-effort.

        Args:
            name: Measurement name before prefixing.
            fields: Field names, positionally paired with ``values``.
            values: Numeric field values.
            sample_rate: Probability of actually sending (default: always).

        Returns:
            SENT, SAMPLED_OUT, or FAILED when the record was invalid or the
            transport refused it. Failures are logged here and go no further.
        """
        if not should_send(sample_rate, self._rng):
            return SendResult.SAMPLED_OUT

        try:
            measurement = MeasurementRecord(
                name=self._measurement_name(name),
                fields=tuple(fields),
                values=tuple(values),
            )
        except (TypeError, ValueError) as exc:
            logger.error("Dropping invalid measurement %r: %s", name, exc)
            return SendResult.FAILED

        try:
            self._transport.send([measurement])
        except TransportError as exc:
            logger.error("Failed to write series to influxdb: %s", exc)
            return SendResult.FAILED
        except Exception:
            logger.exception("Failed to write series to influxdb")
            return SendResult.FAILED
        return SendResult.SENT

    def increment(
        self, name: str, amount: int = 1, sample_rate: float = 1.0
    ) -> SendResult:
        return self.record(name, [VALUE_FIELD], [amount], sample_rate)

    def decrement(
        self, name: str, amount: int = 1, sample_rate: float = 1.0
    ) -> SendResult:
        return self.record(name, [VALUE_FIELD], [-amount], sample_rate)

    def timing(self, name: str, start: float, sample_rate: float = 1.0) -> SendResult:
        """Emit the microseconds elapsed since ``start`` (a perf_counter instant)."""
        return self.timing_raw(name, elapsed_microseconds(start), sample_rate)

    def timing_raw(
        self, name: str, microseconds: int, sample_rate: float = 1.0
    ) -> SendResult:
        return self.record(name, [MICROSECONDS_FIELD], [microseconds], sample_rate)

    @contextmanager
    def timer(self, name: str, sample_rate: float = 1.0) -> Generator[None]:
        """Context manager that emits the duration of its block as a timing.

        The timing is emitted even when the block raises; the exception still
        propagates.
        """
        start = time.perf_counter()
        try:
            yield
        finally:
            self.timing(name, start, sample_rate)

    def close(self) -> None:
        """Close the owned transport."""
        self._transport.close()


class NullEmitter:
    """Disabled emitter: every call is a silent no-op returning DISABLED."""

    prefix = None

    def record(
        self,
        name: str,
        fields: Sequence[str],
        values: Sequence[FieldValue],
        sample_rate: float = 1.0,
    ) -> SendResult:
        return SendResult.DISABLED

    def increment(
        self, name: str, amount: int = 1, sample_rate: float = 1.0
    ) -> SendResult:
        return SendResult.DISABLED

    def decrement(
        self, name: str, amount: int = 1, sample_rate: float = 1.0
    ) -> SendResult:
        return SendResult.DISABLED

    def timing(self, name: str, start: float, sample_rate: float = 1.0) -> SendResult:
        return SendResult.DISABLED

    def timing_raw(
        self, name: str, microseconds: int, sample_rate: float = 1.0
    ) -> SendResult:
        return SendResult.DISABLED

    @contextmanager
    def timer(self, name: str, sample_rate: float = 1.0) -> Generator[None]:
        yield

    def close(self) -> None:
        pass


NULL_EMITTER = NullEmitter()


def record(
    emitter: EmitterPort | None,
    name: str,
    fields: Sequence[str],
    values: Sequence[FieldValue],
    sample_rate: float = 1.0,
) -> SendResult:
    """Emit through ``emitter``, treating None as a disabled emitter.

    Lets call sites emit unconditionally before any emitter is wired up.
    """
    if emitter is None:
        return SendResult.DISABLED
    return emitter.record(name, fields, values, sample_rate)
