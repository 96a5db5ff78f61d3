"""influxmetrics - best-effort metrics emission to InfluxDB over UDP."""

from influxmetrics.adapters.transport import (
    InfluxUDPTransport,
    InMemoryTransport,
    open_transport,
)
from influxmetrics.config import connect, connect_from_env
from influxmetrics.core.emitter import NULL_EMITTER, MetricsEmitter, NullEmitter, record
from influxmetrics.core.endpoint import parse_endpoint
from influxmetrics.core.errors import (
    ConfigError,
    DefaultEmitterAlreadySetError,
    InvalidSchemeError,
    MalformedURIError,
    TransportError,
)
from influxmetrics.core.models import (
    DEFAULT_UDP_PORT,
    Endpoint,
    MeasurementRecord,
    SendResult,
)
from influxmetrics.core.ports import EmitterPort, TransportPort
from influxmetrics.core.registry import clear_default, get_default, set_default
from influxmetrics.core.timing import elapsed_microseconds, elapsed_milliseconds

__all__ = [
    "DEFAULT_UDP_PORT",
    "NULL_EMITTER",
    "ConfigError",
    "DefaultEmitterAlreadySetError",
    "EmitterPort",
    "Endpoint",
    "InMemoryTransport",
    "InfluxUDPTransport",
    "InvalidSchemeError",
    "MalformedURIError",
    "MeasurementRecord",
    "MetricsEmitter",
    "NullEmitter",
    "SendResult",
    "TransportError",
    "TransportPort",
    "clear_default",
    "connect",
    "connect_from_env",
    "elapsed_microseconds",
    "elapsed_milliseconds",
    "get_default",
    "open_transport",
    "parse_endpoint",
    "record",
    "set_default",
]
