"""Transport adapters implementing TransportPort."""

from influxmetrics.adapters.transport.in_memory import InMemoryTransport
from influxmetrics.adapters.transport.udp import InfluxUDPTransport, open_transport

__all__ = [
    "InMemoryTransport",
    "InfluxUDPTransport",
    "open_transport",
]
