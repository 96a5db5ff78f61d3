"""Shared test fixtures for all test modules."""

import socket
from collections.abc import Generator

import pytest

from influxmetrics.adapters.transport.in_memory import InMemoryTransport
from influxmetrics.core.emitter import MetricsEmitter
from influxmetrics.core.registry import clear_default


@pytest.fixture(autouse=True)
def _isolate_default_emitter() -> Generator[None]:
    """Make sure no test leaks a registered default emitter into the next."""
    clear_default()
    yield
    clear_default()


# === Transport Fixtures ===


@pytest.fixture
def transport() -> InMemoryTransport:
    """Provide an empty in-memory transport."""
    return InMemoryTransport()


@pytest.fixture
def failing_transport() -> InMemoryTransport:
    """Provide a transport whose every send raises TransportError."""
    return InMemoryTransport(fail_with="send buffer full")


# === Emitter Fixtures ===


@pytest.fixture
def emitter(transport: InMemoryTransport) -> MetricsEmitter:
    """Emitter without a namespace prefix over the in-memory transport."""
    return MetricsEmitter(transport)


@pytest.fixture
def prefixed_emitter(transport: InMemoryTransport) -> MetricsEmitter:
    """Emitter prefixing every measurement with ``myapp``."""
    return MetricsEmitter(transport, prefix="myapp")


# === UDP Fixtures ===


@pytest.fixture
def udp_receiver() -> Generator[socket.socket]:
    """Bound UDP socket on localhost standing in for an InfluxDB listener.

    The socket has a short timeout so a missing datagram fails the test
    instead of hanging it.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    sock.bind(("127.0.0.1", 0))
    sock.settimeout(2.0)
    try:
        yield sock
    finally:
        sock.close()
