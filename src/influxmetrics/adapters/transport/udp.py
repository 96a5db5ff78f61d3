"""InfluxDB UDP transport adapter.

Wraps ``influxdb.InfluxDBClient`` in UDP mode. Each send is one datagram of
line protocol with no timestamp, so the server stamps points on receipt.
There is no acknowledgement, retry or buffering.
"""

import logging
from collections.abc import Sequence

from influxdb import InfluxDBClient

from influxmetrics.core.errors import TransportError
from influxmetrics.core.models import Endpoint, MeasurementRecord

logger = logging.getLogger(__name__)


class InfluxUDPTransport:
    """TransportPort implementation sending line protocol over UDP.

    Example:
        ```python
        from influxmetrics import open_transport, parse_endpoint

        transport = open_transport(parse_endpoint("influxdb://localhost:8089/mydb"))
        ```
    """

    def __init__(self, client: InfluxDBClient, endpoint: Endpoint) -> None:
        self._client = client
        self._endpoint = endpoint

    @property
    def endpoint(self) -> Endpoint:
        return self._endpoint

    def send(self, records: Sequence[MeasurementRecord]) -> None:
        """Send records as a single UDP datagram.

        Raises:
            TransportError: Encoding failed or the socket refused the datagram.
        """
        packet = {"points": [record.as_point() for record in records]}
        try:
            self._client.send_packet(packet, protocol="json")
        except (OSError, ValueError, TypeError) as exc:
            raise TransportError(str(exc) or type(exc).__name__) from exc

    def close(self) -> None:
        """Close the client session and its UDP socket."""
        self._client.close()
        udp_socket = getattr(self._client, "udp_socket", None)
        if udp_socket is not None:
            udp_socket.close()


def open_transport(endpoint: Endpoint) -> InfluxUDPTransport:
    """Open a UDP transport to the endpoint.

    UDP mode is always used; metric emission must never block or retry.

    Args:
        endpoint: Parsed connection descriptor.

    Returns:
        Transport bound to the endpoint's host, UDP port and database.

    Raises:
        TransportError: The client could not be constructed.
    """
    try:
        client = InfluxDBClient(
            host=endpoint.hostname,
            username=endpoint.username,
            password=endpoint.password,
            database=endpoint.database or None,
            use_udp=True,
            udp_port=endpoint.port,
        )
    except (OSError, ValueError) as exc:
        raise TransportError(f"Cannot open InfluxDB transport: {exc}") from exc

    logger.info("Sending stats to InfluxDB at %s (%s)", endpoint.host, endpoint.database)
    return InfluxUDPTransport(client, endpoint)
