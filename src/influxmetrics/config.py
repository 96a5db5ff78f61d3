"""Emitter construction from a URL or from the environment."""

import logging
import os
import random

from influxmetrics.adapters.transport.udp import open_transport
from influxmetrics.core.emitter import NULL_EMITTER, MetricsEmitter
from influxmetrics.core.endpoint import parse_endpoint
from influxmetrics.core.ports import EmitterPort

logger = logging.getLogger(__name__)

URL_ENV_VAR = "INFLUXDB_URL"
DISABLED_ENV_VAR = "METRICS_DISABLED"

_TRUTHY = {"1", "true", "yes", "on"}


def connect(
    url: str,
    use_prefix: bool = True,
    rng: random.Random | None = None,
) -> MetricsEmitter:
    """Build an emitter sending to the InfluxDB endpoint described by ``url``.

    Args:
        url: ``influxdb://[user[:password]@]host[:port][/database]``.
        use_prefix: Prefix measurement names with the database name.
        rng: Random source for sampling decisions.

    Returns:
        MetricsEmitter owning a fresh UDP transport.

    Raises:
        ConfigError: The URL is malformed or has the wrong scheme.
        TransportError: The transport could not be opened.
    """
    endpoint = parse_endpoint(url)
    transport = open_transport(endpoint)
    prefix = endpoint.database if use_prefix else None
    return MetricsEmitter(transport, prefix=prefix, rng=rng)


def connect_from_env(
    var: str = URL_ENV_VAR,
    use_prefix: bool = True,
) -> EmitterPort:
    """Build an emitter from the URL in environment variable ``var``.

    Returns NullEmitter when the variable is unset or empty, or when
    METRICS_DISABLED is set to a true value. Configuration errors propagate.
    """
    if os.environ.get(DISABLED_ENV_VAR, "").strip().lower() in _TRUTHY:
        logger.debug("Metrics disabled by %s", DISABLED_ENV_VAR)
        return NULL_EMITTER

    url = os.environ.get(var, "").strip()
    if not url:
        logger.debug("%s not set, metrics disabled", var)
        return NULL_EMITTER

    return connect(url, use_prefix=use_prefix)
