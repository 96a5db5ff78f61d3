"""Parsing of ``influxdb://`` connection URLs into Endpoint values."""

from urllib.parse import unquote, urlsplit

from influxmetrics.core.errors import InvalidSchemeError, MalformedURIError
from influxmetrics.core.models import Endpoint

SCHEME = "influxdb"


def parse_endpoint(uri: str) -> Endpoint:
    """Parse a connection URL into an Endpoint.

    The expected shape is ``influxdb://[user[:password]@]host[:port][/database]``.
    Missing credentials and a missing database are not errors; they produce
    empty strings.

    Args:
        uri: Connection URL.

    Returns:
        Endpoint with the authority kept verbatim as ``host``.

    Raises:
        MalformedURIError: The URL cannot be parsed (e.g. non-numeric port).
        InvalidSchemeError: The scheme is not exactly ``influxdb``.
    """
    try:
        parts = urlsplit(uri)
        # .port validates the authority and raises ValueError on garbage
        _ = parts.port
    except ValueError as exc:
        raise MalformedURIError(f"Invalid influxdb URL {uri!r}: {exc}") from exc

    # urlsplit lowercases the scheme; the comparison is case-sensitive
    raw_scheme = uri.split(":", 1)[0] if parts.scheme else ""
    if raw_scheme != SCHEME:
        raise InvalidSchemeError(raw_scheme)

    username = ""
    password = ""
    userinfo, has_userinfo, host = parts.netloc.rpartition("@")
    if has_userinfo:
        user, _, pw = userinfo.partition(":")
        username = unquote(user)
        password = unquote(pw)

    return Endpoint(
        host=host,
        username=username,
        password=password,
        database=unquote(parts.path).removeprefix("/"),
    )
