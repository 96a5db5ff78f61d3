"""Core domain models for metric emission."""

from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlsplit

# InfluxDB's standard UDP listener port
DEFAULT_UDP_PORT = 8089

FieldValue = int | float


@dataclass(frozen=True)
class Endpoint:
    """A parsed InfluxDB connection descriptor.

    Attributes:
        host: URI authority verbatim (``host`` or ``host:port``).
        username: Username from the URI userinfo, empty when absent.
        password: Password from the URI userinfo, empty when absent.
        database: Target database (namespace), empty when absent.
    """

    host: str
    username: str = ""
    password: str = ""
    database: str = ""

    @property
    def hostname(self) -> str:
        """Host part of the authority without the port."""
        return urlsplit(f"//{self.host}").hostname or ""

    @property
    def port(self) -> int:
        """UDP port of the authority, DEFAULT_UDP_PORT when not given."""
        port = urlsplit(f"//{self.host}").port
        return port if port is not None else DEFAULT_UDP_PORT


@dataclass(frozen=True)
class MeasurementRecord:
    """A single measurement: a name and positionally paired fields/values.

    The timestamp is not carried here. The server assigns it on receipt.

    Attributes:
        name: Measurement name, already prefixed if the emitter prefixes.
        fields: Field names, unique within the record.
        values: Numeric values, one per field name.
    """

    name: str
    fields: tuple[str, ...]
    values: tuple[FieldValue, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("measurement name required")
        if not self.fields:
            raise ValueError("measurement requires at least one field")
        if len(self.fields) != len(self.values):
            raise ValueError(
                f"got {len(self.fields)} field names for {len(self.values)} values"
            )
        for field_name in self.fields:
            if not isinstance(field_name, str) or not field_name:
                raise ValueError(
                    f"field names must be non-empty strings, got {field_name!r}"
                )
        if len(set(self.fields)) != len(self.fields):
            raise ValueError(f"duplicate field names in {self.fields!r}")
        for value in self.values:
            if isinstance(value, bool) or not isinstance(value, int | float):
                raise ValueError(f"field values must be numeric, got {value!r}")

    def as_point(self) -> dict[str, object]:
        """Return the point dict understood by the line-protocol encoder."""
        return {
            "measurement": self.name,
            "fields": dict(zip(self.fields, self.values, strict=True)),
        }


class SendResult(Enum):
    """Outcome of a best-effort emission.

    Callers are free to ignore it; emission never raises.
    """

    SENT = "sent"
    SAMPLED_OUT = "sampled_out"
    DISABLED = "disabled"
    FAILED = "failed"
