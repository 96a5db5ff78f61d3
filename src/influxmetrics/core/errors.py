"""Exception types raised during emitter setup."""


class ConfigError(ValueError):
    """The connection URL cannot be turned into an Endpoint."""


class InvalidSchemeError(ConfigError):
    """The URL scheme is not ``influxdb``."""

    def __init__(self, scheme: str) -> None:
        super().__init__(f"Invalid influxdb scheme: {scheme}")
        self.scheme = scheme


class MalformedURIError(ConfigError):
    """The URL itself could not be parsed."""


class TransportError(Exception):
    """The transport could not be opened or could not send a record."""


class DefaultEmitterAlreadySetError(RuntimeError):
    """A different default emitter has already been registered."""
