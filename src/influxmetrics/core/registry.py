"""Process-wide default emitter.

The default is written once during startup and read from anywhere after
that. Writes are lock-guarded and a second, different emitter is rejected,
so the slot cannot change under concurrent readers.
"""

import threading
from collections.abc import Sequence

from influxmetrics.core.emitter import NULL_EMITTER
from influxmetrics.core.errors import DefaultEmitterAlreadySetError
from influxmetrics.core.models import FieldValue, SendResult
from influxmetrics.core.ports import EmitterPort

_lock = threading.Lock()
_default: EmitterPort | None = None


def set_default(emitter: EmitterPort) -> None:
    """Register the process-wide default emitter.

    Registering the same instance again is a no-op.

    Raises:
        DefaultEmitterAlreadySetError: A different emitter is already registered.
    """
    global _default
    with _lock:
        if _default is not None and _default is not emitter:
            raise DefaultEmitterAlreadySetError(
                "a default emitter is already registered; call clear_default() first"
            )
        _default = emitter


def get_default() -> EmitterPort | None:
    """Return the default emitter, or None if none has been registered."""
    return _default


def clear_default() -> EmitterPort | None:
    """Unregister and return the default emitter (shutdown and tests)."""
    global _default
    with _lock:
        emitter, _default = _default, None
    return emitter


def _current() -> EmitterPort:
    return _default if _default is not None else NULL_EMITTER


def record(
    name: str,
    fields: Sequence[str],
    values: Sequence[FieldValue],
    sample_rate: float = 1.0,
) -> SendResult:
    """Emit through the default emitter; DISABLED when none is registered."""
    return _current().record(name, fields, values, sample_rate)


def increment(name: str, amount: int = 1, sample_rate: float = 1.0) -> SendResult:
    return _current().increment(name, amount, sample_rate)


def decrement(name: str, amount: int = 1, sample_rate: float = 1.0) -> SendResult:
    return _current().decrement(name, amount, sample_rate)


def timing(name: str, start: float, sample_rate: float = 1.0) -> SendResult:
    return _current().timing(name, start, sample_rate)


def timing_raw(name: str, microseconds: int, sample_rate: float = 1.0) -> SendResult:
    return _current().timing_raw(name, microseconds, sample_rate)
