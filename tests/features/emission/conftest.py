"""BDD step definitions for emission features."""

import logging
from dataclasses import dataclass, field

import pytest
from pytest_bdd import given, parsers, then, when

from influxmetrics.adapters.transport.in_memory import InMemoryTransport
from influxmetrics.core import registry
from influxmetrics.core.emitter import MetricsEmitter
from influxmetrics.core.models import SendResult
from tests.helpers import FixedRandom


@dataclass
class EmissionScenarioContext:
    """Mutable state shared between the steps of one scenario."""

    transport: InMemoryTransport = field(default_factory=InMemoryTransport)
    emitter: MetricsEmitter | None = None
    result: SendResult | None = None


@pytest.fixture
def ctx() -> EmissionScenarioContext:
    """Fresh scenario context for each test."""
    return EmissionScenarioContext()


# === Given ===
@given("an in-memory transport")
def step_in_memory_transport(ctx: EmissionScenarioContext) -> None:
    ctx.transport = InMemoryTransport()


@given("a failing transport")
def step_failing_transport(ctx: EmissionScenarioContext) -> None:
    ctx.transport = InMemoryTransport(fail_with="send buffer full")


@given(parsers.parse('an emitter with prefix "{prefix}"'))
def step_prefixed_emitter(ctx: EmissionScenarioContext, prefix: str) -> None:
    ctx.emitter = MetricsEmitter(ctx.transport, prefix=prefix)


@given("an emitter without a prefix")
def step_plain_emitter(ctx: EmissionScenarioContext) -> None:
    ctx.emitter = MetricsEmitter(ctx.transport)


@given(parsers.parse("an emitter without a prefix whose random draws are {draw:f}"))
def step_seeded_emitter(ctx: EmissionScenarioContext, draw: float) -> None:
    ctx.emitter = MetricsEmitter(ctx.transport, rng=FixedRandom(draw))


@given("no default emitter is registered")
def step_no_default() -> None:
    registry.clear_default()


@given("the emitter is registered as the default")
def step_register_default(ctx: EmissionScenarioContext) -> None:
    assert ctx.emitter is not None
    registry.set_default(ctx.emitter)


# === When ===
@when(parsers.re(r'I increment "(?P<name>[^"]+)" by (?P<amount>-?\d+)$'))
def step_increment(ctx: EmissionScenarioContext, name: str, amount: str) -> None:
    assert ctx.emitter is not None
    ctx.result = ctx.emitter.increment(name, int(amount))


@when(
    parsers.parse('I increment "{name}" by {amount:d} at sample rate {rate:f}')
)
def step_increment_sampled(
    ctx: EmissionScenarioContext, name: str, amount: int, rate: float
) -> None:
    assert ctx.emitter is not None
    ctx.result = ctx.emitter.increment(name, amount, rate)


@when(parsers.parse('I decrement "{name}" by {amount:d}'))
def step_decrement(ctx: EmissionScenarioContext, name: str, amount: int) -> None:
    assert ctx.emitter is not None
    ctx.result = ctx.emitter.decrement(name, amount)


@when(
    parsers.parse('I record a raw timing of {microseconds:d} microseconds for "{name}"')
)
def step_timing_raw(
    ctx: EmissionScenarioContext, name: str, microseconds: int
) -> None:
    assert ctx.emitter is not None
    ctx.result = ctx.emitter.timing_raw(name, microseconds)


@when(parsers.parse('I increment "{name}" by {amount:d} through the default emitter'))
def step_increment_default(
    ctx: EmissionScenarioContext, name: str, amount: int
) -> None:
    ctx.result = registry.increment(name, amount)


# === Then ===
@then(parsers.parse("the transport record count is {count:d}"))
def step_record_count(ctx: EmissionScenarioContext, count: int) -> None:
    assert len(ctx.transport.records) == count


@then(
    parsers.parse(
        'the last record is named "{name}" with field "{field_name}" equal to {value:d}'
    )
)
def step_last_record(
    ctx: EmissionScenarioContext, name: str, field_name: str, value: int
) -> None:
    last = ctx.transport.records[-1]
    assert last.name == name
    assert last.fields == (field_name,)
    assert last.values == (value,)


@then(parsers.parse('the result is "{result}"'))
def step_result(ctx: EmissionScenarioContext, result: str) -> None:
    assert ctx.result is SendResult(result)


@then(parsers.parse('an error mentioning "{text}" was logged'))
def step_error_logged(caplog: pytest.LogCaptureFixture, text: str) -> None:
    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert any(text in r.getMessage() for r in errors)
