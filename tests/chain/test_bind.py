import logging

import pytest

from railchain.chain import bind, bind_by_name
from railchain.functional_types import err, ok
from railchain.registry import StepRegistry


class RecordingStep:
    """Step double that records every payload it receives."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, value):
        self.calls.append(value)
        return self.result if self.result is not None else ok(value)


def explode(value):
    raise ZeroDivisionError("division by zero")


def returns_plain_value(value):
    return value + 1


@pytest.fixture
def registry():
    return StepRegistry()


def test_bind_passes_payload_as_sole_argument():
    step = RecordingStep(ok("done"))
    assert bind(ok(5), step) == ok("done")
    assert step.calls == [5]


def test_bind_returns_step_failure_verbatim():
    step = RecordingStep(err("value must be > 0"))
    assert bind(ok(-1), step).error() == "value must be > 0"


def test_bind_short_circuits_without_invoking_step():
    failure = err("first failure")
    step = RecordingStep()

    result = bind(failure, step)

    assert result is failure
    assert step.calls == []


def test_bind_short_circuits_without_resolving_named_step(registry):
    failure = err("first failure")
    assert bind_by_name(failure, "NoSuchStep", registry=registry) is failure


def test_bind_by_name_resolves_registered_step(registry):
    step = RecordingStep(ok(50))
    registry.register("times_ten", step)

    assert bind_by_name(ok(5), "times_ten", registry=registry) == ok(50)
    assert step.calls == [5]


def test_bind_by_name_unknown_step_becomes_failure(registry):
    result = bind_by_name(ok(5), "NoSuchStep", registry=registry)

    assert not result.is_success()
    assert "NoSuchStep" in result.error()
    assert result.error() == "step not found: NoSuchStep"


def test_bind_accepts_names_directly(registry):
    registry.register("echo", ok)
    assert bind(ok("x"), "echo", registry=registry) == ok("x")


def test_bind_falls_back_to_default_registry(monkeypatch):
    fresh = StepRegistry()
    fresh.register("echo", ok)
    monkeypatch.setattr("railchain.chain.default_registry", fresh)

    assert bind_by_name(ok(1), "echo") == ok(1)


def test_bind_uses_empty_registry_instead_of_default(monkeypatch):
    populated = StepRegistry()
    populated.register("echo", ok)
    monkeypatch.setattr("railchain.chain.default_registry", populated)

    result = bind_by_name(ok(1), "echo", registry=StepRegistry())
    assert result == err("step not found: echo")


def test_bind_contains_step_faults(caplog):
    with caplog.at_level(logging.WARNING, logger="railchain.chain"):
        result = bind(ok(1), explode)

    assert not result.is_success()
    assert "explode" in result.error()
    assert "ZeroDivisionError" in result.error()
    assert "division by zero" in result.error()
    assert any(record.exc_info for record in caplog.records)


def test_bind_contains_faults_from_named_steps(registry):
    registry.register("explode", explode)
    result = bind_by_name(ok(1), "explode", registry=registry)
    assert result.error() == "step 'explode' raised ZeroDivisionError: division by zero"


def test_bind_rejects_steps_that_do_not_return_results():
    result = bind(ok(1), returns_plain_value)
    assert result == err("step 'returns_plain_value' returned int, expected a Result")


def test_bind_with_non_callable_step_becomes_failure():
    result = bind(ok(1), 42)  # type: ignore[arg-type]
    assert result == err("step not found: 42")


def test_bind_does_not_mutate_current():
    current = ok([1, 2])
    bind(current, lambda v: ok(v + [3]))
    assert current == ok([1, 2])


def test_keyboard_interrupt_is_not_contained():
    def interrupted(value):
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        bind(ok(1), interrupted)


class UnprintableStep:
    """Callable whose repr fails and which records whether it was touched."""

    def __init__(self):
        self.touched = False

    def __repr__(self):
        raise RuntimeError("repr exploded")

    def __call__(self, value):
        self.touched = True
        raise ValueError("call failed")


def test_short_circuit_never_inspects_step(caplog):
    step = UnprintableStep()
    failure = err("first failure")

    with caplog.at_level(logging.DEBUG, logger="railchain.chain"):
        assert bind(failure, step) is failure
    assert not step.touched


def test_unprintable_step_fault_is_contained():
    step = UnprintableStep()

    result = bind(ok(1), step)

    assert step.touched
    assert result.error() == "step '<UnprintableStep object>' raised ValueError: call failed"


def test_registered_callable_is_labelled_by_registered_name(registry):
    failing = lambda value: 1 / 0  # noqa: E731
    registry.register("divide_by_zero", failing)

    result = bind(ok(1), failing, registry=registry)

    assert result.error().startswith("step 'divide_by_zero' raised ZeroDivisionError")
