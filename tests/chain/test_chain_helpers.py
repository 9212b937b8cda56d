import functools

from railchain.chain import compose, describe_step, lift, run_chain
from railchain.functional_types import err, ok
from railchain.registry import StepRegistry
from railchain.samples import multiply_by_10_if_positive, stringify_with_prefix


def test_run_chain_with_no_steps_wraps_seed():
    assert run_chain(3) == ok(3)


def test_run_chain_uses_result_seed_unchanged():
    failure = err("seeded failure")
    assert run_chain(failure, stringify_with_prefix) is failure
    assert run_chain(ok(2), multiply_by_10_if_positive) == ok(20)


def test_compose_runs_steps_in_order():
    step = compose(multiply_by_10_if_positive, stringify_with_prefix)
    assert step(5) == ok("Result: 50")
    assert step(-5) == err("value must be > 0")


def test_compose_label_names_its_parts():
    step = compose(multiply_by_10_if_positive, stringify_with_prefix)
    assert describe_step(step) == "multiply_by_10_if_positive >> stringify_with_prefix"


def test_compose_resolves_names_against_registry():
    registry = StepRegistry()
    registry.register("prefix", stringify_with_prefix)
    assert compose("prefix", registry=registry)(1) == ok("Result: 1")


def test_lift_wraps_plain_function():
    double = lift(lambda x: x * 2)
    assert run_chain(4, double, double) == ok(16)


def test_lift_preserves_function_name():
    def add_one(x):
        return x + 1

    assert describe_step(lift(add_one)) == "add_one"


def test_lifted_exceptions_are_contained():
    def parse_int(text):
        return int(text)

    result = run_chain("abc", lift(parse_int))
    assert not result.is_success()
    assert "parse_int" in result.error()
    assert "ValueError" in result.error()


def test_describe_step_variants():
    assert describe_step("by_name") == "by_name"
    assert describe_step(stringify_with_prefix) == "stringify_with_prefix"
    partial = functools.partial(max, 0)
    assert describe_step(partial) == repr(partial)


def test_describe_step_prefers_registered_name():
    registry = StepRegistry()
    registry.register("prefix", stringify_with_prefix)
    assert describe_step(stringify_with_prefix, registry) == "prefix"
    assert describe_step(multiply_by_10_if_positive, registry) == "multiply_by_10_if_positive"
