import railchain
from railchain.errors import (
    InvalidStateAccess,
    RailchainError,
    UnknownStep,
    not_a_result_message,
    step_fault_message,
    step_not_found_message,
)


def test_errors_share_a_base_class():
    assert issubclass(InvalidStateAccess, RailchainError)
    assert issubclass(UnknownStep, RailchainError)


def test_failure_message_formats():
    assert step_not_found_message("NoSuchStep") == "step not found: NoSuchStep"
    assert step_fault_message("parse", ValueError("bad")) == "step 'parse' raised ValueError: bad"
    assert step_fault_message("parse", RuntimeError()) == "step 'parse' raised RuntimeError: no details"
    assert not_a_result_message("parse", 3) == "step 'parse' returned int, expected a Result"


def test_package_exports_core_api():
    result = railchain.run_chain(2, railchain.lift(lambda x: x + 1))
    assert result == railchain.ok(3)
    assert isinstance(railchain.default_registry, railchain.StepRegistry)
