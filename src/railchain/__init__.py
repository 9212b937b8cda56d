"""railchain: result-propagating step chains.

Main components:
* `ok` / `err`: build successful and failed results
* `bind`: run one step, short-circuiting on failure
* `run_chain`: fold a seed through a sequence of steps
* `StepRegistry`: resolve steps by name at call time
"""

import contextlib

__version__ = "0.1.0"

with contextlib.suppress(Exception):
    import os

    from beartype import BeartypeConf
    from beartype.claw import beartype_all, beartype_this_package

    from .app.config import BEARTYPE_ALL_ENV, BEARTYPE_THIS_PACKAGE_ENV

    if os.environ.get(BEARTYPE_THIS_PACKAGE_ENV, "0") == "1":
        beartype_this_package()
    if os.environ.get(BEARTYPE_ALL_ENV, "0") == "1":
        beartype_all(conf=BeartypeConf(violation_type=UserWarning))

from .chain import StepRef, bind, bind_by_name, compose, describe_step, identity, lift, run_chain
from .errors import (
    ChainFailed,
    DuplicateStep,
    InvalidStateAccess,
    RailchainError,
    RegistryFrozen,
    UnknownStep,
)
from .functional_types import Err, Ok, Result, err, is_err, is_ok, is_result, ok
from .registry import Step, StepRegistry, default_registry, register, resolve

__all__ = [
    "ChainFailed",
    "DuplicateStep",
    "Err",
    "InvalidStateAccess",
    "Ok",
    "RailchainError",
    "RegistryFrozen",
    "Result",
    "Step",
    "StepRef",
    "StepRegistry",
    "UnknownStep",
    "__version__",
    "bind",
    "bind_by_name",
    "compose",
    "default_registry",
    "describe_step",
    "err",
    "identity",
    "is_err",
    "is_ok",
    "is_result",
    "lift",
    "ok",
    "register",
    "resolve",
    "run_chain",
]
