"""
Configuration for railchain.
"""

from typing import Final

# --- Result Container ---
PLACEHOLDER_ERROR_MESSAGE: Final[str] = "unspecified error"

# --- Failure Message Templates ---
STEP_NOT_FOUND_TEMPLATE: Final[str] = "step not found: {name}"
STEP_FAULT_TEMPLATE: Final[str] = "step '{step}' raised {fault_type}: {detail}"
NOT_A_RESULT_TEMPLATE: Final[str] = "step '{step}' returned {type_name}, expected a Result"

# --- Manifest Configuration ---
IMPORT_TARGET_SEPARATOR: Final[str] = ":"

# --- Runtime Type Checking ---
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = "RAILCHAIN_BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = "RAILCHAIN_BEARTYPE_ALL"

# --- CLI / Logging Configuration ---
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"
VERBOSE_LOG_LEVEL: Final[str] = "DEBUG"
LOG_FORMAT: Final[str] = "%(message)s"
LOG_DATE_FORMAT: Final[str] = "[%X]"
EXIT_CHAIN_FAILED: Final[int] = 1

# --- SSoT Enforcement ---
__all__ = [
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "DEFAULT_LOG_LEVEL",
    "EXIT_CHAIN_FAILED",
    "IMPORT_TARGET_SEPARATOR",
    "LOG_DATE_FORMAT",
    "LOG_FORMAT",
    "NOT_A_RESULT_TEMPLATE",
    "PLACEHOLDER_ERROR_MESSAGE",
    "STEP_FAULT_TEMPLATE",
    "STEP_NOT_FOUND_TEMPLATE",
    "VERBOSE_LOG_LEVEL",
]
