"""argguard - argument validation guards for public API entry points."""

__version__ = "0.1.0"

from .exceptions import (
    GuardError,
    InvalidArgumentError,
    InvalidStateError,
    NullArgumentError,
)
from .validation import (
    argument_enum_valid,
    argument_not_null,
    argument_not_null_or_empty,
    argument_valid,
    file_exists,
    generic_argument_not_null,
    not_null,
)

__all__ = [
    # Guards
    "argument_enum_valid",
    "argument_not_null",
    "argument_not_null_or_empty",
    "argument_valid",
    "file_exists",
    "generic_argument_not_null",
    "not_null",
    # Exceptions
    "GuardError",
    "NullArgumentError",
    "InvalidArgumentError",
    "InvalidStateError",
]
