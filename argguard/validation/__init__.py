"""
Argument and state guards.
"""

from argguard.validation.guard import (
    argument_enum_valid,
    argument_not_null,
    argument_not_null_or_empty,
    argument_valid,
    file_exists,
    generic_argument_not_null,
    not_null,
)

__all__ = [
    "argument_enum_valid",
    "argument_not_null",
    "argument_not_null_or_empty",
    "argument_valid",
    "file_exists",
    "generic_argument_not_null",
    "not_null",
]
