"""
Argument guards.

Each guard checks a single precondition and returns the value it was given,
unchanged, or raises a GuardError subclass:

- NullArgumentError: required value was None
- InvalidArgumentError: value present but not acceptable
- InvalidStateError: value required by internal state was None

When arg_name is omitted and a check fails, the name is taken from the
source expression at the call site, e.g. ``argument_not_null(cfg.path)``
reports ``cfg.path``.
"""

import inspect
import logging
import os
from collections.abc import Sized
from enum import Enum
from typing import Any, Collection, Optional, TypeVar, Union

from argguard.config import capture_expressions_enabled
from argguard.exceptions import (
    GuardError,
    InvalidArgumentError,
    InvalidStateError,
    NullArgumentError,
)
from argguard.utils.caller_expression import caller_argument_expression

logger = logging.getLogger(__name__)

T = TypeVar("T")
PathType = Union[str, "os.PathLike[str]"]

EMPTY_ARGUMENT_MESSAGE = "Argument was empty"

_UNSET: Any = object()


def _resolve_name(
    arg_name: Optional[str],
    guard: str,
    position: int,
    keyword: str,
) -> Optional[str]:
    """
    Return arg_name, or the caller's source expression for the argument.

    Must be called directly from the body of the public guard named by
    ``guard``: the caller frame is two levels up.
    """
    if arg_name is not None:
        return arg_name
    if not capture_expressions_enabled():
        return None

    frame = inspect.currentframe()
    try:
        caller = frame.f_back.f_back if frame is not None and frame.f_back is not None else None
        return caller_argument_expression(caller, guard, position, keyword)
    finally:
        del frame


def _reject(guard: str, error: GuardError) -> GuardError:
    """Log a guard failure and hand the error back for raising."""
    logger.debug(
        f"{guard} failed: {error}",
        extra={"guard": guard, "arg_name": error.arg_name, "error_code": error.code},
    )
    return error


def _describe(value: Any) -> str:
    if isinstance(value, Enum):
        return value.name
    return str(value)


def _emptiness_failure(arg_value: Any) -> Optional[str]:
    """
    Return why a value fails the non-empty check, or None if it has an element.

    Sized values are checked with len(). Other iterables are probed through
    a fresh iterator. One-shot iterators are refused, since probing would
    consume the caller's value.
    """
    if isinstance(arg_value, Sized):
        try:
            size = len(arg_value)
        except TypeError:
            return f"Argument of type {type(arg_value).__name__} has no usable length"
        return EMPTY_ARGUMENT_MESSAGE if size == 0 else None

    try:
        iterator = iter(arg_value)
    except TypeError:
        return f"Argument of type {type(arg_value).__name__} is not iterable"

    if iterator is arg_value:
        return (
            "Argument is a one-shot iterator and cannot be checked for emptiness "
            "without consuming it; pass a collection instead"
        )

    if next(iterator, _UNSET) is _UNSET:
        return EMPTY_ARGUMENT_MESSAGE
    return None


def argument_enum_valid(
    arg_value: T,
    valid_values: Collection[T],
    arg_name: Optional[str] = None,
) -> T:
    """
    Ensure a value is one of a set of valid values.

    Args:
        arg_value: The value of the argument (typically an Enum member)
        valid_values: The acceptable values
        arg_name: The name of the argument

    Returns:
        The argument value, unchanged

    Raises:
        InvalidArgumentError: If the value is not in valid_values

    Example:
        >>> argument_enum_valid(Color.RED, {Color.RED, Color.GREEN})
        <Color.RED: 1>
    """
    if arg_value not in valid_values:
        arg_name = _resolve_name(arg_name, "argument_enum_valid", 0, "arg_value")
        allowed = ",".join(sorted(_describe(v) for v in valid_values))
        raise _reject("argument_enum_valid", InvalidArgumentError(
            f"Enum value {_describe(arg_value)} not in valid set: [{allowed}]",
            arg_name,
            context={"value": _describe(arg_value)},
        ))

    return arg_value


def argument_not_null(
    arg_value: Optional[T],
    arg_name: Optional[str] = None,
    *,
    message: Optional[str] = None,
) -> T:
    """
    Ensure an argument is not None.

    Args:
        arg_value: The value of the argument
        arg_name: The name of the argument
        message: Error message to use instead of the default

    Returns:
        The argument value, unchanged

    Raises:
        NullArgumentError: If the argument is None
    """
    if arg_value is None:
        arg_name = _resolve_name(arg_name, "argument_not_null", 0, "arg_value")
        raise _reject("argument_not_null", NullArgumentError(message, arg_name))

    return arg_value


def argument_not_null_or_empty(
    arg_value: Optional[T],
    arg_name: Optional[str] = None,
    *,
    message: Optional[str] = None,
) -> T:
    """
    Ensure an iterable argument is not None and has at least one element.

    Without a message, None raises NullArgumentError and an empty value
    raises InvalidArgumentError. With a message, both raise
    InvalidArgumentError carrying that message.

    Args:
        arg_value: The value of the argument (str, list, dict, set, ...)
        arg_name: The name of the argument
        message: Error message to use for both None and empty values

    Returns:
        The argument value, unchanged

    Raises:
        NullArgumentError: If the argument is None and no message was given
        InvalidArgumentError: If the argument is empty, not iterable, or None
            with a message
    """
    guard = "argument_not_null_or_empty"

    if arg_value is None:
        arg_name = _resolve_name(arg_name, guard, 0, "arg_value")
        if message is not None:
            raise _reject(guard, InvalidArgumentError(message, arg_name))
        raise _reject(guard, NullArgumentError(None, arg_name))

    reason = _emptiness_failure(arg_value)
    if reason is not None:
        arg_name = _resolve_name(arg_name, guard, 0, "arg_value")
        if reason == EMPTY_ARGUMENT_MESSAGE and message is not None:
            reason = message
        raise _reject(guard, InvalidArgumentError(reason, arg_name))

    return arg_value


def argument_valid(test: bool, message: str, arg_name: Optional[str] = None) -> None:
    """
    Ensure an argument passes a validity test.

    Args:
        test: The result of the validity test
        message: Error message to use when the test fails
        arg_name: The name of the argument

    Raises:
        InvalidArgumentError: If test is falsy
    """
    if not test:
        raise _reject("argument_valid", InvalidArgumentError(message, arg_name))


def file_exists(file_name: Optional[PathType], arg_name: Optional[str] = None) -> PathType:
    """
    Ensure a file name is not None or empty, and that the file exists on disk.

    Args:
        file_name: The file name (str or path-like)
        arg_name: The name of the argument

    Returns:
        The file name, unchanged

    Raises:
        NullArgumentError: If file_name is None
        InvalidArgumentError: If file_name is empty or no regular file exists there
    """
    guard = "file_exists"

    if file_name is None:
        arg_name = _resolve_name(arg_name, guard, 0, "file_name")
        raise _reject(guard, NullArgumentError(None, arg_name))

    if not os.fspath(file_name):
        arg_name = _resolve_name(arg_name, guard, 0, "file_name")
        raise _reject(guard, InvalidArgumentError(EMPTY_ARGUMENT_MESSAGE, arg_name))

    if not os.path.isfile(file_name):
        arg_name = _resolve_name(arg_name, guard, 0, "file_name")
        raise _reject(guard, InvalidArgumentError(
            f"File not found: {os.fspath(file_name)}",
            arg_name,
            context={"file_name": os.fspath(file_name)},
        ))

    return file_name


def generic_argument_not_null(
    arg_value: Optional[T],
    arg_name: Optional[str] = None,
    *,
    default: Any = _UNSET,
) -> T:
    """
    Ensure a value of a generic type is set.

    For use where the value's type is not known in advance. A value is
    unset when it is None, or when it equals ``default`` if one is given
    (e.g. ``default=0`` for counters, ``default=""`` for identifiers).

    Args:
        arg_value: The value of the argument
        arg_name: The name of the argument
        default: The type's unset value, if it has one besides None

    Returns:
        The argument value, unchanged

    Raises:
        NullArgumentError: If the value is None or equals default
    """
    if arg_value is None or (default is not _UNSET and arg_value == default):
        arg_name = _resolve_name(arg_name, "generic_argument_not_null", 0, "arg_value")
        raise _reject("generic_argument_not_null", NullArgumentError(None, arg_name))

    return arg_value


def not_null(value: Optional[T], message: str) -> T:
    """
    Ensure a value required by internal state is not None.

    Unlike the argument guards, a failure here means the object itself is
    in a bad state, not that the caller passed something wrong.

    Args:
        value: The value to test
        message: Error message to use when the value is None

    Returns:
        The value, unchanged

    Raises:
        InvalidStateError: If the value is None
    """
    if value is None:
        raise _reject("not_null", InvalidStateError(message))

    return value
