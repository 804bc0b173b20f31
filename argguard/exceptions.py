"""
Guard failure types.

Three distinct failure kinds share a common base so callers can catch the
whole family, or a single kind without catching the others:

- NullArgumentError: a required value was absent
- InvalidArgumentError: a value was present but violated a constraint
- InvalidStateError: an internal invariant was broken
"""

from typing import Any, ClassVar, Dict, Optional


class GuardError(Exception):
    """Base class for guard failures."""

    code: ClassVar[str] = "GUARD_FAILED"
    default_message: ClassVar[str] = "Guard check failed"

    def __init__(
        self,
        message: Optional[str] = None,
        arg_name: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize guard error.

        Args:
            message: Human-readable error message (class default if omitted)
            arg_name: Name or source expression of the offending argument
            context: Additional context information
        """
        self.message = message if message is not None else self.default_message
        self.arg_name = arg_name
        self.context = context or {}

        super().__init__(self._render())

    def _render(self) -> str:
        if self.arg_name:
            return f"{self.message} (Parameter '{self.arg_name}')"
        return self.message

    def to_response(self) -> Dict[str, Any]:
        """
        Convert to error response format.

        Returns:
            Dict suitable for JSON serialization
        """
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "arg_name": self.arg_name,
                "context": self.context,
            }
        }


class NullArgumentError(GuardError, ValueError):
    """A required argument was None."""

    code = "NULL_ARGUMENT"
    default_message = "Value cannot be null."


class InvalidArgumentError(GuardError, ValueError):
    """An argument was present but not valid."""

    code = "INVALID_ARGUMENT"
    default_message = "Value does not fall within the expected range."


class InvalidStateError(GuardError, RuntimeError):
    """A value required by internal state was missing."""

    code = "INVALID_STATE"
    default_message = "Operation is not valid due to the current state of the object."

    def __init__(self, message: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        super().__init__(message, arg_name=None, context=context)
