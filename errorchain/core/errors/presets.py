# errorchain/core/errors/presets.py
"""
Preset error types.

Each preset only fixes a default message and a ``name``; behavior is
inherited from BaseError. The Argument* family all report
``name == "ArgumentError"``.

Several names intentionally shadow Python builtins (TimeoutError,
NotImplementedError, AssertionError). Import them qualified when the
builtin is needed in the same module.
"""
from __future__ import annotations

from typing import Any, Optional

from . import codes
from .exceptions import BaseError, ErrorProps


class ArgumentError(BaseError):
    """
    Raised when a function receives an invalid argument.

    Args:
        parameter_name: Name of the offending parameter.
        message: Error message, defaults to "Argument {parameter_name} is invalid."
        cause: Optional value that caused this error.
    """

    name = codes.ARGUMENT_ERROR
    default_message = "Argument {parameter_name} is invalid."

    _settable = BaseError._settable | {"parameter_name"}

    def __init__(
        self,
        parameter_name: Optional[str] = None,
        message: Optional[str] = None,
        *,
        cause: Any = None,
    ) -> None:
        super().__init__(
            message or self.default_message.format(parameter_name=parameter_name),
            cause,
        )
        self.parameter_name = parameter_name

    def to_dict(self) -> ErrorProps:
        props = super().to_dict()
        props["parameterName"] = self.parameter_name
        return props


class ArgumentNullError(ArgumentError):
    """Raised when a required argument is None."""

    default_message = "Argument {parameter_name} must not be null or undefined."

    def __init__(self, parameter_name: Optional[str] = None, *, cause: Any = None) -> None:
        super().__init__(parameter_name, cause=cause)

    @classmethod
    def validate(cls, value: Any, parameter_name: str) -> None:
        """
        Raise ArgumentNullError when ``value`` is None.

        Raises:
            ArgumentNullError: If the value is None.
        """
        if value is None:
            raise cls(parameter_name)


class ArgumentEmptyError(ArgumentError):
    """Raised when an argument is None or empty."""

    default_message = "Argument {parameter_name} must not be null or empty."

    def __init__(self, parameter_name: Optional[str] = None, *, cause: Any = None) -> None:
        super().__init__(parameter_name, cause=cause)


class ArgumentWhiteSpaceError(ArgumentError):
    """Raised when an argument is None, empty, or whitespace."""

    default_message = "Argument {parameter_name} must not be null, empty, or whitespace."

    def __init__(self, parameter_name: Optional[str] = None, *, cause: Any = None) -> None:
        super().__init__(parameter_name, cause=cause)


class ArgumentRangeError(ArgumentError):
    """Raised when an argument is out of range."""

    default_message = "Argument {parameter_name} is out of range."


class _MessagePreset(BaseError):
    default_message = ""

    def __init__(self, message: Optional[str] = None, *, cause: Any = None) -> None:
        super().__init__(message or self.default_message, cause)


class AssertionError(_MessagePreset):
    """Raised when an internal assertion does not hold."""

    name = codes.ASSERTION_ERROR
    default_message = "Assertion failed."


class TimeoutError(_MessagePreset):
    """Raised when an operation times out."""

    name = codes.TIMEOUT_ERROR
    default_message = "Operation timed out."


class NotSupportedError(_MessagePreset):
    """Raised when an operation is not supported."""

    name = codes.NOT_SUPPORTED_ERROR
    default_message = "Operation is not supported."


class ObjectDisposedError(_MessagePreset):
    """Raised when an object is used after it has been disposed."""

    name = codes.OBJECT_DISPOSED_ERROR
    default_message = "Object has been disposed."

    def __init__(self, message: Optional[str] = None, cause: Any = None) -> None:
        super().__init__(message, cause=cause)


class NotImplementedError(_MessagePreset):
    """Raised when a method or feature is not implemented."""

    name = codes.NOT_IMPLEMENTED_ERROR
    default_message = "Not implemented"


class InvalidOperationError(_MessagePreset):
    """Raised when an operation is not valid for the current state."""

    name = codes.INVALID_OPERATION_ERROR
    default_message = "Invalid operation"


class InvalidCastError(_MessagePreset):
    """Raised when a value cannot be converted to the requested type."""

    name = codes.INVALID_CAST_ERROR
    default_message = "Invalid cast"


class NullReferenceError(_MessagePreset):
    """Raised when a None reference is used."""

    name = codes.NULL_REFERENCE_ERROR
    default_message = "Null or undefined reference"


class FormatError(_MessagePreset):
    """Raised when a value is not in the expected format."""

    name = codes.FORMAT_ERROR
    default_message = "Format SystemError"
