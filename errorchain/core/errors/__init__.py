# errorchain/core/errors/__init__.py
"""
Core error types for errorchain.

This package defines the components responsible for:
- Representing errors (BaseError, MultiError, presets)
- Converting foreign errors into the chain
- Traversing chains (walk, collect, print_error)

No side effects on import.
"""

from . import codes
from .exceptions import BaseError, ErrorProps, MultiError, from_exception
from .presets import (
    ArgumentEmptyError,
    ArgumentError,
    ArgumentNullError,
    ArgumentRangeError,
    ArgumentWhiteSpaceError,
    AssertionError,
    FormatError,
    InvalidCastError,
    InvalidOperationError,
    NotImplementedError,
    NotSupportedError,
    NullReferenceError,
    ObjectDisposedError,
    TimeoutError,
)
from .walk import collect, format_error, log_error, print_error, walk

__all__ = [
    "codes",
    "BaseError",
    "ErrorProps",
    "MultiError",
    "from_exception",
    "ArgumentError",
    "ArgumentNullError",
    "ArgumentEmptyError",
    "ArgumentWhiteSpaceError",
    "ArgumentRangeError",
    "AssertionError",
    "TimeoutError",
    "NotSupportedError",
    "ObjectDisposedError",
    "NotImplementedError",
    "InvalidOperationError",
    "InvalidCastError",
    "NullReferenceError",
    "FormatError",
    "collect",
    "walk",
    "format_error",
    "print_error",
    "log_error",
]
