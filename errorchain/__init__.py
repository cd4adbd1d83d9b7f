"""
errorchain - structured error chains

User-facing API:
- BaseError: error with code, target and an inner error chain
- MultiError: aggregate of several errors
- presets: ArgumentError, TimeoutError, InvalidOperationError, ...
- from_exception(): convert any exception into the chain
- walk() / collect() / print_error() / log_error(): traverse a chain

Basic usage:
    >>> from errorchain import BaseError, collect
    >>> try:
    ...     int("x")
    ... except ValueError as e:
    ...     err = BaseError("Parsing failed", e).set(target="parse_port")
    >>> err.code
    'SystemError'
    >>> [node.message for node in collect(err)]
    ["invalid literal for int() with base 10: 'x'", 'Parsing failed']

Argument validation:
    >>> from errorchain import ArgumentNullError
    >>> ArgumentNullError.validate(None, "path")
    Traceback (most recent call last):
    ...
    errorchain.core.errors.presets.ArgumentNullError: Argument path must not be null or undefined.
"""

__version__ = "0.1.0"

from .core.errors import (
    codes,
    BaseError,
    ErrorProps,
    MultiError,
    from_exception,
    ArgumentError,
    ArgumentNullError,
    ArgumentEmptyError,
    ArgumentWhiteSpaceError,
    ArgumentRangeError,
    AssertionError,
    TimeoutError,
    NotSupportedError,
    ObjectDisposedError,
    NotImplementedError,
    InvalidOperationError,
    InvalidCastError,
    NullReferenceError,
    FormatError,
    collect,
    walk,
    format_error,
    print_error,
    log_error,
)
from .config import ErrorChainConfig, load_config

__all__ = [
    "__version__",
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
    "ErrorChainConfig",
    "load_config",
]
