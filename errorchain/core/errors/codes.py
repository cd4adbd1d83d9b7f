# errorchain/core/errors/codes.py
from __future__ import annotations

from typing import Final


# ---- canonical name tags (stable public contract) ----
# error.code falls back to these when no explicit code is assigned
SYSTEM_ERROR: Final[str] = "SystemError"
AGGREGATE_ERROR: Final[str] = "AggregateError"

# argument validation
ARGUMENT_ERROR: Final[str] = "ArgumentError"

# runtime / state
ASSERTION_ERROR: Final[str] = "AssertionError"
TIMEOUT_ERROR: Final[str] = "TimeoutError"
NOT_SUPPORTED_ERROR: Final[str] = "NotSupportedError"
OBJECT_DISPOSED_ERROR: Final[str] = "ObjectDisposedError"
NOT_IMPLEMENTED_ERROR: Final[str] = "NotImplementedError"
INVALID_OPERATION_ERROR: Final[str] = "InvalidOperationError"
INVALID_CAST_ERROR: Final[str] = "InvalidCastError"
NULL_REFERENCE_ERROR: Final[str] = "NullReferenceError"
FORMAT_ERROR: Final[str] = "FormatError"


# ---- semantic groups ----

ARGUMENT_CODES: Final[frozenset[str]] = frozenset({
    ARGUMENT_ERROR,
})

STATE_CODES: Final[frozenset[str]] = frozenset({
    OBJECT_DISPOSED_ERROR,
    INVALID_OPERATION_ERROR,
    NULL_REFERENCE_ERROR,
})

ALL_CODES: Final[frozenset[str]] = frozenset({
    SYSTEM_ERROR,
    AGGREGATE_ERROR,
    ARGUMENT_ERROR,
    ASSERTION_ERROR,
    TIMEOUT_ERROR,
    NOT_SUPPORTED_ERROR,
    OBJECT_DISPOSED_ERROR,
    NOT_IMPLEMENTED_ERROR,
    INVALID_OPERATION_ERROR,
    INVALID_CAST_ERROR,
    NULL_REFERENCE_ERROR,
    FORMAT_ERROR,
})


# ---- stack text ----

# A stack line is a frame when, once stripped, it starts with one of these.
# "at " covers stacks captured by foreign runtimes, 'File "' covers Python tracebacks.
STACK_FRAME_PREFIXES: Final[tuple[str, ...]] = ("at ", 'File "')

DEFAULT_AGGREGATE_MESSAGE: Final[str] = "One or more errors occurred."
