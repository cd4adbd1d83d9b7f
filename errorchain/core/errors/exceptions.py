# errorchain/core/errors/exceptions.py
from __future__ import annotations

import logging
import traceback
from typing import Any, List, Mapping, Optional, Sequence, TypedDict

from . import codes


logger = logging.getLogger(__name__)

_UNSET: Any = object()


class ErrorProps(TypedDict, total=False):
    """Serialized form of an error chain, as produced by ``to_dict()``."""
    message: str
    code: Optional[str]
    target: Optional[str]
    innerError: "ErrorProps"
    details: List["ErrorProps"]
    parameterName: Optional[str]


def _format_traceback(error: BaseException) -> Optional[str]:
    tb = error.__traceback__
    if tb is None:
        return None
    # only this exception's frames, chained causes are modeled by inner_error
    return "".join(traceback.format_exception(type(error), error, tb, chain=False))


def _frame_lines(stack: Optional[str]) -> List[str]:
    if not stack:
        return []
    lines = (line.strip() for line in stack.splitlines())
    return [line for line in lines if line.startswith(codes.STACK_FRAME_PREFIXES)]


def _is_error_like(value: Any) -> bool:
    return isinstance(value, BaseException) or hasattr(value, "message")


def _aggregate_children(value: Any) -> Optional[Sequence[Any]]:
    """
    Return the sub-errors of a foreign aggregate, or None when ``value`` is not one.

    Recognizes ``ExceptionGroup`` style ``exceptions`` and plain ``errors`` sequences.
    """
    if isinstance(value, BaseError) or not _is_error_like(value):
        return None
    for attr in ("exceptions", "errors"):
        children = getattr(value, attr, None)
        if isinstance(children, Sequence) and not isinstance(children, (str, bytes)):
            return children
    return None


def _foreign_message(error: Any) -> str:
    message = getattr(error, "message", None)
    if message is None:
        return str(error)
    return str(message)


def _foreign_stack(error: Any) -> Optional[str]:
    stack = getattr(error, "stack", None)
    if isinstance(stack, str):
        return stack
    if isinstance(error, BaseException):
        return _format_traceback(error)
    return None


def _foreign_cause(error: Any) -> Any:
    cause = getattr(error, "cause", None)
    if cause is None and isinstance(error, BaseException):
        cause = error.__cause__
    return cause


def _wrap(error: Any) -> "BaseError":
    # one level only: the foreign error's own cause is not followed
    wrapped = BaseError(_foreign_message(error))
    wrapped.stack = _foreign_stack(error)
    return wrapped


def from_exception(error: Any) -> "BaseError":
    """
    Normalize any error-like value into a BaseError.

    BaseError instances are returned as-is, foreign aggregates become a
    MultiError, anything else is wrapped with its message and stack copied.
    """
    if isinstance(error, BaseError):
        return error
    if _aggregate_children(error) is not None:
        return MultiError.from_foreign(error)
    logger.debug("Wrapping foreign error %s", type(error).__name__)
    return _wrap(error)


def _to_inner_error(cause: Any) -> Optional["BaseError"]:
    if cause is None:
        return None
    if isinstance(cause, BaseError):
        return cause
    if _aggregate_children(cause) is not None:
        return MultiError.from_foreign(cause)
    if _is_error_like(cause):
        return _wrap(cause)
    return None


class BaseError(Exception):
    """
    Base error carrying a machine code, a target and an inner error chain.

    Args:
        message: Human-readable error message.
        cause: Optional value that caused this error. Errors are converted
            into ``inner_error``; the raw value is kept on ``cause``.
    """

    name: str = codes.SYSTEM_ERROR

    # keys accepted by set(); everything else is ignored
    _settable: frozenset = frozenset({"code", "target", "link"})

    def __init__(self, message: str, cause: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if isinstance(cause, BaseException):
            # keeps Python's own traceback chain in sync
            self.__cause__ = cause

        # documentation reference (str or URL), never serialized
        self.link: Optional[Any] = None

        self._code: Optional[str] = None
        self._target: Optional[str] = None
        self._stack: Any = _UNSET
        self._stack_lines: Optional[List[str]] = None
        self._inner_error = _to_inner_error(cause)

    @property
    def code(self) -> str:
        """Explicit code when assigned, otherwise ``name``."""
        if self._code is None:
            return self.name
        return self._code

    @code.setter
    def code(self, value: Optional[str]) -> None:
        self._code = value

    @property
    def target(self) -> Optional[str]:
        """What failed, usually the name of the operation or parameter."""
        return self._target

    @target.setter
    def target(self, value: Optional[str]) -> None:
        self._target = value

    @property
    def inner_error(self) -> Optional["BaseError"]:
        return self._inner_error

    @property
    def stack(self) -> Optional[str]:
        """
        Raw stack text.

        An assigned value always wins. Until one is assigned, this is the
        formatted traceback once the error has been raised, else None.
        """
        if self._stack is _UNSET:
            return _format_traceback(self)
        return self._stack

    @stack.setter
    def stack(self, value: Optional[str]) -> None:
        self._stack_lines = None
        self._stack = value

    @property
    def stack_trace(self) -> List[str]:
        """Frame lines of ``stack``, stripped, in original order."""
        if self._stack_lines is not None:
            return self._stack_lines

        lines = _frame_lines(self.stack)
        # a traceback-derived stack can still change, so only cache assigned ones
        if self._stack is not _UNSET:
            self._stack_lines = lines
        return lines

    @stack_trace.setter
    def stack_trace(self, value: Sequence[str]) -> None:
        self._stack_lines = list(value)
        self._stack = "\n".join(self._stack_lines)

    def set(self, props: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "BaseError":
        """
        Assign several properties at once and return the error.

        ``name`` and ``stack`` are never assigned. Unknown keys are ignored.
        """
        values = dict(props or {})
        values.update(kwargs)

        for key, value in values.items():
            if key in ("name", "stack"):
                continue
            if key not in self._settable:
                logger.debug("Ignoring unknown property %r for %s", key, type(self).__name__)
                continue
            setattr(self, key, value)

        return self

    def to_dict(self) -> ErrorProps:
        props: ErrorProps = {
            "message": self.message,
            "code": self.code,
            "target": self.target,
        }
        if self._inner_error is not None:
            props["innerError"] = self._inner_error.to_dict()
        return props


class MultiError(BaseError):
    """
    Aggregate of several parallel failures.

    Args:
        message: Error message, defaults to "One or more errors occurred."
        errors: The aggregated errors, in order. Foreign errors are converted.
        cause: Optional value that caused this error.
    """

    name = codes.AGGREGATE_ERROR

    _settable = BaseError._settable | {"errors"}

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[Sequence[Any]] = None,
        cause: Any = None,
    ) -> None:
        if message is None:
            message = codes.DEFAULT_AGGREGATE_MESSAGE
        super().__init__(message, cause)
        self.errors = errors

    @property
    def errors(self) -> List[BaseError]:
        """The aggregated errors, in insertion order."""
        return self._errors

    @errors.setter
    def errors(self, value: Optional[Sequence[Any]]) -> None:
        self._errors = [from_exception(e) for e in (value or ())]

    def to_dict(self) -> ErrorProps:
        props = super().to_dict()
        props["details"] = [e.to_dict() for e in self.errors]
        return props

    # -------- factories --------

    @classmethod
    def from_foreign(cls, error: Any) -> "MultiError":
        """
        Convert a foreign aggregate (``ExceptionGroup`` or anything exposing
        an ``errors`` sequence) into a MultiError.

        Each child is converted on its own. The inner error comes from the
        aggregate's own cause; without one it is a plain, one-level
        conversion of the aggregate itself.
        """
        children = _aggregate_children(error) or ()
        cause = _foreign_cause(error)

        if _is_error_like(cause):
            inner = from_exception(cause)
        else:
            inner = _wrap(error)

        aggregate = cls(
            _foreign_message(error),
            [from_exception(child) for child in children],
            inner,
        )
        aggregate.stack = _foreign_stack(error)
        return aggregate
