# errorchain/core/errors/walk.py
"""
Depth-first traversal over error chains.

Visiting order for every node: aggregated children first (in order), then
the inner error, then the node itself. Nothing is deduplicated, a node
reachable through both branches is visited twice.
"""
from __future__ import annotations

import logging
import sys
import traceback
from typing import Callable, List, Optional, TextIO

from errorchain.config.loader import ErrorChainConfig

from .exceptions import BaseError, MultiError


logger = logging.getLogger(__name__)


def _resolve_level(name: object) -> int:
    """Map a configured level name to an int, falling back to ERROR."""
    level = logging.getLevelName(name.upper()) if isinstance(name, str) else None
    if isinstance(level, int):
        return level
    logger.warning("Unknown log level %r, using ERROR", name)
    return logging.ERROR


def walk(error: BaseException, callback: Callable[[BaseException], None]) -> None:
    """Invoke ``callback`` for every error in the chain, the root last."""
    if isinstance(error, MultiError) and error.errors:
        for child in error.errors:
            walk(child, callback)

    if isinstance(error, BaseError) and error.inner_error is not None:
        walk(error.inner_error, callback)

    callback(error)


def collect(error: BaseException) -> List[BaseException]:
    """Flatten the chain into a list, in ``walk`` order."""
    errors: List[BaseException] = []
    walk(error, errors.append)
    return errors


def format_error(error: BaseException, include_stack: bool = True) -> str:
    """Default single-node rendering: ``"{name}: {message}"`` plus stack frames."""
    if isinstance(error, BaseError):
        text = f"{error.name}: {error.message}"
        if include_stack:
            frames = error.stack_trace
            if frames:
                text += "\n" + "\n".join(f"    {line}" for line in frames)
        return text

    if include_stack and error.__traceback__ is not None:
        lines = traceback.format_exception(type(error), error, error.__traceback__, chain=False)
    else:
        lines = traceback.format_exception_only(type(error), error)
    return "".join(lines).rstrip("\n")


def print_error(
    error: BaseException,
    formatter: Optional[Callable[[BaseException], str]] = None,
    file: Optional[TextIO] = None,
    config: Optional[ErrorChainConfig] = None,
) -> None:
    """
    Write every error in the chain to ``file`` (stderr by default).

    Args:
        error: Root of the chain.
        formatter: Renders one node; defaults to ``format_error``.
        file: Output stream, resolved at call time so redirected stderr is honored.
        config: Rendering options, defaults to ``ErrorChainConfig.default()``.
    """
    config = config or ErrorChainConfig.default()
    stream = file if file is not None else sys.stderr

    def emit(node: BaseException) -> None:
        if formatter is not None:
            text = formatter(node)
        else:
            text = format_error(node, include_stack=config.include_stack)
        print(text, file=stream)

    walk(error, emit)


def log_error(
    error: BaseException,
    logger: Optional[logging.Logger] = None,
    level: Optional[int] = None,
    formatter: Optional[Callable[[BaseException], str]] = None,
    config: Optional[ErrorChainConfig] = None,
) -> None:
    """
    Same as print_error, but each node goes through a logger.

    The logger and level default to ``config.logger_name`` / ``config.log_level``.
    An unknown configured level logs at ERROR.
    """
    config = config or ErrorChainConfig.default()
    target = logger or logging.getLogger(config.logger_name)
    if level is None:
        level = _resolve_level(config.log_level)

    def emit(node: BaseException) -> None:
        if formatter is not None:
            text = formatter(node)
        else:
            text = format_error(node, include_stack=config.include_stack)
        target.log(level, "%s", text)

    walk(error, emit)
