# errorchain/config/validator.py
"""
Configuration Validator

Validates configuration values that would silently misbehave.
Returns structured issues with level (warn/error), path, message, hint.
"""

import logging
from dataclasses import dataclass
from typing import List, Literal

from .loader import ErrorChainConfig


@dataclass(frozen=True)
class ConfigIssue:
    """
    Configuration validation issue

    Structured output for CLI/logging.
    """
    level: Literal["warn", "error"]
    path: str  # e.g., "errorchain.log_level"
    message: str
    hint: str = ""

    def __str__(self) -> str:
        hint_str = f"\n   Hint: {self.hint}" if self.hint else ""
        return f"[{self.level}] [{self.path}] {self.message}{hint_str}"


def validate_config(config: ErrorChainConfig) -> List[ConfigIssue]:
    """
    Validate configuration values.

    Returns:
        List of issues (warn/error level)
    """
    issues = []

    level = config.log_level
    if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
        issues.append(ConfigIssue(
            level="error",
            path="errorchain.log_level",
            message=f"unknown log level {level!r}",
            hint="Use one of DEBUG, INFO, WARNING, ERROR, CRITICAL",
        ))

    if not isinstance(config.include_stack, bool):
        issues.append(ConfigIssue(
            level="error",
            path="errorchain.include_stack",
            message=f"include_stack must be a boolean, got {config.include_stack!r}",
        ))

    if not config.logger_name:
        issues.append(ConfigIssue(
            level="warn",
            path="errorchain.logger_name",
            message="empty logger_name logs to the root logger",
            hint="Set errorchain.logger_name to a dotted logger name",
        ))

    return issues
