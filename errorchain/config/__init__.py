"""
errorchain configuration

YAML is input parameters, code has defaults (YAML can be deleted).
"""

from .loader import ErrorChainConfig, load_config
from .validator import ConfigIssue, validate_config

__all__ = [
    "ErrorChainConfig",
    "load_config",
    "ConfigIssue",
    "validate_config",
]
