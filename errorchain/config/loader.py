# errorchain/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- Library works without YAML
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "ERRORCHAIN_CONFIG"


@dataclass(frozen=True)
class ErrorChainConfig:
    """
    Rendering options for print_error / log_error.

    All fields have code defaults - YAML is optional.
    """

    include_stack: bool = True
    log_level: str = "ERROR"
    logger_name: str = "errorchain"

    @classmethod
    def default(cls) -> "ErrorChainConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "ErrorChainConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries:
                1. $ERRORCHAIN_CONFIG
                2. ~/.errorchain/config.yml

        Returns:
            ErrorChainConfig instance (always has code defaults as fallback)
        """
        config = cls.default()

        yaml_data = _load_yaml(config_path)
        if not yaml_data:
            return config

        section = yaml_data.get("errorchain", yaml_data)
        if not isinstance(section, dict):
            logger.warning("Ignoring errorchain config: expected a mapping, got %s", type(section).__name__)
            return config

        known = {f.name for f in fields(cls)}
        return replace(config, **{k: v for k, v in section.items() if k in known})

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "include_stack": self.include_stack,
            "log_level": self.log_level,
            "logger_name": self.logger_name,
        }


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    if config_path:
        paths = [Path(config_path)]
    else:
        paths = []
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            paths.append(Path(env_path))
        paths.append(Path.home() / ".errorchain" / "config.yml")

    for path in paths:
        if path.exists():
            try:
                with open(path, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                # unreadable config falls back to code defaults
                logger.warning("Failed to load errorchain config %s: %s", path, e)
                return None
            return data if isinstance(data, dict) else None

    return None


def load_config(config_path: Optional[Path] = None) -> ErrorChainConfig:
    """Load configuration (YAML if present, code defaults otherwise)"""
    return ErrorChainConfig.from_yaml(config_path)
