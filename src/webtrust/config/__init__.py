"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_float_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, InvalidConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging, level_for
from .opencti import OpenCTIConfig, get_opencti_config

__all__ = [
    "ConfigurationError",
    "InvalidConfigurationError",
    "MissingConfigurationError",
    "OpenCTIConfig",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "configure_logging",
    "level_for",
    "get_opencti_config",
    "optional_float_env_var",
    "require_env_var",
    "require_env_vars",
]
