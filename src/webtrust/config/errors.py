"""Errors raised while reading webtrust settings from the environment."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class ConfigurationError(RuntimeError):
    """Base class for unusable webtrust settings."""


class MissingConfigurationError(ConfigurationError):
    def __init__(self, variables: Sequence[str]) -> None:
        self.variables = tuple(sorted(variables))
        super().__init__(f"Missing configuration for: {', '.join(self.variables)}")


class InvalidConfigurationError(ConfigurationError):
    def __init__(self, variable: str, reason: str) -> None:
        self.variable = variable
        super().__init__(f"{variable} {reason}")
