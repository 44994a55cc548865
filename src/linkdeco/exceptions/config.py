"""Configuration-related exceptions."""

from __future__ import annotations

from linkdeco.exceptions.base import LinkDecoError


class ConfigError(LinkDecoError, ValueError):
    """Raised when decorator settings or a rule record are invalid."""
