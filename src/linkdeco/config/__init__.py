"""Loading and validation of decorator settings files.

This package facade re-exports the public names so callers can use
``from linkdeco.config import ...``.
"""

from __future__ import annotations

from linkdeco.config.loader import load_settings, load_snapshot, parse_settings
from linkdeco.config.model import DecoratorSettings
from linkdeco.config.validator import validate_rule_record, validate_settings_file

__all__ = [
    "DecoratorSettings",
    "load_settings",
    "load_snapshot",
    "parse_settings",
    "validate_rule_record",
    "validate_settings_file",
]
