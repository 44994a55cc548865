"""Settings and snapshot file loading."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from linkdeco.config.model import DecoratorSettings
from linkdeco.constants.config import RULES_KEY
from linkdeco.exceptions import ConfigError
from linkdeco.model import DecorationRule, MetadataSnapshot

logger = logging.getLogger(__name__)


def load_settings(path: Path) -> DecoratorSettings:
    """Load decorator settings from a YAML (or JSON) file.

    A missing or empty file yields the default, rule-less settings.
    """
    path = path.resolve()
    if not path.exists():
        logger.debug("No settings file at %s, using defaults", path)
        return DecoratorSettings()
    return parse_settings(_read_yaml(path), source=str(path))


def parse_settings(raw: Any, *, source: str = "<settings>") -> DecoratorSettings:
    """Build settings from an already-parsed mapping."""
    if raw is None:
        return DecoratorSettings()
    if not isinstance(raw, dict):
        raise ConfigError(f"Settings in {source} must be a YAML mapping")

    rules_raw = raw.get(RULES_KEY, [])
    if rules_raw is None:
        rules_raw = []
    if not isinstance(rules_raw, list):
        raise ConfigError(f"{RULES_KEY} in {source} must be a list")

    rules: list[DecorationRule] = []
    for index, entry in enumerate(rules_raw):
        try:
            rules.append(DecorationRule.from_dict(entry))
        except ConfigError as exc:
            raise ConfigError(f"{source}: rules[{index}]: {exc}") from exc

    logger.debug("Loaded %d rule(s) from %s", len(rules), source)
    return DecoratorSettings(rules=tuple(rules))


def load_snapshot(path: Path) -> MetadataSnapshot:
    """Load a metadata snapshot (tags, frontmatter, basename) from a YAML file."""
    path = path.resolve()
    if not path.exists():
        raise ConfigError(f"Snapshot file not found: {path}")
    raw = _read_yaml(path)
    if raw is None:
        return MetadataSnapshot()
    try:
        return MetadataSnapshot.from_dict(raw)
    except ConfigError as exc:
        raise ConfigError(f"{path}: {exc}") from exc


def _read_yaml(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
