"""Stable validation error codes and allowed-key sets for settings validation."""

from __future__ import annotations

SET001: str = "SET001"  # settings file not found
SET002: str = "SET002"  # invalid YAML parse
SET003: str = "SET003"  # top-level value is not a mapping
SET004: str = "SET004"  # unknown top-level key
SET005: str = "SET005"  # `rules` is not a list

RULE001: str = "RULE001"  # rule entry is not a mapping
RULE002: str = "RULE002"  # unknown rule key
RULE003: str = "RULE003"  # invalid value type
RULE004: str = "RULE004"  # invalid enum value (target / position)
RULE005: str = "RULE005"  # duplicate rule id
RULE006: str = "RULE006"  # expression syntax error
RULE007: str = "RULE007"  # missing key for tag / frontmatter rule

ALLOWED_SETTINGS_KEYS: frozenset[str] = frozenset({"rules"})

ALLOWED_RULE_KEYS: frozenset[str] = frozenset(
    {
        "id",
        "target",
        "key",
        "value",
        "text",
        "icon",
        "position",
        "cssClass",
        "css_class",
    }
)

STRING_RULE_FIELDS: tuple[str, ...] = ("id", "key", "value", "text", "icon", "cssClass", "css_class")
TEMPLATE_RULE_FIELDS: tuple[str, ...] = ("value", "text", "icon", "cssClass", "css_class")
