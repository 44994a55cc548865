"""Settings file defaults."""

from __future__ import annotations

SETTINGS_FILENAME: str = "linkdeco.yaml"
RULES_KEY: str = "rules"
CSS_CLASS_RECORD_KEY: str = "cssClass"
CSS_CLASS_ALIAS_KEY: str = "css_class"
