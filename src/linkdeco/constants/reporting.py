"""Output constants for CLI reporting."""

from __future__ import annotations

SCHEMA_VERSION: str = "1"
JSON_INDENT: int = 2
