"""Branding text used by CLI help output."""

from __future__ import annotations

CLI_DESCRIPTION: str = (
    "Linkdeco - decorate links with icons, text tags and CSS classes\n"
    "derived from the linked note's tags and frontmatter."
)
