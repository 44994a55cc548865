"""Root exception for linkdeco."""

from __future__ import annotations


class LinkDecoError(Exception):
    """Base class for all linkdeco errors."""
