"""Core data models for linkdeco."""

from .entities import (
    DecorationFragment,
    DecorationOutcome,
    DecorationRule,
    DecorationStyle,
    MatchedRule,
    MetadataSnapshot,
)

__all__ = [
    "DecorationFragment",
    "DecorationOutcome",
    "DecorationRule",
    "DecorationStyle",
    "MatchedRule",
    "MetadataSnapshot",
]
