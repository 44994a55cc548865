"""Shared type aliases for linkdeco."""

from .common import JsonObject, JsonScalar, JsonValue, Position, Target

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "Position",
    "Target",
]
