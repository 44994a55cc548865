"""Shared exception hierarchy for linkdeco."""

from __future__ import annotations

from .base import LinkDecoError
from .config import ConfigError
from .expression import ExpressionCompileError, ExpressionError, ExpressionRuntimeError

__all__ = [
    "ConfigError",
    "ExpressionCompileError",
    "ExpressionError",
    "ExpressionRuntimeError",
    "LinkDecoError",
]
