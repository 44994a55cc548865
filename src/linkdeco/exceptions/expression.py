"""Expression evaluation exceptions.

These never escape the engine: the evaluator converts them into
``EvaluationFailure`` values at the evaluation boundary.
"""

from __future__ import annotations

from linkdeco.exceptions.base import LinkDecoError


class ExpressionError(LinkDecoError):
    """Base class for user expression failures."""

    def __init__(self, source: str, message: str) -> None:
        super().__init__(message)
        self.source = source
        self.message = message


class ExpressionCompileError(ExpressionError):
    """Raised when an expression cannot be compiled."""


class ExpressionRuntimeError(ExpressionError):
    """Raised when a compiled expression fails while running."""
