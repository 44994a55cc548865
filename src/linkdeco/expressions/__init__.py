"""Parsing, evaluation and validation of user-authored rule expressions."""

from __future__ import annotations

from linkdeco.expressions.evaluator import (
    EvaluationFailure,
    call_script,
    evaluate,
    evaluate_template,
    stringify,
)
from linkdeco.expressions.source import (
    ExpressionSource,
    FieldSource,
    LiteralSource,
    parse_field_source,
    strip_script_wrapper,
)
from linkdeco.expressions.validation import (
    SourceValidation,
    validate_field,
    validate_script,
    validate_source,
)

__all__ = [
    "EvaluationFailure",
    "ExpressionSource",
    "FieldSource",
    "LiteralSource",
    "SourceValidation",
    "call_script",
    "evaluate",
    "evaluate_template",
    "parse_field_source",
    "strip_script_wrapper",
    "stringify",
    "validate_field",
    "validate_script",
    "validate_source",
]
