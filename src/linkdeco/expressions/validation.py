"""Authoring-time syntax checks for rule expressions.

Sources are parsed, never executed.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass

from linkdeco.expressions.evaluator import describe_error, prepare_source
from linkdeco.expressions.source import ExpressionSource, parse_field_source, strip_script_wrapper


@dataclass(frozen=True)
class SourceValidation:
    valid: bool
    error: str | None = None


def validate_source(source: str) -> SourceValidation:
    """Check that *source* parses as a single Python expression."""
    try:
        ast.parse(prepare_source(source), mode="eval")
    except (SyntaxError, ValueError) as exc:
        return SourceValidation(valid=False, error=describe_error(exc))
    return SourceValidation(valid=True)


def validate_field(raw: str) -> SourceValidation:
    """Validate an output or value field; literal fields are always valid."""
    parsed = parse_field_source(raw)
    if isinstance(parsed, ExpressionSource):
        return validate_source(parsed.code)
    return SourceValidation(valid=True)


def validate_script(raw: str) -> SourceValidation:
    """Validate a metadata script, with or without its backtick wrapper."""
    return validate_source(strip_script_wrapper(raw))
