"""Classify rule fields as literals or backtick-wrapped expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from linkdeco.constants.decoration import EXPRESSION_DELIMITER, EXPRESSION_PATTERN


@dataclass(frozen=True)
class LiteralSource:
    """A field used verbatim."""

    text: str


@dataclass(frozen=True)
class ExpressionSource:
    """A field whose backtick wrapper has been removed, ready to compile."""

    code: str


FieldSource: TypeAlias = LiteralSource | ExpressionSource


def parse_field_source(raw: str) -> FieldSource:
    """Return an ExpressionSource when the whole field is wrapped in backticks.

    The wrapper must enclose at least one character; anything else,
    including the empty string, is a literal.
    """
    match = EXPRESSION_PATTERN.fullmatch(raw)
    if match is None:
        return LiteralSource(raw)
    return ExpressionSource(match.group(1))


def strip_script_wrapper(raw: str) -> str:
    """Trim a metadata script and drop one optional pair of enclosing backticks."""
    script = raw.strip()
    if len(script) >= 2 and script.startswith(EXPRESSION_DELIMITER) and script.endswith(EXPRESSION_DELIMITER):
        script = script[1:-1]
    return script
