"""Compile and run user-authored rule expressions.

An expression is a single Python expression. It is evaluated in a fresh
namespace holding a curated builtins table and the input value bound to
``value`` (or another argument name). When the expression evaluates to a
callable, such as ``lambda v: v > 5``, the callable is invoked with the
input and its return value is the result.

Every failure is caught here and returned as an ``EvaluationFailure``;
callers treat it as "does not apply". Expressions are a convenience for a
trusted user, not a security boundary.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from types import CodeType
from typing import Any, Literal

from linkdeco.constants.decoration import DEFAULT_EXPRESSION_ARGUMENT
from linkdeco.constants.evaluation import EXPRESSION_FILENAME, SAFE_BUILTINS, SCRIPT_FILENAME
from linkdeco.exceptions import ExpressionCompileError, ExpressionError, ExpressionRuntimeError
from linkdeco.expressions.source import ExpressionSource, parse_field_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationFailure:
    """Why an expression produced no value."""

    source: str
    message: str
    stage: Literal["compile", "runtime"]


def prepare_source(source: str) -> str:
    """Wrap the expression in parentheses so it may span several lines."""
    return f"({source.strip()}\n)"


def compile_expression(source: str, filename: str = EXPRESSION_FILENAME) -> CodeType:
    """Compile *source* in eval mode. Raises ExpressionCompileError."""
    try:
        return compile(prepare_source(source), filename, "eval")
    except (SyntaxError, ValueError) as exc:
        raise ExpressionCompileError(source, describe_error(exc)) from exc


def describe_error(exc: BaseException) -> str:
    """Return the message shown to rule authors for *exc*."""
    if isinstance(exc, SyntaxError):
        return exc.msg or "invalid syntax"
    detail = str(exc)
    name = type(exc).__name__
    return f"{name}: {detail}" if detail else name


def evaluate(
    source: str,
    value: Any,
    *,
    argument: str = DEFAULT_EXPRESSION_ARGUMENT,
) -> Any | EvaluationFailure:
    """Evaluate *source* against *value*, returning the result or a failure."""
    try:
        code = compile_expression(source)
        result = _run(code, source, {argument: _isolate(value, source)})
        if callable(result):
            result = _call(result, source, _isolate(value, source))
        return result
    except ExpressionError as exc:
        return _failure(exc, "Error evaluating rule expression")


def call_script(source: str, payload: Any) -> Any | EvaluationFailure:
    """Evaluate a metadata script, which must produce a callable, and call it."""
    try:
        code = compile_expression(source, SCRIPT_FILENAME)
        func = _run(code, source, {})
        if not callable(func):
            raise ExpressionRuntimeError(
                source,
                f"script did not evaluate to a callable (got {type(func).__name__})",
            )
        return _call(func, source, _isolate(payload, source))
    except ExpressionError as exc:
        return _failure(exc, "Error evaluating metadata script")


def evaluate_template(source: str, value: Any) -> str | None:
    """Resolve a backtick-wrapped output field against *value*.

    Returns None for literal fields and for failed evaluations, so the
    caller keeps the literal. A None result becomes the empty string.
    """
    parsed = parse_field_source(source)
    if not isinstance(parsed, ExpressionSource):
        return None
    result = evaluate(parsed.code, value)
    if isinstance(result, EvaluationFailure):
        return None
    if result is None:
        return ""
    return stringify(result)


def stringify(value: Any) -> str:
    """Convert a property or expression result to the string form rules compare against."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else stringify(item) for item in value)
    return str(value)


def _run(code: CodeType, source: str, bindings: dict[str, Any]) -> Any:
    namespace: dict[str, Any] = {"__builtins__": dict(SAFE_BUILTINS), **bindings}
    try:
        return eval(code, namespace)  # noqa: S307
    except Exception as exc:
        raise ExpressionRuntimeError(source, describe_error(exc)) from exc


def _call(func: Any, source: str, argument: Any) -> Any:
    try:
        return func(argument)
    except Exception as exc:
        raise ExpressionRuntimeError(source, describe_error(exc)) from exc


def _isolate(value: Any, source: str) -> Any:
    """Give user code its own copy so the caller's snapshot stays untouched."""
    try:
        return copy.deepcopy(value)
    except Exception as exc:
        raise ExpressionRuntimeError(source, f"input cannot be copied: {describe_error(exc)}") from exc


def _failure(exc: ExpressionError, context: str) -> EvaluationFailure:
    stage: Literal["compile", "runtime"] = "compile" if isinstance(exc, ExpressionCompileError) else "runtime"
    source = exc.source
    logger.warning("%s %r: %s", context, source, exc.message)
    return EvaluationFailure(source=source, message=exc.message, stage=stage)
