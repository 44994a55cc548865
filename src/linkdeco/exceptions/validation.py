"""Structured validation errors reported while authoring decorator settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationError:
    """One settings problem, located by file path, rule index and field name."""

    code: str
    path: str
    field: str
    message: str
    hint: str = ""
    rule_index: int | None = None

    @property
    def location(self) -> str:
        """Return ``path`` followed by a ``rules[N].field`` pointer when known."""
        pointer = ""
        if self.rule_index is not None:
            pointer = f"rules[{self.rule_index}]"
            if self.field:
                pointer = f"{pointer}.{self.field}"
        elif self.field:
            pointer = self.field
        if not pointer:
            return self.path
        if not self.path:
            return pointer
        return f"{self.path}:{pointer}"

    def format(self) -> str:
        """Format as a single line suitable for stderr."""
        parts = [f"[{self.code}]", self.location, self.message]
        if self.hint:
            parts.append(f"({self.hint})")
        return " ".join(part for part in parts if part)


def sort_errors(errors: list[ValidationError]) -> list[ValidationError]:
    """Order errors by rule position first so they read top to bottom."""
    return sorted(
        errors,
        key=lambda e: (e.path, -1 if e.rule_index is None else e.rule_index, e.field, e.code),
    )


def format_errors(errors: list[ValidationError]) -> str:
    return "\n".join(e.format() for e in sort_errors(errors))
