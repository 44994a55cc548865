"""Rule, snapshot and decoration entities shared by the engine and its surfaces."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from linkdeco.constants.config import CSS_CLASS_ALIAS_KEY, CSS_CLASS_RECORD_KEY
from linkdeco.constants.decoration import (
    DEFAULT_POSITION,
    DEFAULT_TARGET,
    VALID_POSITIONS,
    VALID_TARGETS,
)
from linkdeco.exceptions import ConfigError
from linkdeco.types import JsonObject, Position, Target


@dataclass(frozen=True)
class DecorationRule:
    """User-authored rule: a match condition plus the decoration it produces.

    ``value``, ``text``, ``icon`` and ``css_class`` hold either a literal or a
    backtick-wrapped expression. For ``target == "metadata"`` the ``value``
    holds a whole script and ``key``/``position`` are ignored.
    """

    id: str
    target: Target = DEFAULT_TARGET
    key: str = ""
    value: str = ""
    text: str = ""
    icon: str = ""
    position: Position = DEFAULT_POSITION
    css_class: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> DecorationRule:
        """Build a rule from its persisted record shape.

        Raises ConfigError on wrong field types or unknown enum values.
        """
        if not isinstance(raw, Mapping):
            raise ConfigError(f"rule record must be a mapping, got {type(raw).__name__}")

        css_class = raw.get(CSS_CLASS_RECORD_KEY, raw.get(CSS_CLASS_ALIAS_KEY, ""))
        target = raw.get("target", DEFAULT_TARGET)
        position = raw.get("position") or DEFAULT_POSITION

        if not isinstance(target, str) or target not in VALID_TARGETS:
            raise ConfigError(f"rule target must be one of {sorted(VALID_TARGETS)}, got {target!r}")
        if not isinstance(position, str) or position not in VALID_POSITIONS:
            raise ConfigError(f"rule position must be one of {sorted(VALID_POSITIONS)}, got {position!r}")

        return cls(
            id=_string_field(raw.get("id", ""), "id"),
            target=target,  # type: ignore[arg-type]
            key=_string_field(raw.get("key", ""), "key"),
            value=_string_field(raw.get("value", ""), "value"),
            text=_string_field(raw.get("text", ""), "text"),
            icon=_string_field(raw.get("icon", ""), "icon"),
            position=position,  # type: ignore[arg-type]
            css_class=_string_field(css_class, CSS_CLASS_RECORD_KEY),
        )

    def to_dict(self) -> JsonObject:
        """Serialize to the persisted record shape."""
        return {
            "id": self.id,
            "target": self.target,
            "key": self.key,
            "value": self.value,
            "text": self.text,
            "icon": self.icon,
            "position": self.position,
            CSS_CLASS_RECORD_KEY: self.css_class,
        }


@dataclass(frozen=True)
class MetadataSnapshot:
    """Read-only view of one linked note's indexed metadata."""

    tags: tuple[str, ...] = ()
    frontmatter: Mapping[str, Any] = field(default_factory=dict)
    basename: str = ""

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> MetadataSnapshot:
        if not isinstance(raw, Mapping):
            raise ConfigError(f"metadata snapshot must be a mapping, got {type(raw).__name__}")

        tags = raw.get("tags") or []
        if not isinstance(tags, (list, tuple)) or not all(isinstance(tag, str) for tag in tags):
            raise ConfigError("snapshot tags must be a list of strings")

        frontmatter = raw.get("frontmatter") or {}
        if not isinstance(frontmatter, Mapping):
            raise ConfigError("snapshot frontmatter must be a mapping")

        basename = raw.get("basename") or ""
        if not isinstance(basename, str):
            raise ConfigError("snapshot basename must be a string")

        return cls(tags=tuple(tags), frontmatter=dict(frontmatter), basename=basename)


@dataclass(frozen=True)
class MatchedRule:
    """A rule that applied to one snapshot, with its outputs resolved.

    ``css_class`` is the literal class carried over from the rule;
    ``dynamic_classes`` are tokens computed by expressions, in the order
    they were produced.
    """

    rule: DecorationRule
    text: str
    icon: str
    position: Position
    css_class: str
    dynamic_classes: tuple[str, ...] = ()

    @property
    def dynamic_css_class(self) -> str:
        return " ".join(token for token in self.dynamic_classes if token)

    def to_dict(self) -> JsonObject:
        return {
            "rule_id": self.rule.id,
            "target": self.rule.target,
            "position": self.position,
            "text": self.text,
            "icon": self.icon,
            "css_class": self.css_class,
            "dynamic_css_class": self.dynamic_css_class,
        }


@dataclass(frozen=True)
class DecorationFragment:
    """One renderable icon/text unit attached to one side of a link."""

    text: str | None
    icon: str | None
    position: Position
    css_class: str
    stable_id: str

    def to_dict(self) -> JsonObject:
        return {
            "text": self.text,
            "icon": self.icon,
            "position": self.position,
            "css_class": self.css_class,
            "stable_id": self.stable_id,
        }


@dataclass(frozen=True)
class DecorationStyle:
    """Combined CSS class string for the link element."""

    css_class: str = ""


@dataclass(frozen=True)
class DecorationOutcome:
    """Everything the presentation surfaces need to decorate one link."""

    css_class: str = ""
    fragments: tuple[DecorationFragment, ...] = ()
    matches: tuple[MatchedRule, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.matches

    def to_dict(self) -> JsonObject:
        return {
            "css_class": self.css_class,
            "fragments": [fragment.to_dict() for fragment in self.fragments],
            "matches": [match.to_dict() for match in self.matches],
        }


def _string_field(value: Any, name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"rule field '{name}' must be a string, got {type(value).__name__}")
    return value
