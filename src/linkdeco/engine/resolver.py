"""Merge matched rules into one link class and an ordered fragment list."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Iterable

from linkdeco.constants.decoration import DECORATION_ID_LENGTH, DECORATION_ID_PREFIX
from linkdeco.model import DecorationFragment, DecorationRule, DecorationStyle, MatchedRule
from linkdeco.types import Position


def match_class(match: MatchedRule) -> str:
    """Dynamic class tokens first, then the literal class."""
    return _join((*match.dynamic_classes, match.css_class))


def resolve_decoration_style(matches: Iterable[MatchedRule]) -> DecorationStyle:
    """Combine the classes of every match, preserving match order."""
    return DecorationStyle(css_class=_join(match_class(match) for match in matches))


def decoration_id(rule: DecorationRule, position: Position, text: str, icon: str) -> str:
    """Deterministic identity of one rendered fragment."""
    blob = json.dumps([rule.id, position, text, icon], separators=(",", ":"), ensure_ascii=False)
    digest = hashlib.sha256(blob.encode("utf-8")).hexdigest()
    return f"{DECORATION_ID_PREFIX}{digest[:DECORATION_ID_LENGTH]}"


def build_fragments(matches: Iterable[MatchedRule]) -> tuple[DecorationFragment, ...]:
    """Return one fragment per match that carries text or an icon."""
    fragments: list[DecorationFragment] = []
    for match in matches:
        if not match.text and not match.icon:
            continue
        fragments.append(
            DecorationFragment(
                text=match.text or None,
                icon=match.icon or None,
                position=match.position,
                css_class=match_class(match),
                stable_id=decoration_id(match.rule, match.position, match.text, match.icon),
            )
        )
    return tuple(fragments)


def _join(tokens: Iterable[str]) -> str:
    return " ".join(token for token in tokens if token)
