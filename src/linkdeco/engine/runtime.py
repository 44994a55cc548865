"""Decoration engine: run every rule against one snapshot, in declaration order."""

from __future__ import annotations

import hashlib
import json
import logging
from collections.abc import Iterable

from linkdeco.constants.decoration import TARGET_METADATA
from linkdeco.engine.matcher import apply_rule
from linkdeco.engine.resolver import build_fragments, resolve_decoration_style
from linkdeco.engine.script import match_script
from linkdeco.model import DecorationOutcome, DecorationRule, MatchedRule, MetadataSnapshot

logger = logging.getLogger(__name__)


def find_matching_rules(
    rules: Iterable[DecorationRule],
    snapshot: MetadataSnapshot,
) -> list[MatchedRule]:
    """Return the matches of *rules* against *snapshot*, in rule order."""
    matches: list[MatchedRule] = []
    for rule in rules:
        if rule.target == TARGET_METADATA:
            matches.extend(match_script(rule, snapshot))
            continue
        matched = apply_rule(rule, snapshot)
        if matched is not None:
            matches.append(matched)
    return matches


def decorate(rules: Iterable[DecorationRule], snapshot: MetadataSnapshot) -> DecorationOutcome:
    """Resolve the full decoration for one link target."""
    matches = find_matching_rules(rules, snapshot)
    style = resolve_decoration_style(matches)
    return DecorationOutcome(
        css_class=style.css_class,
        fragments=build_fragments(matches),
        matches=tuple(matches),
    )


class DecorationEngine:
    """Holds one immutable rule set and decorates snapshots against it.

    The engine keeps no state between calls: the same snapshot always
    yields an identical outcome.
    """

    def __init__(self, rules: Iterable[DecorationRule] = ()) -> None:
        self._rules: tuple[DecorationRule, ...] = tuple(rules)
        logger.debug("Decoration engine loaded %d rule(s)", len(self._rules))

    @property
    def rules(self) -> tuple[DecorationRule, ...]:
        return self._rules

    @property
    def rule_count(self) -> int:
        """Number of loaded rules."""
        return len(self._rules)

    def find_matching_rules(self, snapshot: MetadataSnapshot) -> list[MatchedRule]:
        return find_matching_rules(self._rules, snapshot)

    def decorate(self, snapshot: MetadataSnapshot) -> DecorationOutcome:
        return decorate(self._rules, snapshot)

    def fingerprint(self) -> str:
        """Return a stable hash of the rule set for cache invalidation."""
        payload = [rule.to_dict() for rule in self._rules]
        blob = json.dumps(payload, sort_keys=True, separators=(",", ":")).encode("utf-8")
        return hashlib.sha256(blob).hexdigest()
