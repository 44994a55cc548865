"""Tests for the decoration engine facade."""

from __future__ import annotations

import json
from collections.abc import Callable

from linkdeco.engine import DecorationEngine, decorate, find_matching_rules
from linkdeco.model import DecorationRule, MetadataSnapshot

SnapshotFactory = Callable[..., MetadataSnapshot]

RULES: tuple[DecorationRule, ...] = (
    DecorationRule(id="todo", target="tag", key="todo", icon="check-square", position="before"),
    DecorationRule(
        id="status",
        target="frontmatter",
        key="status",
        value="`lambda v: 'is-' + v`",
        text="`lambda v: v.upper()`",
        css_class="status-link",
    ),
    DecorationRule(
        id="script",
        target="metadata",
        value="`lambda meta: {'after': {'icon': 'flag'}, 'classname': 'flagged'}`",
    ),
    DecorationRule(id="broken", target="frontmatter", key="status", value="`(`", text="never"),
)


def _snapshot(make_snapshot: SnapshotFactory) -> MetadataSnapshot:
    return make_snapshot(tags=("#todo/today",), frontmatter={"status": "done"}, basename="Plan")


def test_matches_follow_rule_order(make_snapshot: SnapshotFactory) -> None:
    matches = find_matching_rules(RULES, _snapshot(make_snapshot))
    assert [m.rule.id for m in matches] == ["todo", "status", "script"]


def test_decorate_outcome(make_snapshot: SnapshotFactory) -> None:
    outcome = decorate(RULES, _snapshot(make_snapshot))

    assert outcome.css_class == "is-done status-link flagged"
    assert [(f.position, f.text, f.icon) for f in outcome.fragments] == [
        ("before", None, "check-square"),
        ("after", "DONE", None),
        ("after", None, "flag"),
    ]
    assert not outcome.is_empty


def test_no_rules_match(make_snapshot: SnapshotFactory) -> None:
    outcome = decorate(RULES[:2], make_snapshot())
    assert outcome.is_empty
    assert outcome.css_class == ""
    assert outcome.fragments == ()


def test_repeated_evaluation_is_identical(make_snapshot: SnapshotFactory) -> None:
    engine = DecorationEngine(RULES)
    snapshot = _snapshot(make_snapshot)
    first = engine.decorate(snapshot)
    second = engine.decorate(snapshot)
    assert first == second
    assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())


def test_engine_exposes_rules() -> None:
    engine = DecorationEngine(list(RULES))
    assert engine.rules == RULES
    assert engine.rule_count == 4


def test_fingerprint_is_stable_and_rule_sensitive() -> None:
    assert DecorationEngine(RULES).fingerprint() == DecorationEngine(RULES).fingerprint()
    assert DecorationEngine(RULES).fingerprint() != DecorationEngine(RULES[:1]).fingerprint()
    assert DecorationEngine(RULES).fingerprint() != DecorationEngine(tuple(reversed(RULES))).fingerprint()
