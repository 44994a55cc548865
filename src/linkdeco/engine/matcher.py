"""Tag and frontmatter rule matching."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from linkdeco.constants.decoration import (
    TAG_PATH_SEPARATOR,
    TAG_ROOT_MARKER,
    TARGET_FRONTMATTER,
    TARGET_TAG,
)
from linkdeco.expressions import (
    EvaluationFailure,
    ExpressionSource,
    evaluate,
    evaluate_template,
    parse_field_source,
    stringify,
)
from linkdeco.model import DecorationRule, MatchedRule, MetadataSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleMatch:
    """Whether a rule applies, plus the class its value expression produced."""

    matched: bool
    dynamic_class: str | None = None


NO_MATCH = RuleMatch(matched=False)


def normalize_tag(key: str) -> str:
    """Prefix *key* with the tag root marker unless it already has one."""
    return key if key.startswith(TAG_ROOT_MARKER) else f"{TAG_ROOT_MARKER}{key}"


def match_tag(key: str, tags: tuple[str, ...]) -> bool:
    """True when a tag equals *key* or is nested beneath it."""
    target = normalize_tag(key)
    prefix = f"{target}{TAG_PATH_SEPARATOR}"
    return any(tag == target or tag.startswith(prefix) for tag in tags)


def match_rule(rule: DecorationRule, snapshot: MetadataSnapshot) -> RuleMatch:
    """Decide whether a tag or frontmatter rule applies to *snapshot*."""
    if rule.target == TARGET_TAG:
        return RuleMatch(matched=match_tag(rule.key, snapshot.tags))

    if rule.target != TARGET_FRONTMATTER:
        return NO_MATCH

    frontmatter = snapshot.frontmatter
    if rule.key not in frontmatter:
        return NO_MATCH
    prop_value = frontmatter[rule.key]

    if not rule.value:
        return RuleMatch(matched=True)

    source = parse_field_source(rule.value)
    if isinstance(source, ExpressionSource):
        return _match_expression(rule, source.code, prop_value)

    return RuleMatch(matched=stringify(prop_value) == rule.value)


def apply_rule(rule: DecorationRule, snapshot: MetadataSnapshot) -> MatchedRule | None:
    """Match a tag or frontmatter rule and resolve its outputs, or return None."""
    result = match_rule(rule, snapshot)
    if not result.matched:
        return None

    text = rule.text
    icon = rule.icon
    css_class = rule.css_class
    dynamic_classes: list[str] = []
    if result.dynamic_class:
        dynamic_classes.append(result.dynamic_class)

    if rule.target == TARGET_FRONTMATTER and rule.key in snapshot.frontmatter:
        prop_value = snapshot.frontmatter[rule.key]

        dynamic_text = evaluate_template(rule.text, prop_value)
        if dynamic_text is not None:
            text = dynamic_text

        dynamic_icon = evaluate_template(rule.icon, prop_value)
        if dynamic_icon is not None:
            icon = dynamic_icon

        dynamic_css = evaluate_template(rule.css_class, prop_value)
        if dynamic_css is not None:
            dynamic_classes.append(dynamic_css)
            # the expression source must not leak into the class attribute
            css_class = ""

    return MatchedRule(
        rule=rule,
        text=text,
        icon=icon,
        position=rule.position,
        css_class=css_class,
        dynamic_classes=tuple(dynamic_classes),
    )


def _match_expression(rule: DecorationRule, code: str, prop_value: object) -> RuleMatch:
    result = evaluate(code, prop_value)
    if isinstance(result, EvaluationFailure):
        return NO_MATCH
    if isinstance(result, str) and result:
        return RuleMatch(matched=True, dynamic_class=result)
    if result:
        return RuleMatch(matched=True)
    logger.debug("Rule %s: value expression returned falsy %r", rule.id, result)
    return NO_MATCH
