"""Metadata-script rules: one callable receives the whole snapshot.

The script is a Python expression producing a callable, typically::

    lambda meta: {
        "before": {"icon": "star", "text": "!"},
        "classname": "is-done" if meta["frontmatter"].get("status") == "done" else "",
    }

``meta`` holds ``name``, ``frontmatter`` and ``tags`` (without the leading
``#``). The returned mapping may carry ``before`` and ``after`` sub-mappings
with ``icon``/``text`` and a shared ``classname``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from linkdeco.constants.decoration import (
    POSITION_AFTER,
    POSITION_BEFORE,
    SCRIPT_RESULT_CLASSNAME_KEY,
    SCRIPT_RESULT_ICON_KEY,
    SCRIPT_RESULT_TEXT_KEY,
    TAG_ROOT_MARKER,
    UNTITLED_NAME,
)
from linkdeco.expressions import EvaluationFailure, call_script, strip_script_wrapper, stringify
from linkdeco.model import DecorationRule, MatchedRule, MetadataSnapshot
from linkdeco.types import Position

logger = logging.getLogger(__name__)


def build_script_input(snapshot: MetadataSnapshot) -> dict[str, Any]:
    """Return the ``meta`` mapping handed to metadata scripts."""
    return {
        "name": snapshot.basename or UNTITLED_NAME,
        "frontmatter": dict(snapshot.frontmatter),
        "tags": [tag.removeprefix(TAG_ROOT_MARKER) for tag in snapshot.tags],
    }


def match_script(rule: DecorationRule, snapshot: MetadataSnapshot) -> list[MatchedRule]:
    """Run a metadata-script rule and turn its result into zero to two matches."""
    script = strip_script_wrapper(rule.value)
    result = call_script(script, build_script_input(snapshot))

    if isinstance(result, EvaluationFailure) or not result:
        return []
    if not isinstance(result, Mapping):
        logger.debug(
            "Rule %s: metadata script returned %s, expected a mapping",
            rule.id,
            type(result).__name__,
        )
        return []

    classname = _text_value(result.get(SCRIPT_RESULT_CLASSNAME_KEY))
    dynamic_classes = (classname,) if classname else ()

    matches: list[MatchedRule] = []
    for position in (POSITION_BEFORE, POSITION_AFTER):
        side = result.get(position)
        if side is None:
            continue
        if not isinstance(side, Mapping):
            logger.debug("Rule %s: ignoring non-mapping %r entry in script result", rule.id, position)
            continue
        matches.append(
            _script_match(
                rule,
                position,
                icon=_text_value(side.get(SCRIPT_RESULT_ICON_KEY)),
                text=_text_value(side.get(SCRIPT_RESULT_TEXT_KEY)),
                dynamic_classes=dynamic_classes,
            )
        )

    if not matches and classname:
        matches.append(_script_match(rule, POSITION_AFTER, icon="", text="", dynamic_classes=dynamic_classes))

    return matches


def _script_match(
    rule: DecorationRule,
    position: Position,
    *,
    icon: str,
    text: str,
    dynamic_classes: tuple[str, ...],
) -> MatchedRule:
    return MatchedRule(
        rule=rule,
        text=text,
        icon=icon,
        position=position,
        css_class="",
        dynamic_classes=dynamic_classes,
    )


def _text_value(value: Any) -> str:
    if not value:
        return ""
    return stringify(value)
