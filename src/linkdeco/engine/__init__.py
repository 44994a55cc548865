"""Rule matching and decoration resolution."""

from __future__ import annotations

from linkdeco.engine.matcher import RuleMatch, apply_rule, match_rule, match_tag, normalize_tag
from linkdeco.engine.resolver import (
    build_fragments,
    decoration_id,
    match_class,
    resolve_decoration_style,
)
from linkdeco.engine.runtime import DecorationEngine, decorate, find_matching_rules
from linkdeco.engine.script import build_script_input, match_script

__all__ = [
    "DecorationEngine",
    "RuleMatch",
    "apply_rule",
    "build_fragments",
    "build_script_input",
    "decorate",
    "decoration_id",
    "find_matching_rules",
    "match_class",
    "match_rule",
    "match_script",
    "match_tag",
    "normalize_tag",
    "resolve_decoration_style",
]
