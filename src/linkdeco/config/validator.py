"""Collect-all validation of decorator settings files.

Used by ``linkdeco validate`` and by authoring tools that highlight broken
rules. Nothing here raises, and no rule expression is executed.
"""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from linkdeco.constants.config import CSS_CLASS_ALIAS_KEY, CSS_CLASS_RECORD_KEY, RULES_KEY
from linkdeco.constants.decoration import TARGET_METADATA, VALID_POSITIONS, VALID_TARGETS
from linkdeco.constants.validation import (
    ALLOWED_RULE_KEYS,
    ALLOWED_SETTINGS_KEYS,
    RULE001,
    RULE002,
    RULE003,
    RULE004,
    RULE005,
    RULE006,
    RULE007,
    SET001,
    SET002,
    SET003,
    SET004,
    SET005,
    STRING_RULE_FIELDS,
    TEMPLATE_RULE_FIELDS,
)
from linkdeco.exceptions.validation import ValidationError
from linkdeco.expressions import validate_field, validate_script


def validate_settings_file(path: Path, *, settings_explicit: bool = True) -> list[ValidationError]:
    """Validate a settings file and return every problem found."""
    errors: list[ValidationError] = []
    path = path.resolve()
    path_str = str(path)

    if not path.exists():
        if settings_explicit:
            errors.append(
                ValidationError(
                    code=SET001,
                    path=path_str,
                    field="",
                    message=f"settings file not found: {path}",
                )
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        errors.append(
            ValidationError(
                code=SET002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=SET003,
                path=path_str,
                field="",
                message=f"settings must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(k) for k in raw.keys()):
        if key not in ALLOWED_SETTINGS_KEYS:
            errors.append(
                ValidationError(
                    code=SET004,
                    path=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_SETTINGS_KEYS),
                )
            )

    rules_raw = raw.get(RULES_KEY)
    if rules_raw is None:
        return errors
    if not isinstance(rules_raw, list):
        errors.append(
            ValidationError(
                code=SET005,
                path=path_str,
                field=RULES_KEY,
                message=f"`{RULES_KEY}` must be a list of rule mappings",
            )
        )
        return errors

    seen_ids: dict[str, int] = {}
    for index, entry in enumerate(rules_raw):
        errors.extend(validate_rule_record(entry, index=index, path=path_str, seen_ids=seen_ids))

    return errors


def validate_rule_record(
    entry: Any,
    *,
    index: int,
    path: str = "",
    seen_ids: dict[str, int] | None = None,
) -> list[ValidationError]:
    """Validate one persisted rule record."""
    errors: list[ValidationError] = []

    def add(code: str, field: str, message: str, hint: str = "") -> None:
        errors.append(
            ValidationError(code=code, path=path, field=field, message=message, hint=hint, rule_index=index)
        )

    if not isinstance(entry, dict):
        add(RULE001, "", f"rule must be a mapping, got {type(entry).__name__}")
        return errors

    for key in sorted(str(k) for k in entry.keys()):
        if key not in ALLOWED_RULE_KEYS:
            add(RULE002, key, f"unknown rule key `{key}`", _suggest_key(key, ALLOWED_RULE_KEYS))

    bad_types: set[str] = set()
    for name in STRING_RULE_FIELDS:
        value = entry.get(name)
        if value is not None and not isinstance(value, str):
            bad_types.add(name)
            add(RULE003, name, f"`{name}` must be a string, got {type(value).__name__}")

    target = entry.get("target", "tag")
    target_ok = isinstance(target, str) and target in VALID_TARGETS
    if not target_ok:
        add(RULE004, "target", "invalid value for `target`", f"expected one of: {', '.join(sorted(VALID_TARGETS))}")

    position = entry.get("position")
    if position not in (None, "") and not (isinstance(position, str) and position in VALID_POSITIONS):
        add(
            RULE004,
            "position",
            "invalid value for `position`",
            f"expected one of: {', '.join(sorted(VALID_POSITIONS))}",
        )

    if CSS_CLASS_RECORD_KEY in entry and CSS_CLASS_ALIAS_KEY in entry:
        add(RULE002, CSS_CLASS_ALIAS_KEY, f"both `{CSS_CLASS_RECORD_KEY}` and `{CSS_CLASS_ALIAS_KEY}` given")

    rule_id = entry.get("id")
    if isinstance(rule_id, str) and rule_id and seen_ids is not None:
        first = seen_ids.get(rule_id)
        if first is not None:
            add(RULE005, "id", f"duplicate rule id `{rule_id}`", f"first defined at rules[{first}]")
        else:
            seen_ids[rule_id] = index

    if target_ok and target != TARGET_METADATA:
        key = entry.get("key")
        if "key" not in bad_types and not (isinstance(key, str) and key.strip()):
            add(RULE007, "key", f"`key` is required for {target} rules")

    for name in TEMPLATE_RULE_FIELDS:
        value = entry.get(name)
        if name in bad_types or not isinstance(value, str) or not value:
            continue
        if name == "value" and target == TARGET_METADATA:
            check = validate_script(value)
        else:
            check = validate_field(value)
        if not check.valid:
            add(RULE006, name, f"expression syntax error: {check.error}")

    return errors


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
