"""Tests for the linkdeco CLI."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import jsonschema
import pytest

from linkdeco.cli.main import main

YamlWriter = Callable[[str, Any], Path]

SCHEMA_PATH: Path = Path(__file__).resolve().parents[2] / "schemas" / "decoration.schema.json"

SETTINGS: dict[str, Any] = {
    "rules": [
        {"id": "todo", "target": "tag", "key": "todo", "icon": "check", "position": "before"},
        {
            "id": "status",
            "target": "frontmatter",
            "key": "status",
            "value": "done",
            "text": "`lambda v: v.upper()`",
            "cssClass": "is-done",
        },
    ]
}

SNAPSHOT: dict[str, Any] = {"tags": ["#todo"], "frontmatter": {"status": "done"}, "basename": "Plan"}


def test_validate_ok(write_yaml: YamlWriter, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate", "-s", str(write_yaml("linkdeco.yaml", SETTINGS))])
    assert code == 0
    assert "Settings are valid." in capsys.readouterr().out


def test_validate_reports_errors(write_yaml: YamlWriter, capsys: pytest.CaptureFixture[str]) -> None:
    path = write_yaml("linkdeco.yaml", {"rules": [{"id": "x", "target": "frontmatter", "key": "s", "value": "`(`"}]})
    code = main(["validate", "-s", str(path)])
    assert code == 2
    assert "[RULE006]" in capsys.readouterr().err


def test_decorate_json_matches_schema(write_yaml: YamlWriter, capsys: pytest.CaptureFixture[str]) -> None:
    settings = write_yaml("linkdeco.yaml", SETTINGS)
    snapshot = write_yaml("note.yaml", SNAPSHOT)

    code = main(["decorate", "-s", str(settings), "-m", str(snapshot)])

    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    jsonschema.validate(instance=payload, schema=json.loads(SCHEMA_PATH.read_text(encoding="utf-8")))
    assert payload["css_class"] == "is-done"
    assert [fragment["position"] for fragment in payload["fragments"]] == ["before", "after"]
    assert payload["fragments"][1]["text"] == "DONE"


def test_decorate_html(write_yaml: YamlWriter, capsys: pytest.CaptureFixture[str]) -> None:
    settings = write_yaml("linkdeco.yaml", SETTINGS)
    snapshot = write_yaml("note.yaml", SNAPSHOT)

    code = main(["decorate", "-s", str(settings), "-m", str(snapshot), "--html", "--surface", "live-preview"])

    assert code == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == 'class="lmd-link-text-lp is-done"'
    assert lines[1].startswith('<span class="lmd-decoration lmd-pos-before"')
    assert "<span>DONE</span>" in lines[2]


def test_decorate_bad_settings(write_yaml: YamlWriter, capsys: pytest.CaptureFixture[str]) -> None:
    settings = write_yaml("linkdeco.yaml", {"rules": [{"id": "x", "target": "nope"}]})
    snapshot = write_yaml("note.yaml", SNAPSHOT)

    code = main(["decorate", "-s", str(settings), "-m", str(snapshot)])

    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_decorate_missing_snapshot(write_yaml: YamlWriter, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    settings = write_yaml("linkdeco.yaml", SETTINGS)
    code = main(["decorate", "-s", str(settings), "-m", str(tmp_path / "missing.yaml")])
    assert code == 2
    assert "Snapshot file not found" in capsys.readouterr().err


def test_validate_undecodable_settings(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    path = tmp_path / "linkdeco.yaml"
    path.write_bytes(b"rules:\n  - id: \xff\n")
    code = main(["validate", "-s", str(path)])
    assert code == 2
    assert "[SET002]" in capsys.readouterr().err


def test_decorate_undecodable_settings(
    write_yaml: YamlWriter,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    settings = tmp_path / "linkdeco.yaml"
    settings.write_bytes(b"rules:\n  - id: \xff\n")
    snapshot = write_yaml("note.yaml", SNAPSHOT)

    code = main(["decorate", "-s", str(settings), "-m", str(snapshot)])

    assert code == 2
    assert "Configuration error" in capsys.readouterr().err


def test_decorate_html_escapes_link_classes(write_yaml: YamlWriter, capsys: pytest.CaptureFixture[str]) -> None:
    rule = {"id": "q", "target": "frontmatter", "key": "status", "cssClass": "`lambda v: 'a\"b'`"}
    settings = write_yaml("linkdeco.yaml", {"rules": [rule]})
    snapshot = write_yaml("note.yaml", SNAPSHOT)

    code = main(["decorate", "-s", str(settings), "-m", str(snapshot), "--html", "--surface", "reading"])

    assert code == 0
    assert capsys.readouterr().out.splitlines()[0] == 'class="lmd-link-text-rv a&quot;b"'
