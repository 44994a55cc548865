"""Shared pytest fixtures for rule and snapshot construction."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from linkdeco.model import DecorationRule, MetadataSnapshot


@pytest.fixture()
def make_rule() -> Callable[..., DecorationRule]:
    """Return a factory for rules with sensible defaults."""

    def _make(**overrides: Any) -> DecorationRule:
        fields: dict[str, Any] = {"id": "rule-1", "target": "frontmatter", "key": "status"}
        fields.update(overrides)
        return DecorationRule(**fields)

    return _make


@pytest.fixture()
def make_snapshot() -> Callable[..., MetadataSnapshot]:
    """Return a factory for metadata snapshots."""

    def _make(
        *,
        tags: tuple[str, ...] = (),
        frontmatter: dict[str, Any] | None = None,
        basename: str = "Note",
    ) -> MetadataSnapshot:
        return MetadataSnapshot(tags=tags, frontmatter=frontmatter or {}, basename=basename)

    return _make


@pytest.fixture()
def write_yaml(tmp_path: Path) -> Callable[[str, Any], Path]:
    """Return a helper that dumps a payload to a YAML file under tmp_path."""

    def _write(name: str, payload: Any) -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
        return path

    return _write
