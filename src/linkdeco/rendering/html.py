"""HTML markup for decoration fragments.

Icons are emitted as empty placeholders carrying the icon id; drawing the
glyph is left to the host.
"""

from __future__ import annotations

from collections.abc import Iterable
from html import escape
from typing import Literal, TypeAlias

from linkdeco.constants.decoration import (
    CLASS_DECORATION,
    CLASS_EDITING,
    CLASS_ICON,
    CLASS_LINK_TEXT_LIVE_PREVIEW,
    CLASS_LINK_TEXT_READING,
    CLASS_POSITION_PREFIX,
    DECORATION_ID_ATTRIBUTE,
    ICON_ATTRIBUTE,
    POSITION_BEFORE,
)
from linkdeco.model import DecorationFragment

Surface: TypeAlias = Literal["reading", "live-preview"]

_LINK_BASE_CLASSES: dict[str, str] = {
    "reading": CLASS_LINK_TEXT_READING,
    "live-preview": CLASS_LINK_TEXT_LIVE_PREVIEW,
}


def render_fragment(fragment: DecorationFragment, *, editing: bool = False) -> str:
    """Render one fragment as a ``<span>`` element."""
    classes = [CLASS_DECORATION, f"{CLASS_POSITION_PREFIX}{fragment.position}"]
    if editing:
        classes.append(CLASS_EDITING)
    if fragment.css_class:
        classes.append(fragment.css_class)

    attributes = f'class="{escape(" ".join(classes))}"'
    if fragment.stable_id:
        attributes += f' {DECORATION_ID_ATTRIBUTE}="{escape(fragment.stable_id)}"'

    parts: list[str] = []
    if fragment.position == POSITION_BEFORE and fragment.icon and fragment.text:
        parts.append(_icon(fragment.icon))
        parts.append(_text(fragment.text))
    else:
        if fragment.text:
            parts.append(_text(fragment.text))
        if fragment.icon:
            parts.append(_icon(fragment.icon))

    return f"<span {attributes}>{''.join(parts)}</span>"


def render_fragments(fragments: Iterable[DecorationFragment], *, editing: bool = False) -> list[str]:
    return [render_fragment(fragment, editing=editing) for fragment in fragments]


def link_classes(css_class: str, *, surface: Surface = "reading") -> str:
    """Class attribute for the decorated link itself."""
    base = _LINK_BASE_CLASSES[surface]
    return f"{base} {css_class}" if css_class else base


def pending_fragments(
    fragments: Iterable[DecorationFragment],
    rendered_ids: Iterable[str],
) -> list[DecorationFragment]:
    """Drop fragments already present next to the link, keeping order."""
    seen = set(rendered_ids)
    pending: list[DecorationFragment] = []
    for fragment in fragments:
        if fragment.stable_id in seen:
            continue
        seen.add(fragment.stable_id)
        pending.append(fragment)
    return pending


def _icon(icon: str) -> str:
    return f'<span class="{CLASS_ICON}" {ICON_ATTRIBUTE}="{escape(icon)}"></span>'


def _text(text: str) -> str:
    return f"<span>{escape(text)}</span>"
