"""Tests for class merging and fragment construction."""

from __future__ import annotations

from linkdeco.engine import build_fragments, decoration_id, match_class, resolve_decoration_style
from linkdeco.model import DecorationRule, DecorationStyle, MatchedRule

RULE = DecorationRule(id="r1", target="frontmatter", key="status")


def _match(
    *,
    text: str = "",
    icon: str = "",
    css_class: str = "",
    dynamic: tuple[str, ...] = (),
    position: str = "after",
    rule: DecorationRule = RULE,
) -> MatchedRule:
    return MatchedRule(
        rule=rule,
        text=text,
        icon=icon,
        position=position,  # type: ignore[arg-type]
        css_class=css_class,
        dynamic_classes=dynamic,
    )


class TestResolveDecorationStyle:
    """Class string merging."""

    def test_empty_list(self) -> None:
        assert resolve_decoration_style([]) == DecorationStyle(css_class="")

    def test_dynamic_before_literal(self) -> None:
        assert match_class(_match(css_class="lit", dynamic=("dyn-a", "dyn-b"))) == "dyn-a dyn-b lit"

    def test_joins_in_match_order_skipping_empties(self) -> None:
        matches = [
            _match(css_class="first"),
            _match(),
            _match(dynamic=("second",)),
            _match(css_class="fourth", dynamic=("", "third")),
        ]
        assert resolve_decoration_style(matches).css_class == "first second third fourth"

    def test_is_idempotent(self) -> None:
        matches = [_match(css_class="a"), _match(dynamic=("b",))]
        assert resolve_decoration_style(matches) == resolve_decoration_style(matches)


class TestBuildFragments:
    """Fragments for matches with visible content."""

    def test_style_only_matches_have_no_fragment(self) -> None:
        assert build_fragments([_match(css_class="x")]) == ()

    def test_fragment_fields(self) -> None:
        (fragment,) = build_fragments([_match(icon="star", css_class="lit", dynamic=("dyn",), position="before")])
        assert fragment.text is None
        assert fragment.icon == "star"
        assert fragment.position == "before"
        assert fragment.css_class == "dyn lit"
        assert fragment.stable_id == decoration_id(RULE, "before", "", "star")

    def test_order_is_preserved(self) -> None:
        fragments = build_fragments([_match(text="one"), _match(icon="two"), _match(text="three")])
        assert [f.text or f.icon for f in fragments] == ["one", "two", "three"]


class TestDecorationId:
    """Stable identity of fragments."""

    def test_is_deterministic(self) -> None:
        assert decoration_id(RULE, "after", "!", "star") == decoration_id(RULE, "after", "!", "star")

    def test_shape(self) -> None:
        stable_id = decoration_id(RULE, "after", "!", "star")
        assert stable_id.startswith("lmd-")
        assert len(stable_id) == len("lmd-") + 16

    def test_depends_on_content_and_rule(self) -> None:
        other_rule = DecorationRule(id="r2")
        base = decoration_id(RULE, "after", "!", "star")
        assert decoration_id(RULE, "after", "?", "star") != base
        assert decoration_id(RULE, "after", "!", "flag") != base
        assert decoration_id(RULE, "before", "!", "star") != base
        assert decoration_id(other_rule, "after", "!", "star") != base
