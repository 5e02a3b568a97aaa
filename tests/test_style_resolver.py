"""Tests for card style resolution."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from paperdream.models.design import (
    DesignSettings,
    FooterSettings,
    HeaderSettings,
    ResolvedCardStyle,
)
from paperdream.styling import (
    CARD_REGIONS,
    DEFAULT_CARD_STYLE,
    resolve_card_style,
    resolve_footer,
    resolve_render_spec,
    tint,
)


class TestDefaults:
    @pytest.mark.parametrize("design", [None, {}, {"cardStyle": {}}, DesignSettings()])
    def test_empty_design_resolves_to_defaults(self, design) -> None:
        """Nothing set means every region comes from the default table."""
        style = resolve_card_style(design)

        assert style.as_dict() == dict(DEFAULT_CARD_STYLE)

    def test_every_region_is_populated(self) -> None:
        style = resolve_card_style({"cardStyle": {"accent": "#123456"}})

        values = style.as_dict()
        assert set(values) == set(CARD_REGIONS)
        assert all(isinstance(v, str) and v for v in values.values())


class TestPrecedence:
    def test_card_style_beats_legacy_fields(self) -> None:
        """cardStyle.background wins over backgroundColor."""
        style = resolve_card_style(
            {"backgroundColor": "#000000", "cardStyle": {"background": "#ff0000"}}
        )

        assert style.background == "#ff0000"

    def test_legacy_fields_beat_defaults(self, legacy_design) -> None:
        style = resolve_card_style(legacy_design)

        assert style.background == "#000000"
        assert style.body_text == "#eeeeee"
        assert style.title_bg == "#112233"
        assert style.border == DEFAULT_CARD_STYLE["border"]
        assert style.accent == DEFAULT_CARD_STYLE["accent"]
        assert style.image_frame == DEFAULT_CARD_STYLE["imageFrame"]

    def test_title_text_prefers_header_text_color(self) -> None:
        style = resolve_card_style({"textColor": "#aaaaaa", "header": {"textColor": "#bbbbbb"}})

        assert style.title_text == "#bbbbbb"
        assert style.body_text == "#aaaaaa"

    def test_title_text_uses_text_color_without_header(self) -> None:
        style = resolve_card_style({"textColor": "#abcabc"})

        assert style.title_text == "#abcabc"

    def test_title_text_falls_back_to_text_color(self) -> None:
        """An empty header.textColor counts as unset."""
        style = resolve_card_style({"textColor": "#aaaaaa", "header": {"textColor": ""}})

        assert style.title_text == "#aaaaaa"

    def test_empty_override_is_ignored(self) -> None:
        style = resolve_card_style({"backgroundColor": "#000000", "cardStyle": {"background": ""}})

        assert style.background == "#000000"

    def test_accepts_pydantic_model(self) -> None:
        design = DesignSettings.model_validate(
            {"backgroundColor": "#010101", "cardStyle": {"titleBg": "#020202"}}
        )

        style = resolve_card_style(design)

        assert style.background == "#010101"
        assert style.title_bg == "#020202"

    def test_snake_case_model_input_resolves_like_camel_case(self) -> None:
        snake = DesignSettings(text_color="#abcdef", card_style={"body_text": "#fedcba"})
        camel = {"textColor": "#abcdef", "cardStyle": {"bodyText": "#fedcba"}}

        assert resolve_card_style(snake) == resolve_card_style(camel)


class TestTotality:
    @pytest.mark.parametrize(
        "design",
        [
            {"cardStyle": "red"},
            {"cardStyle": None},
            {"header": ["not", "a", "mapping"]},
            {"backgroundColor": 42},
            {"cardStyle": {"background": None, "accent": 7}},
            {"footer": "hidden"},
            "not a mapping",
            12,
        ],
    )
    def test_malformed_input_never_raises(self, design) -> None:
        """Malformed sections are treated as absent."""
        spec = resolve_render_spec(design)

        assert spec.style.as_dict() == dict(DEFAULT_CARD_STYLE)

    def test_unknown_keys_are_ignored(self) -> None:
        style = resolve_card_style({"cardStyle": {"sparkle": "#ffffff"}, "mystery": 1})

        assert style.as_dict() == dict(DEFAULT_CARD_STYLE)


class TestIdempotence:
    @pytest.mark.parametrize(
        "design",
        [
            {},
            {"backgroundColor": "#000000", "textColor": "#cccccc"},
            {"header": {"backgroundColor": "#111111", "textColor": "#222222"}},
            {"cardStyle": {"accent": "#10b981", "border": "#ef4444"}, "textColor": "#333333"},
        ],
    )
    def test_resolving_a_resolved_style_is_a_no_op(self, design) -> None:
        first = resolve_card_style(design)

        second = resolve_card_style({"cardStyle": first.as_dict()})

        assert second == first

    def test_resolved_model_fed_back_as_card_style(self) -> None:
        """The resolved model itself is accepted as cardStyle."""
        first = resolve_card_style({"backgroundColor": "#000000", "textColor": "#cccccc"})

        second = resolve_card_style({"cardStyle": first})

        assert second == first
        assert second.background == "#000000"

    def test_nested_models_are_read_as_sections(self) -> None:
        footer = FooterSettings(visible=False)

        spec = resolve_render_spec({"footer": footer, "header": HeaderSettings(text_color="#abc")})

        assert spec.footer.visible is False
        assert spec.style.title_text == "#abc"

    def test_resolved_style_is_frozen(self) -> None:
        style = resolve_card_style(None)

        with pytest.raises(PydanticValidationError):
            style.background = "#ffffff"  # type: ignore[misc]

    def test_resolved_style_rejects_empty_region(self) -> None:
        values = dict(DEFAULT_CARD_STYLE, accent="")

        with pytest.raises(PydanticValidationError):
            ResolvedCardStyle.model_validate(values)


class TestTint:
    def test_hex_gets_alpha_byte(self) -> None:
        assert tint("#f59e0b") == "#f59e0b33"

    def test_short_hex_is_expanded(self) -> None:
        assert tint("#abc", 0.5) == "#aabbcc80"

    def test_rgb_becomes_rgba(self) -> None:
        assert tint("rgb(16, 185, 129)") == "rgba(16,185,129,0.2)"

    def test_rgba_alpha_is_replaced(self) -> None:
        assert tint("rgba(0,0,0,0.9)") == "rgba(0,0,0,0.2)"

    def test_named_color_is_unchanged(self) -> None:
        assert tint("tomato") == "tomato"


class TestFooter:
    def test_footer_defaults_to_accent_tint(self) -> None:
        style = resolve_card_style({"cardStyle": {"accent": "#10b981"}})

        footer = resolve_footer({"cardStyle": {"accent": "#10b981"}}, style)

        assert footer.visible is True
        assert footer.background_color == "#10b98133"
        assert footer.text_color == "#10b981"

    def test_footer_overrides_win(self) -> None:
        design = {"footer": {"backgroundColor": "#000000", "textColor": "#ffffff"}}

        footer = resolve_render_spec(design).footer

        assert footer.background_color == "#000000"
        assert footer.text_color == "#ffffff"

    def test_hidden_footer_has_no_colors(self) -> None:
        footer = resolve_render_spec({"footer": {"visible": False, "textColor": "#ffffff"}}).footer

        assert footer.visible is False
        assert footer.background_color is None
        assert footer.text_color is None

    @pytest.mark.parametrize("visible", [None, True, "false", 0])
    def test_only_literal_false_hides_footer(self, visible) -> None:
        footer = resolve_render_spec({"footer": {"visible": visible}}).footer

        assert footer.visible is True


class TestRenderSpec:
    def test_default_render_spec(self) -> None:
        spec = resolve_render_spec(None)

        assert spec.font_family == "'Rajdhani', sans-serif"
        assert spec.text_sizes.title == "20px"
        assert spec.header_radius == "0"
        assert spec.footer.visible is True
        assert spec.footer.background_color == "#f59e0b33"

    def test_legacy_design_render_spec(self, legacy_design) -> None:
        spec = resolve_render_spec(legacy_design)

        assert spec.font_family == "'Cinzel', serif"
        assert spec.text_sizes.body == "16px"
        assert spec.header_radius == "8px"

    def test_render_spec_serializes_camel_case(self) -> None:
        data = resolve_render_spec(None).model_dump(by_alias=True)

        assert set(data) == {"style", "fontFamily", "textSizes", "headerRadius", "footer"}
        assert data["style"]["titleBg"] == DEFAULT_CARD_STYLE["titleBg"]
        assert data["footer"]["backgroundColor"] == "#f59e0b33"
