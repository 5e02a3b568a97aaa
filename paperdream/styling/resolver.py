"""
Card style resolution.

Merges sparse, user-authored design settings into the complete render spec
that both the editable preview and the print layout paint from.

Precedence, per region (highest first):
1. cardStyle[region]
2. legacy single fields:
   background <- backgroundColor
   bodyText   <- textColor
   titleText  <- header.textColor, then textColor
   titleBg    <- header.backgroundColor
3. DEFAULT_CARD_STYLE[region]

Empty or non-string values count as unset at every layer. Nothing here
raises: malformed sections are treated as absent.
"""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from paperdream.models.design import CardRenderSpec, ResolvedCardStyle, ResolvedFooter
from paperdream.styling.defaults import CARD_REGIONS, DEFAULT_CARD_STYLE, FOOTER_TINT_ALPHA
from paperdream.styling.geometry import border_radius, resolve_font, text_sizes

DesignInput = BaseModel | Mapping[str, Any] | None

_HEX_COLOR = re.compile(r"^#(?P<digits>[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")
_RGB_COLOR = re.compile(r"^rgba?\(\s*(?P<r>\d{1,3})\s*,\s*(?P<g>\d{1,3})\s*,\s*(?P<b>\d{1,3})")


def _as_mapping(design: Any) -> Mapping[str, Any]:
    if isinstance(design, BaseModel):
        return design.model_dump(by_alias=True, exclude_none=True)
    if isinstance(design, Mapping):
        return design
    return {}


def _section(design: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    return _as_mapping(design.get(key))


def _color(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def tint(color: str, alpha: float = FOOTER_TINT_ALPHA) -> str:
    """
    Return `color` at the given alpha.

    Hex colors get an alpha byte appended (#f59e0b -> #f59e0b33 at 0.2),
    rgb()/rgba() colors are rewritten as rgba(). Anything else (named colors,
    gradients) is returned unchanged.
    """
    hex_match = _HEX_COLOR.match(color)
    if hex_match:
        digits = hex_match.group("digits")
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return f"#{digits}{round(alpha * 255):02x}"

    rgb_match = _RGB_COLOR.match(color)
    if rgb_match:
        return f"rgba({rgb_match['r']},{rgb_match['g']},{rgb_match['b']},{alpha})"

    return color


def resolve_card_style(design: DesignInput = None) -> ResolvedCardStyle:
    """
    Resolve design settings into a complete 7-region style.

    Accepts a DesignSettings model, a raw camelCase mapping (as stored in card
    attributes), or None. Feeding a resolved style back in as `cardStyle`
    reproduces it unchanged.
    """
    raw = _as_mapping(design)
    header = _section(raw, "header")
    overrides = _section(raw, "cardStyle")

    legacy = {
        "background": _color(raw.get("backgroundColor")),
        "bodyText": _color(raw.get("textColor")),
        "titleText": _color(header.get("textColor")) or _color(raw.get("textColor")),
        "titleBg": _color(header.get("backgroundColor")),
    }

    resolved = {
        region: _color(overrides.get(region)) or legacy.get(region) or DEFAULT_CARD_STYLE[region]
        for region in CARD_REGIONS
    }
    return ResolvedCardStyle.model_validate(resolved)


def resolve_footer(design: DesignInput, style: ResolvedCardStyle) -> ResolvedFooter:
    """Footer visibility and colors; accent-tinted when not overridden."""
    footer = _section(_as_mapping(design), "footer")

    if footer.get("visible") is False:
        return ResolvedFooter(visible=False)

    return ResolvedFooter(
        visible=True,
        background_color=_color(footer.get("backgroundColor")) or tint(style.accent),
        text_color=_color(footer.get("textColor")) or style.accent,
    )


def resolve_render_spec(design: DesignInput = None) -> CardRenderSpec:
    """
    Full render spec for a card face.

    This is the single entry point renderers use. Calling it on every paint
    is fine; it is pure and cheap.
    """
    raw = _as_mapping(design)
    style = resolve_card_style(raw)

    return CardRenderSpec(
        style=style,
        font_family=resolve_font(raw.get("fontFamily")),
        text_sizes=text_sizes(raw.get("textSize")),
        header_radius=border_radius(_section(raw, "header").get("borderRadius")),
        footer=resolve_footer(raw, style),
    )
