"""
Design settings and resolved render shapes.

`DesignSettings` is what users author: sparse, every field optional, unknown
keys preserved so older editors do not lose data on a round trip. The
resolved shapes are what renderers consume: fully populated and frozen.

Wire format is camelCase (`backgroundColor`, `cardStyle`); snake_case is
accepted on input.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that speaks camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HeaderSettings(CamelModel):
    """Optional overrides for the title strip."""

    model_config = ConfigDict(extra="allow")

    background_color: str | None = None
    text_color: str | None = None
    border_radius: str | None = None  # none, small, medium, large


class FooterSettings(CamelModel):
    """Optional overrides for the footer strip. Hidden only when visible is False."""

    model_config = ConfigDict(extra="allow")

    background_color: str | None = None
    text_color: str | None = None
    # Kept as authored; only a literal false hides the footer
    visible: Any = None


class CardStyleOverrides(CamelModel):
    """Direct per-region color overrides. Highest precedence."""

    model_config = ConfigDict(extra="allow")

    background: str | None = None
    border: str | None = None
    title_bg: str | None = None
    title_text: str | None = None
    body_text: str | None = None
    accent: str | None = None
    image_frame: str | None = None


class DesignSettings(CamelModel):
    """
    User-authored design settings for a card.

    Attributes:
        text_size: Text size preset (xs, small, medium, large)
        background_color: Legacy whole-card background color
        font_family: Logical font key (gothic, mincho, rounded, ...)
        text_color: Legacy body text color
        header: Title strip overrides
        footer: Footer strip overrides
        card_style: Per-region color overrides
    """

    model_config = ConfigDict(extra="allow")

    text_size: str | None = None
    background_color: str | None = None
    font_family: str | None = None
    text_color: str | None = None
    header: HeaderSettings | None = None
    footer: FooterSettings | None = None
    card_style: CardStyleOverrides | None = None

    def to_raw(self) -> dict[str, Any]:
        """Sparse camelCase mapping, as persisted in card attributes."""
        return self.model_dump(by_alias=True, exclude_none=True)


# =============================================================================
# RESOLVED SHAPES
# =============================================================================


class ResolvedCardStyle(CamelModel):
    """Flat 7-region color record. Every region always has a value."""

    model_config = ConfigDict(frozen=True)

    background: str = Field(..., min_length=1)
    border: str = Field(..., min_length=1)
    title_bg: str = Field(..., min_length=1)
    title_text: str = Field(..., min_length=1)
    body_text: str = Field(..., min_length=1)
    accent: str = Field(..., min_length=1)
    image_frame: str = Field(..., min_length=1)

    def as_dict(self) -> dict[str, str]:
        """Region key -> color, keyed by the camelCase region names."""
        return self.model_dump(by_alias=True)


class TextSizeSet(CamelModel):
    """Concrete font sizes for title, body and label text."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: str
    label: str


class ResolvedFooter(CamelModel):
    """Footer strip state. Colors are only computed for a visible footer."""

    model_config = ConfigDict(frozen=True)

    visible: bool
    background_color: str | None = None
    text_color: str | None = None


class CardRenderSpec(CamelModel):
    """Everything a renderer needs to paint a card face."""

    model_config = ConfigDict(frozen=True)

    style: ResolvedCardStyle
    font_family: str
    text_sizes: TextSizeSet
    header_radius: str
    footer: ResolvedFooter
