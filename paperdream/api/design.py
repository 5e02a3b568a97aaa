"""
Design endpoints.

Lets the editor resolve in-progress design settings without saving, and
lists the presets its controls offer.
"""

from fastapi import APIRouter
from pydantic import Field

from paperdream.models.design import CamelModel, CardRenderSpec, DesignSettings
from paperdream.styling.defaults import (
    BORDER_RADII,
    CARD_REGIONS,
    DEFAULT_CARD_STYLE,
    FONT_FAMILIES,
    FONT_LABELS,
    REGION_LABELS,
    SWATCH_PRESETS,
    TEXT_SIZES,
    default_design,
)
from paperdream.styling.resolver import resolve_render_spec

router = APIRouter(prefix="/api/design", tags=["design"])


class RegionOption(CamelModel):
    key: str
    label: str
    default: str
    swatches: list[str] = Field(default_factory=list)


class FontOption(CamelModel):
    value: str
    label: str
    family: str


class DesignOptionsResponse(CamelModel):
    """Everything the design panel needs to build its controls."""

    regions: list[RegionOption]
    fonts: list[FontOption]
    text_sizes: list[str]
    border_radii: list[str]
    default_design: dict[str, object]


@router.post("/resolve", response_model=CardRenderSpec)
async def resolve_design(design: DesignSettings) -> CardRenderSpec:
    """Resolve design settings exactly as the renderers will."""
    return resolve_render_spec(design)


@router.get("/options", response_model=DesignOptionsResponse)
async def design_options() -> DesignOptionsResponse:
    return DesignOptionsResponse(
        regions=[
            RegionOption(
                key=region,
                label=REGION_LABELS[region],
                default=DEFAULT_CARD_STYLE[region],
                swatches=list(SWATCH_PRESETS[region]),
            )
            for region in CARD_REGIONS
        ],
        fonts=[
            FontOption(value=key, label=FONT_LABELS[key], family=family)
            for key, family in FONT_FAMILIES.items()
        ],
        text_sizes=list(TEXT_SIZES),
        border_radii=list(BORDER_RADII),
        default_design=default_design(),
    )
