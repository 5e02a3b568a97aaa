from paperdream.styling.defaults import (
    CARD_REGIONS,
    DEFAULT_CARD_STYLE,
    FONT_FAMILIES,
    default_design,
)
from paperdream.styling.geometry import border_radius, resolve_font, text_sizes
from paperdream.styling.resolver import (
    resolve_card_style,
    resolve_footer,
    resolve_render_spec,
    tint,
)

__all__ = [
    "CARD_REGIONS",
    "DEFAULT_CARD_STYLE",
    "FONT_FAMILIES",
    "border_radius",
    "default_design",
    "resolve_card_style",
    "resolve_font",
    "resolve_footer",
    "resolve_render_spec",
    "text_sizes",
    "tint",
]
