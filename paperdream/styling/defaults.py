"""
Canonical defaults for card styling.

This is the only place these literals live. The resolver, the geometry
lookups, the editor options endpoint and both renderers all read from here.
"""

from types import MappingProxyType
from typing import Final

# Stylable regions, in editor display order
CARD_REGIONS: Final = (
    "background",
    "border",
    "titleBg",
    "titleText",
    "bodyText",
    "accent",
    "imageFrame",
)

DEFAULT_CARD_STYLE: Final = MappingProxyType(
    {
        "background": "#1e3a5f",
        "border": "#4a6fa5",
        "titleBg": "rgba(0,0,0,0.3)",
        "titleText": "#ffffff",
        "bodyText": "#ffffff",
        "accent": "#f59e0b",
        "imageFrame": "rgba(255,255,255,0.1)",
    }
)

# =============================================================================
# GEOMETRY
# =============================================================================

DEFAULT_TEXT_SIZE: Final = "medium"

TEXT_SIZES: Final = MappingProxyType(
    {
        "xs": MappingProxyType({"title": "14px", "body": "10px", "label": "8px"}),
        "small": MappingProxyType({"title": "16px", "body": "12px", "label": "9px"}),
        "medium": MappingProxyType({"title": "20px", "body": "14px", "label": "10px"}),
        "large": MappingProxyType({"title": "24px", "body": "16px", "label": "11px"}),
    }
)

DEFAULT_BORDER_RADIUS: Final = "none"

BORDER_RADII: Final = MappingProxyType(
    {
        "none": "0",
        "small": "4px",
        "medium": "8px",
        "large": "16px",
    }
)

DEFAULT_FONT: Final = "gothic"

FONT_FAMILIES: Final = MappingProxyType(
    {
        "gothic": "'Rajdhani', sans-serif",
        "mincho": "'Libre Baskerville', 'Playfair Display', serif",
        "rounded": "'DM Sans', sans-serif",
        "handwriting": "'Architects Daughter', cursive",
        "cinzel": "'Cinzel', serif",
        "orbitron": "'Orbitron', sans-serif",
    }
)

# Fixed decorative face used for labels, badges and the footer strip
LABEL_FONT: Final = FONT_FAMILIES["orbitron"]

# Alpha applied to the accent color when the footer has no background override
FOOTER_TINT_ALPHA: Final = 0.2

# =============================================================================
# NEW-CARD DESIGN
# =============================================================================


def default_design() -> dict[str, object]:
    """Design settings a freshly created party card starts from."""
    return {
        "textSize": DEFAULT_TEXT_SIZE,
        "backgroundColor": DEFAULT_CARD_STYLE["background"],
        "fontFamily": DEFAULT_FONT,
        "textColor": DEFAULT_CARD_STYLE["bodyText"],
        "header": {"backgroundColor": "", "textColor": "", "borderRadius": DEFAULT_BORDER_RADIUS},
        "footer": {"backgroundColor": "", "textColor": "", "visible": True},
    }


# =============================================================================
# EDITOR PRESETS
# =============================================================================

REGION_LABELS: Final = MappingProxyType(
    {
        "background": "Background",
        "border": "Border",
        "titleBg": "Title background",
        "titleText": "Title text",
        "bodyText": "Body text",
        "accent": "Accent",
        "imageFrame": "Image frame",
    }
)

SWATCH_PRESETS: Final = MappingProxyType(
    {
        "background": ("#1e3a5f", "#0f172a", "#1c1c1c", "#2d1b4e", "#1a3a2a", "#3b1a1a"),
        "border": ("#4a6fa5", "#6366f1", "#f59e0b", "#10b981", "#ef4444", "#8b5cf6"),
        "titleBg": (
            "rgba(0,0,0,0.3)",
            "rgba(0,0,0,0.6)",
            "rgba(255,255,255,0.1)",
            "rgba(245,158,11,0.3)",
        ),
        "titleText": ("#ffffff", "#fbbf24", "#60a5fa", "#34d399", "#f87171"),
        "bodyText": ("#ffffff", "#e2e8f0", "#fbbf24", "#94a3b8", "#d1d5db"),
        "accent": ("#f59e0b", "#6366f1", "#10b981", "#ef4444", "#8b5cf6", "#ec4899"),
        "imageFrame": (
            "rgba(255,255,255,0.1)",
            "rgba(255,255,255,0.3)",
            "rgba(0,0,0,0.3)",
            "rgba(245,158,11,0.4)",
        ),
    }
)

FONT_LABELS: Final = MappingProxyType(
    {
        "gothic": "Gothic",
        "mincho": "Mincho",
        "rounded": "Rounded",
        "handwriting": "Handwriting",
        "cinzel": "Classic",
        "orbitron": "Cyber",
    }
)
