"""
Layout geometry lookups.

Maps categorical tokens (text size, corner radius, font key) to concrete CSS
values. All three lookups are total: anything unrecognized, including
non-string input, degrades to the documented default.
"""

from typing import Any

from paperdream.models.design import TextSizeSet
from paperdream.styling.defaults import (
    BORDER_RADII,
    DEFAULT_BORDER_RADIUS,
    DEFAULT_FONT,
    DEFAULT_TEXT_SIZE,
    FONT_FAMILIES,
    TEXT_SIZES,
)


def _lookup(table: Any, key: Any, default_key: str) -> Any:
    if isinstance(key, str) and key in table:
        return table[key]
    return table[default_key]


def text_sizes(key: Any) -> TextSizeSet:
    """Title/body/label font sizes for a text size preset (default: medium)."""
    return TextSizeSet(**_lookup(TEXT_SIZES, key, DEFAULT_TEXT_SIZE))


def border_radius(key: Any) -> str:
    """Header corner radius for a radius preset (default: none -> "0")."""
    return str(_lookup(BORDER_RADII, key, DEFAULT_BORDER_RADIUS))


def resolve_font(key: Any) -> str:
    """Concrete font-family stack for a logical font key (default: gothic)."""
    return str(_lookup(FONT_FAMILIES, key, DEFAULT_FONT))
