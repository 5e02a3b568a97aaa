"""
Editable card preview.

Renders the click-to-edit card shown in the editor. Text regions carry
`data-field` markers for inline editing and `data-part` markers naming the
style region they paint, so the editor can map a click to the design
control for that region. Empty fields show a prompt instead of nothing.
"""

from typing import Any

from paperdream.rendering.environment import get_environment
from paperdream.rendering.faces import CardContent, Side, build_card_faces


def preview_context(content: CardContent, side: Side = "front") -> dict[str, Any]:
    """Template context for one preview face."""
    faces = build_card_faces(content)
    if side == "back" and not faces.has_back:
        side = "front"
    return {"faces": faces, "spec": faces.spec, "side": side}


def render_editable_preview(content: CardContent, side: Side = "front") -> str:
    """HTML for the editor preview of a card (saved or draft)."""
    context = preview_context(content, side)
    return get_environment().get_template("preview_card.html").render(**context)
