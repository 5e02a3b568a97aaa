from paperdream.rendering.faces import CardContent, CardFaces, build_card_faces
from paperdream.rendering.preview import preview_context, render_editable_preview
from paperdream.rendering.print_layout import (
    print_context,
    render_print_card,
    render_print_sheet,
)

__all__ = [
    "CardContent",
    "CardFaces",
    "build_card_faces",
    "preview_context",
    "print_context",
    "render_editable_preview",
    "render_print_card",
    "render_print_sheet",
]
