"""
Print layout.

Static card faces laid out on a page grid at physical card size. Backs,
when requested, follow on their own page in mirrored order so they line
up with the fronts on a duplex printer.
"""

from collections.abc import Iterable
from typing import Any

from markupsafe import Markup

from paperdream.config import DEFAULT_CARD_HEIGHT_MM, DEFAULT_CARD_WIDTH_MM
from paperdream.rendering.environment import get_environment
from paperdream.rendering.faces import CardContent, CardFaces, Side, build_card_faces

CARDS_PER_ROW = 3


def print_context(content: CardContent, side: Side = "front") -> dict[str, Any]:
    """Template context for one printed face."""
    faces = build_card_faces(content)
    if side == "back" and not faces.has_back:
        side = "front"
    return {"faces": faces, "spec": faces.spec, "side": side}


def _render_face(faces: CardFaces, side: Side) -> str:
    template = get_environment().get_template("print_card.html")
    return template.render(faces=faces, spec=faces.spec, side=side)


def render_print_card(content: CardContent, side: Side = "front") -> str:
    """HTML for one printed card face."""
    context = print_context(content, side)
    return _render_face(context["faces"], context["side"])


def _mirror_rows(items: list[Markup], per_row: int) -> list[Markup]:
    rows = [items[i : i + per_row] for i in range(0, len(items), per_row)]
    mirrored: list[Markup] = []
    for row in rows:
        row = row + [Markup("")] * (per_row - len(row))
        mirrored.extend(reversed(row))
    return mirrored


def render_print_sheet(
    title: str,
    cards: Iterable[CardContent],
    include_backs: bool = False,
    card_width: float = DEFAULT_CARD_WIDTH_MM,
    card_height: float = DEFAULT_CARD_HEIGHT_MM,
) -> str:
    """Full printable HTML page for a set of cards."""
    all_faces = [build_card_faces(content) for content in cards]

    fronts = [Markup(_render_face(faces, "front")) for faces in all_faces]
    backs: list[Markup] = []
    if include_backs:
        # Cards without a back keep their slot so the grid stays aligned
        backs = [
            Markup(_render_face(faces, "back")) if faces.has_back else Markup("")
            for faces in all_faces
        ]
        backs = _mirror_rows(backs, CARDS_PER_ROW)

    return (
        get_environment()
        .get_template("print_sheet.html")
        .render(
            title=title,
            fronts=fronts,
            backs=backs,
            card_width=card_width,
            card_height=card_height,
        )
    )
