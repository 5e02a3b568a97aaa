"""
Card face view models shared by every renderer.

`build_card_faces` is the only place a renderer gets colors, fonts, sizes,
header radius and footer state from, and it gets them by calling
`resolve_render_spec` exactly once per card. The editable preview and the
print layout differ in markup only.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from paperdream.models.card import CardKind, card_layout, infer_card_kind
from paperdream.models.design import CardRenderSpec
from paperdream.styling.defaults import LABEL_FONT
from paperdream.styling.resolver import resolve_render_spec

Side = Literal["front", "back"]

TYPE_LABELS = {
    "monster": "Monster",
    "spell": "Spell",
    "trap": "Trap",
    "action": "Action",
    "event": "Event",
    "penalty": "Penalty",
}

DIFFICULTY_LABELS = {
    "easy": "Easy",
    "normal": "Normal",
    "hard": "Hard",
}

FOOTER_TEXT = "PARTY CARD"
BACK_SUBTITLE = "PAPER DREAM"


@dataclass(frozen=True, slots=True)
class CardContent:
    """
    What a card says, independent of whether it has been saved.

    The editor previews unsaved form state, the print sheet renders stored
    rows; both are turned into this first.
    """

    name: str = ""
    attributes: Mapping[str, Any] = field(default_factory=dict)
    kind: str | None = None
    front_image_url: str = ""
    back_image_url: str = ""

    @classmethod
    def from_record(cls, card: Any) -> "CardContent":
        """Build from a stored card (anything with the CardDB attributes)."""
        attributes = card.attributes if isinstance(card.attributes, Mapping) else {}
        return cls(
            name=card.name or "",
            attributes=attributes,
            kind=card.kind,
            front_image_url=card.front_image_url or card.image_url or "",
            back_image_url=card.back_image_url or "",
        )


@dataclass(frozen=True, slots=True)
class TextSection:
    field: str
    label: str
    text: str


@dataclass(frozen=True, slots=True)
class CardFaces:
    """
    Everything needed to paint one card.

    Attributes:
        kind: battle or party
        spec: The resolved render spec, shared by all faces
        name: Card name (may be empty for an unsaved draft)
        type_label: Display label for the card's type tag
        tags: Short chips shown under the header (player count, difficulty)
        sections: Body text blocks, in display order
        stats: (label, value) pairs for battle cards
        front_image_url: Image shown on the front face
        back_image_url: Image covering the back face (party cards only)
    """

    kind: CardKind
    spec: CardRenderSpec
    name: str
    type_label: str
    tags: tuple[str, ...]
    sections: tuple[TextSection, ...]
    stats: tuple[tuple[str, int], ...]
    front_image_url: str
    back_image_url: str
    label_font: str = LABEL_FONT
    footer_text: str = FOOTER_TEXT
    back_subtitle: str = BACK_SUBTITLE

    @property
    def has_back(self) -> bool:
        return self.kind is CardKind.PARTY

    def sides(self) -> tuple[Side, ...]:
        return ("front", "back") if self.has_back else ("front",)


def _text(attributes: Mapping[str, Any], key: str) -> str:
    value = attributes.get(key)
    return value if isinstance(value, str) else ""


def _stat(attributes: Mapping[str, Any], key: str) -> int:
    value = attributes.get(key)
    return value if isinstance(value, int) and not isinstance(value, bool) else 0


def build_card_faces(content: CardContent) -> CardFaces:
    """Resolve a card's design once and lay out its faces."""
    attributes = content.attributes
    kind = infer_card_kind(attributes, content.kind)
    type_tag = _text(attributes, "type")
    spec = resolve_render_spec(card_layout(attributes))

    if kind is CardKind.PARTY:
        tags = tuple(
            tag
            for tag in (
                _text(attributes, "playerCount"),
                DIFFICULTY_LABELS.get(_text(attributes, "difficulty"), ""),
            )
            if tag
        )
        sections = (
            TextSection("action", "Action", _text(attributes, "action")),
            TextSection("effect", "Effect", _text(attributes, "effect")),
        )
        stats: tuple[tuple[str, int], ...] = ()
        default_type = "penalty"
    else:
        tags = ()
        sections = (TextSection("effect", "Effect", _text(attributes, "effect")),)
        stats = (("ATK", _stat(attributes, "attack")), ("HP", _stat(attributes, "hp")))
        default_type = "monster"

    return CardFaces(
        kind=kind,
        spec=spec,
        name=content.name,
        type_label=TYPE_LABELS.get(type_tag, TYPE_LABELS[default_type]),
        tags=tags,
        sections=sections,
        stats=stats,
        front_image_url=content.front_image_url,
        back_image_url=content.back_image_url if kind is CardKind.PARTY else "",
    )
