"""
Card content model and validation.

Two card kinds share one table. Their attribute shapes differ:

- battle: type (monster/spell/trap), attack and hp in [0, 10], effect text,
  optional design layout
- party: type (action/event/penalty), action/effect/winCondition text,
  playerCount, difficulty (easy/normal/hard), optional design layout

Cards carry an explicit `kind`. Rows written before the discriminator
existed have none; for those the kind is inferred from which fields are
present (see `infer_card_kind`).
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, Literal

from pydantic import ConfigDict, Field, StrictInt
from pydantic import ValidationError as PydanticValidationError

from paperdream.models.design import CamelModel, DesignSettings
from paperdream.models.failure import FailureKind, ValidationError

MIN_STAT = 0
MAX_STAT = 10

BATTLE_TYPES = frozenset({"monster", "spell", "trap"})
PARTY_TYPES = frozenset({"action", "event", "penalty"})

# Fields only party cards have; used to classify legacy rows
_PARTY_ONLY_FIELDS = ("action", "playerCount", "winCondition")


class CardKind(str, Enum):
    """Which attribute shape a card uses."""

    BATTLE = "battle"
    PARTY = "party"


class BattleAttributes(CamelModel):
    """Attributes of a battle card (monster/spell/trap with stats)."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["monster", "spell", "trap"] = "monster"
    attack: StrictInt = Field(default=0, ge=MIN_STAT, le=MAX_STAT)
    hp: StrictInt = Field(default=0, ge=MIN_STAT, le=MAX_STAT)
    effect: str = ""
    layout: DesignSettings | None = None


class PartyAttributes(CamelModel):
    """Attributes of a party card, including its optional design layout."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["action", "event", "penalty"] = "action"
    action: str = ""
    effect: str = ""
    win_condition: str = ""
    player_count: str = ""
    difficulty: Literal["easy", "normal", "hard"] = "normal"
    layout: DesignSettings | None = None


def infer_card_kind(attributes: Any, stored_kind: str | None = None) -> CardKind:
    """
    Determine a card's kind.

    An explicit stored kind always wins. Without one, a card is a party card
    when its type tag is a party type or when any party-only text field is a
    string; everything else is a battle card. The fallback is a heuristic:
    a battle card that happens to carry an `action` string is misclassified.
    """
    if stored_kind in (CardKind.BATTLE.value, CardKind.PARTY.value):
        return CardKind(stored_kind)

    if not isinstance(attributes, Mapping):
        return CardKind.BATTLE

    if attributes.get("type") in PARTY_TYPES:
        return CardKind.PARTY
    if any(isinstance(attributes.get(name), str) for name in _PARTY_ONLY_FIELDS):
        return CardKind.PARTY
    return CardKind.BATTLE


def _first_error(exc: PydanticValidationError) -> ValidationError:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"])
    kind = FailureKind.INVALID_INPUT
    if error["type"] in ("greater_than_equal", "less_than_equal"):
        kind = FailureKind.OUT_OF_RANGE
    elif error["type"] == "missing":
        kind = FailureKind.MISSING_REQUIRED
    return ValidationError(
        field=f"attributes.{field}" if field else "attributes",
        message=error["msg"],
        kind=kind,
    )


def validate_attributes(kind: CardKind, raw: Any) -> dict[str, Any]:
    """
    Validate and normalize card attributes for the given kind.

    Returns the camelCase mapping to persist. Out-of-range stats are
    rejected, never clamped.

    Raises:
        ValidationError: on the first offending field
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ValidationError(field="attributes", message="Attributes must be an object")

    model: type[BattleAttributes] | type[PartyAttributes] = (
        PartyAttributes if kind is CardKind.PARTY else BattleAttributes
    )
    try:
        validated = model.model_validate(raw)
    except PydanticValidationError as e:
        raise _first_error(e) from e

    return validated.model_dump(by_alias=True, exclude_none=True)


def validate_card_name(name: Any) -> str:
    """
    Trim and check a card name.

    Raises:
        ValidationError: if the name is missing or blank
    """
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(
            field="name",
            message="Card name is required",
            kind=FailureKind.MISSING_REQUIRED,
        )
    return name.strip()


def card_layout(attributes: Any) -> Mapping[str, Any]:
    """The raw design layout stored in a card's attributes, or an empty mapping."""
    if isinstance(attributes, Mapping):
        layout = attributes.get("layout")
        if isinstance(layout, Mapping):
            return layout
    return {}
