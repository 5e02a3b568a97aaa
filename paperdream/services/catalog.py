"""
Game and card save operations.

This is the validation boundary in front of persistence. Every mutating
operation either validates completely and writes, or raises a KnownError
and writes nothing:

- blank game title / card name -> ValidationError
- taken game title -> DuplicateTitleError (carries the existing game's ID)
- unknown game / card ID -> NotFoundError
- bad card attributes (including stats outside [0, 10]) -> ValidationError
"""

import logging
from typing import Any, NoReturn

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from paperdream.db import operations
from paperdream.models.card import infer_card_kind, validate_attributes, validate_card_name
from paperdream.models.db import CardDB, GameDB
from paperdream.models.failure import (
    DuplicateTitleError,
    FailureKind,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# Columns that fall back to their table default when sent as null
_DEFAULTED_CARD_FIELDS = ("image_url", "width", "height", "order")


def _clean_title(title: Any) -> str:
    if not isinstance(title, str) or not title.strip():
        raise ValidationError(
            field="title",
            message="Game title is required",
            kind=FailureKind.MISSING_REQUIRED,
        )
    return title.strip()


async def _raise_if_title_taken(session: AsyncSession, title: str, error: IntegrityError) -> NoReturn:
    """
    Turn a unique-constraint hit on the title into a DuplicateTitleError.

    Another request may insert the same title between the lookup and the
    flush. The failed transaction is rolled back before looking up the winner.
    """
    await session.rollback()
    existing = await operations.get_game_by_title(session, title)
    if existing is None:
        raise error
    raise DuplicateTitleError(title, existing.id) from error


# --- Games ---


async def require_game(session: AsyncSession, game_id: int) -> GameDB:
    game = await operations.get_game(session, game_id)
    if game is None:
        raise NotFoundError("game", game_id)
    return game


async def create_game(
    session: AsyncSession, title: Any, description: str | None = None
) -> GameDB:
    """
    Create a game with a unique trimmed title.

    Raises:
        ValidationError: title missing or blank
        DuplicateTitleError: a game with the same trimmed title exists
    """
    clean = _clean_title(title)

    existing = await operations.get_game_by_title(session, clean)
    if existing is not None:
        logger.info("Rejected duplicate game title %r (existing id=%d)", clean, existing.id)
        raise DuplicateTitleError(clean, existing.id)

    try:
        game = await operations.create_game(session, clean, description)
    except IntegrityError as e:
        await _raise_if_title_taken(session, clean, e)
    logger.info("Created game %d %r", game.id, clean)
    return game


async def update_game(session: AsyncSession, game_id: int, changes: dict[str, Any]) -> GameDB:
    """Partial game update. A new title gets the same checks as on create."""
    await require_game(session, game_id)

    changes = dict(changes)
    if "title" in changes:
        clean = _clean_title(changes["title"])
        existing = await operations.get_game_by_title(session, clean)
        if existing is not None and existing.id != game_id:
            raise DuplicateTitleError(clean, existing.id)
        changes["title"] = clean

    try:
        game = await operations.update_game(session, game_id, changes)
    except IntegrityError as e:
        if "title" not in changes:
            raise
        await _raise_if_title_taken(session, changes["title"], e)
    if game is None:
        raise NotFoundError("game", game_id)
    return game


async def delete_game(session: AsyncSession, game_id: int) -> None:
    """Delete a game and, with it, all of its cards."""
    if not await operations.delete_game(session, game_id):
        raise NotFoundError("game", game_id)
    logger.info("Deleted game %d", game_id)


# --- Cards ---


async def require_card(session: AsyncSession, card_id: int) -> CardDB:
    card = await operations.get_card(session, card_id)
    if card is None:
        raise NotFoundError("card", card_id)
    return card


async def list_cards(session: AsyncSession, game_id: int) -> list[CardDB]:
    await require_game(session, game_id)
    return await operations.get_cards_by_game(session, game_id)


async def create_card(session: AsyncSession, game_id: int, fields: dict[str, Any]) -> CardDB:
    """
    Validate and insert a card into an existing game.

    `fields` uses snake_case column names. The card kind is taken from
    `kind` when given, otherwise inferred from the attributes.
    """
    await require_game(session, game_id)

    data = {k: v for k, v in fields.items() if not (k in _DEFAULTED_CARD_FIELDS and v is None)}
    data["name"] = validate_card_name(fields.get("name"))

    kind = infer_card_kind(fields.get("attributes"), fields.get("kind"))
    data["kind"] = kind.value
    data["attributes"] = validate_attributes(kind, fields.get("attributes"))

    if not data.get("image_url"):
        data["image_url"] = data.get("front_image_url") or ""

    card = await operations.create_card(session, game_id, data)
    logger.info("Created %s card %d in game %d", kind.value, card.id, game_id)
    return card


async def update_card(session: AsyncSession, card_id: int, fields: dict[str, Any]) -> CardDB:
    """
    Validate and apply a partial card update.

    Only the provided fields change. New attributes replace the stored ones
    wholesale after validation against the card's (possibly new) kind.
    """
    card = await require_card(session, card_id)

    changes = {k: v for k, v in fields.items() if not (k in _DEFAULTED_CARD_FIELDS and v is None)}
    if "name" in changes:
        changes["name"] = validate_card_name(changes["name"])

    if "attributes" in changes or "kind" in changes:
        raw = changes["attributes"] if "attributes" in changes else card.attributes
        stored_kind = changes["kind"] if "kind" in changes else card.kind
        kind = infer_card_kind(raw, stored_kind)
        changes["kind"] = kind.value
        changes["attributes"] = validate_attributes(kind, raw)

    updated = await operations.update_card(session, card_id, changes)
    if updated is None:
        raise NotFoundError("card", card_id)
    return updated


async def delete_card(session: AsyncSession, card_id: int) -> None:
    if not await operations.delete_card(session, card_id):
        raise NotFoundError("card", card_id)
    logger.info("Deleted card %d", card_id)
