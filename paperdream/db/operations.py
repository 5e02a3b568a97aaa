"""
Database CRUD operations.

Thin async persistence for games and cards. No validation happens here;
callers (see `paperdream.services.catalog`) validate before writing.
"""

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from paperdream.models.db import CardDB, GameDB, utcnow

GAME_FIELDS = frozenset({"title", "description"})
CARD_FIELDS = frozenset(
    {
        "kind",
        "name",
        "image_url",
        "front_image_url",
        "back_image_url",
        "width",
        "height",
        "order",
        "description",
        "attributes",
    }
)

# --- Game Operations ---


async def create_game(session: AsyncSession, title: str, description: str | None = None) -> GameDB:
    """Insert a new game."""
    game = GameDB(title=title, description=description)
    session.add(game)
    await session.flush()
    return game


async def get_games(session: AsyncSession) -> list[GameDB]:
    """All games, most recently edited first."""
    result = await session.execute(
        select(GameDB).order_by(GameDB.updated_at.desc(), GameDB.id.desc())
    )
    return list(result.scalars().all())


async def get_game(session: AsyncSession, game_id: int) -> GameDB | None:
    """Get a game by ID. Returns None if it does not exist."""
    return await session.get(GameDB, game_id)


async def get_game_by_title(session: AsyncSession, title: str) -> GameDB | None:
    """Exact (case-sensitive) title match."""
    result = await session.execute(select(GameDB).where(GameDB.title == title))
    return result.scalar_one_or_none()


async def update_game(
    session: AsyncSession, game_id: int, changes: dict[str, Any]
) -> GameDB | None:
    """
    Apply a partial update to a game.

    Unknown keys are ignored. Returns None if the game does not exist.
    """
    game = await get_game(session, game_id)
    if game is None:
        return None

    for key, value in changes.items():
        if key in GAME_FIELDS:
            setattr(game, key, value)
    game.updated_at = utcnow()
    await session.flush()
    return game


async def delete_game(session: AsyncSession, game_id: int) -> bool:
    """
    Delete a game and all of its cards.

    Returns True if deleted, False if not found.
    """
    game = await get_game(session, game_id)
    if game is None:
        return False

    await session.execute(delete(CardDB).where(CardDB.game_id == game_id))
    await session.delete(game)
    await session.flush()
    return True


async def _touch_game(session: AsyncSession, game_id: int) -> None:
    game = await get_game(session, game_id)
    if game is not None:
        game.updated_at = utcnow()


# --- Card Operations ---


async def create_card(session: AsyncSession, game_id: int, data: dict[str, Any]) -> CardDB:
    """
    Insert a card into a game and bump the game's updated_at.

    `data` uses snake_case column names; unknown keys are ignored.
    """
    card = CardDB(game_id=game_id, **{k: v for k, v in data.items() if k in CARD_FIELDS})
    session.add(card)
    await _touch_game(session, game_id)
    await session.flush()
    return card


async def get_cards_by_game(session: AsyncSession, game_id: int) -> list[CardDB]:
    """Cards of a game in display order."""
    result = await session.execute(
        select(CardDB).where(CardDB.game_id == game_id).order_by(CardDB.order.asc(), CardDB.id)
    )
    return list(result.scalars().all())


async def get_card(session: AsyncSession, card_id: int) -> CardDB | None:
    """Get a card by ID. Returns None if it does not exist."""
    return await session.get(CardDB, card_id)


async def update_card(
    session: AsyncSession, card_id: int, changes: dict[str, Any]
) -> CardDB | None:
    """
    Apply a partial update to a card and bump its game's updated_at.

    Returns None if the card does not exist.
    """
    card = await get_card(session, card_id)
    if card is None:
        return None

    for key, value in changes.items():
        if key in CARD_FIELDS:
            setattr(card, key, value)
    card.updated_at = utcnow()
    await _touch_game(session, card.game_id)
    await session.flush()
    return card


async def delete_card(session: AsyncSession, card_id: int) -> bool:
    """
    Delete a single card.

    Returns True if deleted, False if not found.
    """
    result = await session.execute(delete(CardDB).where(CardDB.id == card_id))
    # rowcount is available on DELETE results; type stubs incomplete for async
    return int(result.rowcount) > 0  # type: ignore[attr-defined]
