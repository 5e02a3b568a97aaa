"""
Game API endpoints.

CRUD for games. Creating a game with a title that is already taken fails
with 409 and the existing game's ID so the client can offer to open it.
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import ConfigDict, Field
from sqlalchemy.ext.asyncio import AsyncSession

from paperdream.db import get_games
from paperdream.db.database import get_session
from paperdream.models.design import CamelModel
from paperdream.services import catalog

router = APIRouter(prefix="/api/games", tags=["games"])


class GameResponse(CamelModel):
    """Response model for a single game."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime


class GameCreateRequest(CamelModel):
    """Request model for creating a game."""

    title: str = Field(..., description="Unique game title", examples=["Demo"])
    description: str | None = None


class GameUpdateRequest(CamelModel):
    """Request model for a partial game update."""

    title: str | None = None
    description: str | None = None


class DeleteResponse(CamelModel):
    success: bool = True


@router.get("", response_model=list[GameResponse])
async def list_games(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> list[GameResponse]:
    """All games, most recently edited first."""
    games = await get_games(session)
    return [GameResponse.model_validate(game) for game in games]


@router.post("", response_model=GameResponse, status_code=status.HTTP_201_CREATED)
async def create_game(
    request: GameCreateRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> GameResponse:
    """
    Create a game.

    Returns 400 for a blank title and 409 (with existingGameId) when the
    trimmed title is already used.
    """
    game = await catalog.create_game(session, request.title, request.description)
    return GameResponse.model_validate(game)


@router.get("/{game_id}", response_model=GameResponse)
async def get_game(
    game_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> GameResponse:
    game = await catalog.require_game(session, game_id)
    return GameResponse.model_validate(game)


@router.put("/{game_id}", response_model=GameResponse)
async def update_game(
    game_id: int,
    request: GameUpdateRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> GameResponse:
    """Update title and/or description. Only fields present in the body change."""
    game = await catalog.update_game(session, game_id, request.model_dump(exclude_unset=True))
    return GameResponse.model_validate(game)


@router.delete("/{game_id}", response_model=DeleteResponse)
async def delete_game(
    game_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DeleteResponse:
    """Delete a game and all of its cards."""
    await catalog.delete_game(session, game_id)
    return DeleteResponse()
