"""
Card API endpoints.

Cards are created inside a game and then addressed by their own ID.
Attributes are validated per card kind before anything is stored.
"""

from datetime import datetime
from typing import Annotated, Any, Literal

from fastapi import APIRouter, Depends, status
from pydantic import ConfigDict
from sqlalchemy.ext.asyncio import AsyncSession

from paperdream.api.games import DeleteResponse
from paperdream.db.database import get_session
from paperdream.models.design import CamelModel
from paperdream.services import catalog

router = APIRouter(prefix="/api", tags=["cards"])


class CardResponse(CamelModel):
    """Response model for a single card."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    game_id: int
    kind: Literal["battle", "party"] | None = None
    name: str
    image_url: str = ""
    front_image_url: str | None = ""
    back_image_url: str | None = ""
    width: float | None = None
    height: float | None = None
    order: int | None = 0
    description: str | None = None
    attributes: dict[str, Any] | None = None
    created_at: datetime
    updated_at: datetime


class CardWriteRequest(CamelModel):
    """
    Request model for creating or updating a card.

    Every field is optional at the schema level; the save operation decides
    what is required (a non-blank name on create) and validates attributes
    against the card kind.
    """

    name: str | None = None
    kind: Literal["battle", "party"] | None = None
    image_url: str | None = None
    front_image_url: str | None = None
    back_image_url: str | None = None
    width: float | None = None
    height: float | None = None
    order: int | None = None
    description: str | None = None
    attributes: dict[str, Any] | None = None


@router.get("/games/{game_id}/cards", response_model=list[CardResponse])
async def list_cards(
    game_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> list[CardResponse]:
    """Cards of a game in display order."""
    cards = await catalog.list_cards(session, game_id)
    return [CardResponse.model_validate(card) for card in cards]


@router.post(
    "/games/{game_id}/cards",
    response_model=CardResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_card(
    game_id: int,
    request: CardWriteRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CardResponse:
    """
    Add a card to a game.

    Returns 404 if the game does not exist and 400 for a blank name or
    invalid attributes (e.g. attack outside 0-10).
    """
    card = await catalog.create_card(session, game_id, request.model_dump(exclude_unset=True))
    return CardResponse.model_validate(card)


@router.get("/cards/{card_id}", response_model=CardResponse)
async def get_card(
    card_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CardResponse:
    card = await catalog.require_card(session, card_id)
    return CardResponse.model_validate(card)


@router.put("/cards/{card_id}", response_model=CardResponse)
async def update_card(
    card_id: int,
    request: CardWriteRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CardResponse:
    """Partial update. Fields absent from the body are left as they are."""
    card = await catalog.update_card(session, card_id, request.model_dump(exclude_unset=True))
    return CardResponse.model_validate(card)


@router.delete("/cards/{card_id}", response_model=DeleteResponse)
async def delete_card(
    card_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DeleteResponse:
    await catalog.delete_card(session, card_id)
    return DeleteResponse()
