"""
Rendering endpoints.

Serve the editor preview and the print layout as HTML, and expose the
resolved render spec as JSON so any other client paints from the same
numbers.
"""

from typing import Annotated, Any, Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse
from pydantic import Field
from sqlalchemy.ext.asyncio import AsyncSession

from paperdream.db import get_cards_by_game
from paperdream.db.database import get_session
from paperdream.models.design import CamelModel, CardRenderSpec
from paperdream.rendering import (
    CardContent,
    build_card_faces,
    render_editable_preview,
    render_print_card,
    render_print_sheet,
)
from paperdream.services import catalog

router = APIRouter(prefix="/api", tags=["render"])

RenderMode = Literal["preview", "print"]
RenderSide = Literal["front", "back"]


class CardDraft(CamelModel):
    """Unsaved editor state to preview."""

    name: str = ""
    kind: Literal["battle", "party"] | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)
    front_image_url: str = ""
    back_image_url: str = ""

    def to_content(self) -> CardContent:
        return CardContent(
            name=self.name,
            attributes=self.attributes,
            kind=self.kind,
            front_image_url=self.front_image_url,
            back_image_url=self.back_image_url,
        )


@router.get("/cards/{card_id}/render-spec", response_model=CardRenderSpec)
async def get_render_spec(
    card_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> CardRenderSpec:
    """Resolved colors, font, sizes, header radius and footer for a stored card."""
    card = await catalog.require_card(session, card_id)
    return build_card_faces(CardContent.from_record(card)).spec


@router.get("/cards/{card_id}/render", response_class=HTMLResponse)
async def render_card(
    card_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
    mode: Annotated[RenderMode, Query()] = "preview",
    side: Annotated[RenderSide, Query()] = "front",
) -> HTMLResponse:
    """One face of a stored card, as editor preview or print markup."""
    card = await catalog.require_card(session, card_id)
    content = CardContent.from_record(card)
    if mode == "print":
        return HTMLResponse(render_print_card(content, side))
    return HTMLResponse(render_editable_preview(content, side))


@router.post("/cards/preview", response_class=HTMLResponse)
async def preview_draft(
    draft: CardDraft,
    side: Annotated[RenderSide, Query()] = "front",
) -> HTMLResponse:
    """Editor preview of a card that has not been saved yet."""
    return HTMLResponse(render_editable_preview(draft.to_content(), side))


@router.get("/games/{game_id}/print", response_class=HTMLResponse)
async def print_game(
    game_id: int,
    session: Annotated[AsyncSession, Depends(get_session)],
    include_backs: Annotated[bool, Query(alias="includeBacks")] = False,
) -> HTMLResponse:
    """Printable sheet with every card of a game."""
    game = await catalog.require_game(session, game_id)
    cards = await get_cards_by_game(session, game_id)
    page = render_print_sheet(
        game.title,
        [CardContent.from_record(card) for card in cards],
        include_backs=include_backs,
    )
    return HTMLResponse(page)
