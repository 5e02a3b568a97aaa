"""
AI assistant endpoints.

Both endpoints are advisory: they return suggestions for the editor to show
and never modify stored cards. AI failures come back as 502 (or 503 when no
API key is configured) with a message the editor displays as a notice.
"""

from fastapi import APIRouter

from paperdream.services.ai_assistant import (
    BalanceRequest,
    BalanceSuggestion,
    ConsultRequest,
    ConsultResponse,
    consult,
    suggest_balance,
)

router = APIRouter(prefix="/api", tags=["assistant"])


@router.post("/balance/suggest", response_model=BalanceSuggestion)
def balance_suggest(request: BalanceRequest) -> BalanceSuggestion:
    """Suggest attack/hp for a battle card, with a short reason."""
    return suggest_balance(request)


@router.post("/consult", response_model=ConsultResponse)
def consult_card(request: ConsultRequest) -> ConsultResponse:
    """Improve, shorten, or propose penalties for a party card's text."""
    return consult(request)
