"""
AI helpers for card authors, backed by Claude.

Two features:
- balance suggestion for battle cards: proposes attack/hp and explains why
- consult for party cards: rewrites or critiques card text on request

Both are advisory. Results go back to the editor's local form state and are
never written to stored cards. Any failure (missing key, network, API error,
unparseable answer) becomes an UpstreamServiceError; there is exactly one
attempt per call.
"""

import json
import logging
import re
from typing import Any, Literal

import anthropic
from anthropic.types import TextBlock
from pydantic import BaseModel, Field

from paperdream.config import settings
from paperdream.models.design import CamelModel
from paperdream.models.failure import UpstreamServiceError

logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

PromptType = Literal["improve", "shorten", "penalty"]


class BalanceRequest(BaseModel):
    """Current state of a battle card sent for balance review."""

    name: str
    type: Literal["monster", "spell", "trap"]
    attack: int
    hp: int
    effect: str = ""


class BalanceSuggestion(BaseModel):
    """Suggested stats with a short rationale."""

    suggested_attack: int
    suggested_hp: int
    reason: str


class ConsultRequest(CamelModel):
    """Party card text sent for a consult."""

    name: str = ""
    type: str = "action"
    action: str = ""
    effect: str = ""
    prompt_type: PromptType = Field(..., description="improve, shorten or penalty")


class ConsultResponse(BaseModel):
    response: str


BALANCE_PROMPT = """You are a balance assistant for a head-to-head trading card game \
in the style of Yu-Gi-Oh! or Hearthstone. Evaluate the card below and propose fitting stats.
Attack and HP normally range from 0 to 10; cards with strong effects should have lower stats.

Card:
- Name: {name}
- Type: {type}
- Current attack: {attack}
- Current HP: {hp}
- Effect text: {effect}

Reply with this JSON object only, and nothing else:
{{
  "suggested_attack": <integer>,
  "suggested_hp": <integer>,
  "reason": "<short explanation, in the same language as the card text>"
}}"""

CONSULT_INSTRUCTIONS: dict[str, str] = {
    "improve": (
        "Suggest how to make this card more fun and clearer at a party. "
        "Give a revised action and effect text and one sentence on why."
    ),
    "shorten": (
        "Rewrite the action and effect text to be as short as possible "
        "while keeping the meaning. Return only the shortened texts."
    ),
    "penalty": (
        "Propose three light-hearted penalty ideas that fit this card. "
        "Keep them harmless and easy to perform at a table."
    ),
}

CONSULT_PROMPT = """You help people write cards for a party game.

Card:
- Name: {name}
- Type: {type}
- Action: {action}
- Effect: {effect}

{instruction}
Answer in the same language as the card text."""


def _client() -> anthropic.Anthropic:
    if not settings.anthropic_api_key:
        raise UpstreamServiceError(
            "AI assistant is not configured",
            detail="Anthropic API key not configured",
            unavailable=True,
        )
    return anthropic.Anthropic(
        api_key=settings.anthropic_api_key,
        base_url=settings.anthropic_base_url,
        max_retries=0,
    )


def _ask(prompt: str, purpose: str) -> str:
    """Send a single-turn prompt and return the first text block."""
    client = _client()
    try:
        response = client.messages.create(
            model=settings.ai_model,
            max_tokens=settings.ai_max_tokens,
            messages=[{"role": "user", "content": prompt}],
        )
    except anthropic.APIError as e:
        logger.exception("AI %s request failed", purpose)
        raise UpstreamServiceError("AI API request failed", detail=type(e).__name__) from e

    if response.usage:
        logger.info(
            "ai_token_usage",
            extra={
                "purpose": purpose,
                "input_tokens": response.usage.input_tokens,
                "output_tokens": response.usage.output_tokens,
            },
        )

    if not response.content or not isinstance(response.content[0], TextBlock):
        raise UpstreamServiceError("Unexpected response from AI", detail="first block is not text")
    return response.content[0].text


def _as_int(value: Any) -> int:
    return int(round(float(value)))


def parse_balance_suggestion(text: str) -> BalanceSuggestion:
    """
    Pull the JSON object out of a model answer.

    The model sometimes wraps the object in prose or code fences, so the
    outermost {...} span is taken.
    """
    match = _JSON_OBJECT.search(text)
    if match is None:
        raise UpstreamServiceError("Failed to parse JSON from AI response")

    try:
        payload = json.loads(match.group(0))
        return BalanceSuggestion(
            suggested_attack=_as_int(payload["suggested_attack"]),
            suggested_hp=_as_int(payload["suggested_hp"]),
            reason=str(payload["reason"]),
        )
    except (ValueError, KeyError, TypeError) as e:
        raise UpstreamServiceError(
            "Failed to parse JSON from AI response", detail=type(e).__name__
        ) from e


def suggest_balance(request: BalanceRequest) -> BalanceSuggestion:
    """Ask Claude for balanced attack/hp values for a battle card."""
    prompt = BALANCE_PROMPT.format(
        name=request.name,
        type=request.type,
        attack=request.attack,
        hp=request.hp,
        effect=request.effect,
    )
    return parse_balance_suggestion(_ask(prompt, "balance"))


def consult(request: ConsultRequest) -> ConsultResponse:
    """Ask Claude to improve, shorten, or suggest penalties for a party card."""
    prompt = CONSULT_PROMPT.format(
        name=request.name,
        type=request.type,
        action=request.action,
        effect=request.effect,
        instruction=CONSULT_INSTRUCTIONS[request.prompt_type],
    )
    text = _ask(prompt, f"consult:{request.prompt_type}")
    if not text.strip():
        raise UpstreamServiceError("AI returned an empty answer")
    return ConsultResponse(response=text.strip())
