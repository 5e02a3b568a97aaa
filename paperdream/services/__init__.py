"""
PaperDream services.

Validation, persistence orchestration, uploads and AI helpers.
"""

from paperdream.services.ai_assistant import (
    BalanceRequest,
    BalanceSuggestion,
    ConsultRequest,
    ConsultResponse,
    consult,
    suggest_balance,
)
from paperdream.services.uploads import StoredUpload, store_upload

__all__ = [
    "BalanceRequest",
    "BalanceSuggestion",
    "ConsultRequest",
    "ConsultResponse",
    "StoredUpload",
    "consult",
    "store_upload",
    "suggest_balance",
]
