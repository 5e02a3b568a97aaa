from paperdream.models.card import (
    BattleAttributes,
    CardKind,
    PartyAttributes,
    infer_card_kind,
    validate_attributes,
    validate_card_name,
)
from paperdream.models.design import (
    CardRenderSpec,
    CardStyleOverrides,
    DesignSettings,
    FooterSettings,
    HeaderSettings,
    ResolvedCardStyle,
    ResolvedFooter,
    TextSizeSet,
)
from paperdream.models.failure import (
    DuplicateTitleError,
    FailureDetail,
    FailureKind,
    KnownError,
    NotFoundError,
    UpstreamServiceError,
    ValidationError,
)

__all__ = [
    "BattleAttributes",
    "CardKind",
    "CardRenderSpec",
    "CardStyleOverrides",
    "DesignSettings",
    "DuplicateTitleError",
    "FailureDetail",
    "FailureKind",
    "FooterSettings",
    "HeaderSettings",
    "KnownError",
    "NotFoundError",
    "PartyAttributes",
    "ResolvedCardStyle",
    "ResolvedFooter",
    "TextSizeSet",
    "UpstreamServiceError",
    "ValidationError",
    "infer_card_kind",
    "validate_attributes",
    "validate_card_name",
]
