"""
Failure classification for PaperDream.

Every error that reaches an API caller is a subclass of `KnownError`. Each
one carries a `FailureKind`, a user-appropriate message, and the HTTP status
it maps to. The exception handler registered in `paperdream.main` turns them
into a JSON body callers can branch on.

Taxonomy:
- ValidationError: missing/blank required field, stat out of range,
  malformed payload. Carries the offending field.
- DuplicateTitleError: game title already taken. Carries the existing ID so
  the caller can offer "open existing" instead of treating it as fatal.
- NotFoundError: operation on a non-existent game or card.
- UpstreamServiceError: the AI service failed. Never retried, never
  reflected in persisted state.

The style and geometry resolvers raise none of these; they are total.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"
    MISSING_REQUIRED = "missing_required"
    OUT_OF_RANGE = "out_of_range"

    # Conflicts
    DUPLICATE_TITLE = "DUPLICATE_TITLE"

    # Resource failures
    NOT_FOUND = "not_found"

    # Service failures
    SERVICE_UNAVAILABLE = "service_unavailable"
    EXTERNAL_API_ERROR = "external_api_error"


class FailureDetail(BaseModel):
    """Body returned to the caller for any known failure."""

    error: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    field: str | None = Field(
        default=None,
        description="Request field the failure refers to, if any",
    )
    existing_game_id: int | None = Field(
        default=None,
        serialization_alias="existingGameId",
        description="ID of the game that owns a conflicting title",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.status_code = status_code
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to the response body."""
        return FailureDetail(error=self.kind, message=self.message, detail=self.detail)

    def to_content(self) -> dict[str, Any]:
        """JSON-ready body, camelCase, without empty optional fields."""
        return self.to_detail().model_dump(mode="json", by_alias=True, exclude_none=True)


class ValidationError(KnownError):
    """A required field is missing/blank or a value is outside its declared range."""

    def __init__(
        self,
        field: str,
        message: str,
        kind: FailureKind = FailureKind.INVALID_INPUT,
        detail: str | None = None,
    ):
        self.field = field
        super().__init__(kind=kind, message=message, detail=detail, status_code=400)

    def to_detail(self) -> FailureDetail:
        return FailureDetail(
            error=self.kind,
            message=self.message,
            detail=self.detail,
            field=self.field,
        )


class DuplicateTitleError(KnownError):
    """A game with the same trimmed title already exists."""

    def __init__(self, title: str, existing_game_id: int):
        self.title = title
        self.existing_game_id = existing_game_id
        super().__init__(
            kind=FailureKind.DUPLICATE_TITLE,
            message=f"A game titled '{title}' already exists",
            status_code=409,
        )

    def to_detail(self) -> FailureDetail:
        return FailureDetail(
            error=self.kind,
            message=self.message,
            field="title",
            existing_game_id=self.existing_game_id,
        )


class NotFoundError(KnownError):
    """Raised when a game or card ID does not exist."""

    def __init__(self, resource: str, resource_id: int):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message=f"{resource.capitalize()} not found",
            detail=f"{resource} id={resource_id}",
            status_code=404,
        )


class UpstreamServiceError(KnownError):
    """
    The AI service could not produce a usable answer.

    Covers a missing API key (503), network/API failures and unparseable
    responses (502). Callers show the message and keep their local state.
    """

    def __init__(self, message: str, detail: str | None = None, unavailable: bool = False):
        super().__init__(
            kind=(
                FailureKind.SERVICE_UNAVAILABLE if unavailable else FailureKind.EXTERNAL_API_ERROR
            ),
            message=message,
            detail=detail,
            status_code=503 if unavailable else 502,
        )
