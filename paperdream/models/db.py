"""
SQLAlchemy ORM models for persistent storage.

A game owns an ordered set of cards; deleting a game deletes its cards.
Card attributes are stored as a JSON blob whose shape depends on `kind`.
"""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import (
    JSON,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

from paperdream.config import DEFAULT_CARD_HEIGHT_MM, DEFAULT_CARD_WIDTH_MM


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class GameDB(Base):
    """
    A card game project.

    Titles are unique after trimming; uniqueness is checked before insert so
    callers get a DuplicateTitleError instead of an IntegrityError.
    """

    __tablename__ = "games"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    cards: Mapped[list["CardDB"]] = relationship(
        back_populates="game", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<GameDB(id={self.id}, title={self.title})>"


class CardDB(Base):
    """A single card belonging to a game."""

    __tablename__ = "cards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    game_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("games.id", ondelete="CASCADE"), index=True
    )
    # battle | party; NULL on rows created before the discriminator existed
    kind: Mapped[str | None] = mapped_column(String(20), nullable=True)
    name: Mapped[str] = mapped_column(String(255))
    image_url: Mapped[str] = mapped_column(Text, default="")
    front_image_url: Mapped[str | None] = mapped_column(Text, nullable=True, default="")
    back_image_url: Mapped[str | None] = mapped_column(Text, nullable=True, default="")
    width: Mapped[float] = mapped_column(Float, default=DEFAULT_CARD_WIDTH_MM)
    height: Mapped[float] = mapped_column(Float, default=DEFAULT_CARD_HEIGHT_MM)
    order: Mapped[int] = mapped_column(Integer, default=0, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    attributes: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    game: Mapped["GameDB"] = relationship(back_populates="cards")

    def __repr__(self) -> str:
        return f"<CardDB(id={self.id}, game_id={self.game_id}, name={self.name})>"
