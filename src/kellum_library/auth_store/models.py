"""SQLAlchemy models for identities and their sessions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime  # noqa: TC003 - used at runtime for SQLAlchemy
from typing import Any

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from kellum_library.database import Base, generate_uuid


class Identity(Base):
    """A registered principal. The credential hash is opaque and never interpreted."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    credential_hash: Mapped[str] = mapped_column(String(512), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    sessions: Mapped[list[UserSession]] = relationship(
        "UserSession", back_populates="identity", cascade="all, delete-orphan"
    )

    def __init__(
        self,
        username: str,
        credential_hash: str,
        id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.username = username
        self.credential_hash = credential_hash

    def __repr__(self) -> str:
        # credential_hash is deliberately left out
        return f"<Identity(id={self.id!r}, username={self.username!r})>"


class UserSession(Base):
    """A time-bounded proof of authentication.

    expires_at is stored as naive UTC and is never updated after insert.
    """

    __tablename__ = "user_sessions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id"), nullable=False, index=True
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )

    identity: Mapped[Identity] = relationship("Identity", back_populates="sessions")

    def __init__(
        self,
        user_id: str,
        expires_at: datetime,
        id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.user_id = user_id
        self.expires_at = expires_at

    def __repr__(self) -> str:
        return (
            f"<UserSession(id={self.id!r}, user_id={self.user_id!r}, "
            f"expires_at={self.expires_at!r})>"
        )


@dataclass(frozen=True)
class LiveSession:
    """A session row joined to its identity, fetched only while unexpired."""

    session_id: str
    user_id: str
    username: str
    expires_at: datetime
