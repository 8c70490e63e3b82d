"""Session and message records for the in-memory chat store."""

from datetime import datetime, timezone
from typing import Any, Optional

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _isoformat(value: datetime) -> str:
    # SQLite hands datetimes back without tzinfo; they are always stored as UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ChatSession(SQLModel, table=True):
    # AUTOINCREMENT keeps ids from being reused after the newest session is deleted
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str
    user_id: Optional[int] = None
    created_at: datetime = Field(default_factory=_utcnow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "userId": self.user_id,
            "createdAt": _isoformat(self.created_at),
        }


class ChatMessage(SQLModel, table=True):
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    session_id: int = Field(foreign_key="chatsession.id", index=True)
    role: str  # "user" | "assistant"
    content: str
    timestamp: datetime = Field(default_factory=_utcnow)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "sessionId": self.session_id,
            "role": self.role,
            "content": self.content,
            "timestamp": _isoformat(self.timestamp),
        }
