"""In-memory chat store.

All state lives in a private SQLite ``:memory:`` database. The static pool
keeps a single connection open so every request in the process sees the same
data; the data disappears with the store (or the process).
"""

import logging

from fastapi import Request
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine, select

from chat_gateway.core.errors import SessionNotFoundError
from chat_gateway.models.chat import ChatMessage, ChatSession

logger = logging.getLogger(__name__)


class ChatStore:
    def __init__(self, echo: bool = False):
        self.engine = create_engine(
            "sqlite://",
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        SQLModel.metadata.create_all(self.engine)

    def close(self) -> None:
        self.engine.dispose()

    def create_session(self, title: str) -> ChatSession:
        with Session(self.engine) as session:
            chat_session = ChatSession(title=title)
            session.add(chat_session)
            session.commit()
            session.refresh(chat_session)
            logger.debug(f"Created session {chat_session.id}")
            return chat_session

    def get_session(self, session_id: int) -> ChatSession | None:
        with Session(self.engine) as session:
            return session.get(ChatSession, session_id)

    def list_sessions(self) -> list[ChatSession]:
        with Session(self.engine) as session:
            return list(session.exec(select(ChatSession).order_by(ChatSession.id)).all())  # type: ignore

    def add_message(self, session_id: int, role: str, content: str) -> ChatMessage:
        with Session(self.engine) as session:
            if session.get(ChatSession, session_id) is None:
                raise SessionNotFoundError(session_id)
            message = ChatMessage(session_id=session_id, role=role, content=content)
            session.add(message)
            session.commit()
            session.refresh(message)
            return message

    def list_messages(self, session_id: int) -> list[ChatMessage]:
        with Session(self.engine) as session:
            return list(
                session.exec(
                    select(ChatMessage)
                    .where(ChatMessage.session_id == session_id)
                    .order_by(ChatMessage.id)  # type: ignore
                ).all()
            )

    def delete_session(self, session_id: int) -> bool:
        """Delete a session and its messages. Returns False if the session did not exist."""
        with Session(self.engine) as session:
            chat_session = session.get(ChatSession, session_id)
            if chat_session is None:
                logger.debug(f"Delete: session {session_id} not found")
                return False

            messages = session.exec(
                select(ChatMessage).where(ChatMessage.session_id == session_id)
            ).all()
            for message in messages:
                session.delete(message)

            session.delete(chat_session)
            session.commit()
            logger.debug(f"Deleted session {session_id}")
            return True


def get_store(request: Request) -> ChatStore:
    return request.app.state.store
