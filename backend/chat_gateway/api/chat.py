"""REST API for the counseling chat: send a message, list and delete sessions."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header
from pydantic import BaseModel, Field

from chat_gateway.core.config import settings
from chat_gateway.core.errors import ConfigurationError, SessionNotFoundError
from chat_gateway.core.store import ChatStore, get_store
from chat_gateway.services.llm import get_llm_provider
from chat_gateway.services.llm.base import Message

router = APIRouter()
logger = logging.getLogger(__name__)


class SendRequest(BaseModel):
    content: str = Field(min_length=1)
    session_id: Optional[int] = Field(default=None, alias="sessionId")


def make_title(content: str) -> str:
    limit = settings.title_max_length
    if len(content) > limit:
        return content[:limit] + "..."
    return content


@router.post("/send")
async def send_message(
    body: SendRequest,
    x_api_key: Optional[str] = Header(default=None),
    store: ChatStore = Depends(get_store),
):
    api_key = x_api_key or settings.openai_api_key
    if not api_key:
        raise ConfigurationError("OpenAI API key not configured")

    if body.session_id is None:
        session_id = store.create_session(make_title(body.content)).id
    else:
        if store.get_session(body.session_id) is None:
            raise SessionNotFoundError(body.session_id)
        session_id = body.session_id

    # Committed before the completion call; a failed call leaves it in place
    store.add_message(session_id, "user", body.content)

    prompt = [Message(role="system", content=settings.system_prompt)]
    prompt += [Message(role=m.role, content=m.content) for m in store.list_messages(session_id)]

    provider = get_llm_provider(api_key)
    response = await provider.chat(prompt)
    reply = response.content or settings.fallback_reply

    ai_message = store.add_message(session_id, "assistant", reply)
    return {"message": ai_message.to_dict(), "sessionId": session_id}


@router.get("/sessions")
async def list_sessions(store: ChatStore = Depends(get_store)):
    return [s.to_dict() for s in store.list_sessions()]


@router.get("/sessions/{session_id}")
async def get_session_messages(session_id: int, store: ChatStore = Depends(get_store)):
    # Unknown sessions have no messages, so this is an empty list rather than a 404
    return [m.to_dict() for m in store.list_messages(session_id)]


@router.delete("/sessions/{session_id}")
async def delete_session(session_id: int, store: ChatStore = Depends(get_store)):
    store.delete_session(session_id)
    return {"success": True}
