# services/chat_service.py
import logging

from database import get_db_session
from models import ChatMessage
from schemas.chat_schemas import ChatMessageCreate, ChatMessageRead

logger = logging.getLogger(__name__)


def append_message(role, content):
    data = ChatMessageCreate(role=role, content=content)
    with get_db_session() as db:
        message = ChatMessage(role=data.role, content=data.content)
        db.add(message)
        db.flush()
        return ChatMessageRead.model_validate(message)


def list_history():
    """The whole transcript in the order it was written."""
    with get_db_session() as db:
        messages = db.query(ChatMessage).order_by(ChatMessage.created_at.asc(), ChatMessage.id.asc()).all()
        return [ChatMessageRead.model_validate(m) for m in messages]


def recent_turns(limit):
    """Last ``limit`` messages, oldest first, shaped for an AI provider."""
    if limit <= 0:
        return []
    with get_db_session() as db:
        messages = db.query(ChatMessage).order_by(ChatMessage.created_at.desc(), ChatMessage.id.desc()).limit(limit).all()
        return [{"role": m.role, "content": m.content} for m in reversed(messages)]


def clear_history():
    with get_db_session() as db:
        deleted = db.query(ChatMessage).delete()
        logger.info(f"Cleared {deleted} chat messages")
        return deleted
