# models/chat_message.py
from sqlalchemy import Column, Integer, String, DateTime, Text
from database import Base
from .bookmark import _utcnow

ROLE_USER = 'user'
ROLE_ASSISTANT = 'assistant'
CHAT_ROLES = (ROLE_USER, ROLE_ASSISTANT)


class ChatMessage(Base):
    __tablename__ = 'chat_messages'

    id = Column(Integer, primary_key=True, index=True)
    role = Column(String(16), nullable=False)  # 'user' or 'assistant'
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)

    def __repr__(self):
        return f'<ChatMessage {self.id} {self.role}>'
