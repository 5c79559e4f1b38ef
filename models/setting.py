# models/setting.py
from sqlalchemy import Column, String, Text, DateTime
from database import Base
from .bookmark import _utcnow


class Setting(Base):
    __tablename__ = 'settings'

    key = Column(String(64), primary_key=True)
    value = Column(Text, nullable=True)
    updated_at = Column(DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    def __repr__(self):
        return f'<Setting {self.key}>'
