# models/bookmark.py
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, DateTime, UniqueConstraint
from database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Bookmark(Base):
    __tablename__ = 'bookmarks'
    __table_args__ = (
        UniqueConstraint('book_id', 'chapter', 'verse', name='uq_bookmarks_reference'),
    )

    id = Column(Integer, primary_key=True, index=True)

    # Book text and name are joined from the in-memory corpus at read time
    book_id = Column(Integer, nullable=False, index=True)  # Canonical id, 1-66
    chapter = Column(Integer, nullable=False)
    verse = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)

    def __repr__(self):
        return f'<Bookmark {self.id} - {self.book_id} {self.chapter}:{self.verse}>'
