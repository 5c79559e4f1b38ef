from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime

class BookmarkBase(BaseModel):
    book_id: int = Field(..., ge=1, le=66)
    chapter: int = Field(..., ge=1)
    verse: int = Field(..., ge=1)

class BookmarkCreate(BookmarkBase):
    model_config = ConfigDict(strict=True)

class BookmarkRead(BookmarkBase):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class BookmarkDetail(BookmarkRead):
    # Joined from the corpus when listing
    book_name: Optional[str] = None
    text: Optional[str] = None
