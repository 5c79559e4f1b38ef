from pydantic import BaseModel, ConfigDict, Field
from typing import Literal
from datetime import datetime

class ChatMessageCreate(BaseModel):
    role: Literal['user', 'assistant']
    content: str = Field(..., min_length=1)

class ChatMessageRead(ChatMessageCreate):
    id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1, max_length=4000)
