from pydantic import BaseModel, Field
from typing import Literal, Optional

class AIConfigUpdate(BaseModel):
    provider: Literal['openai', 'anthropic', 'groq', 'gemini']
    # None leaves the stored key untouched, "" clears it
    api_key: Optional[str] = Field(None, max_length=512)

class AIConfigRead(BaseModel):
    provider: str
    model: str
    is_configured: bool
