from pydantic import BaseModel
from typing import List, Optional


class SuggestionRequest(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None


class SuggestionOut(BaseModel):
    suggestions: List[str]


class ApiKeyStatus(BaseModel):
    isSet: bool
    startsWithGsk: bool
    length: int
    isPlaceholder: bool
