from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional


# 필수값 검증은 라우터에서 400으로 처리하므로 모두 Optional
class BlogCreate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None

    def is_complete(self) -> bool:
        return bool(self.title) and bool(self.content) and bool(self.author)


class BlogUpdate(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[str] = None


class BlogOut(BaseModel):
    id: int
    title: str
    content: str
    author: str
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MessageOut(BaseModel):
    message: str


class BlogCreated(MessageOut):
    post_id: int = Field(alias="postId")

    model_config = ConfigDict(populate_by_name=True)
