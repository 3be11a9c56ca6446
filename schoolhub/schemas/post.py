from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

from ..models.post import PostType
from .common import UrlStr


class PostCreate(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=5000)
    media_url: Optional[UrlStr] = None
    media_type: Optional[str] = None
    type: PostType
    author_id: int
    is_pinned: bool = False


class PostUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = Field(default=None, min_length=1, max_length=5000)
    media_url: Optional[UrlStr] = None
    media_type: Optional[str] = None
    is_pinned: Optional[bool] = None


class PostResponse(BaseModel):
    id: int
    title: str
    content: str
    media_url: Optional[str] = None
    media_type: Optional[str] = None
    type: PostType
    author_id: int
    likes_count: int
    comments_count: int
    is_pinned: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
