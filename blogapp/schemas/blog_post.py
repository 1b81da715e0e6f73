# blogapp/schemas/blog_post.py

from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional, List
from blogapp.models.media import MediaKind

class MediaUrl(BaseModel):
    """A media reference embedded in a post"""
    url: str = Field(..., min_length=1)
    media_kind: MediaKind

class BlogPostBase(BaseModel):
    """Base schema for blog posts"""
    title: str = Field(..., min_length=1, max_length=255)
    brief: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    media_urls: List[MediaUrl] = []

class BlogPostCreate(BlogPostBase):
    """Schema for creating blog posts"""
    pass

class BlogPostUpdate(BaseModel):
    """Schema for updating blog posts; average_rating and owner are not client-settable"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    brief: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = Field(None, min_length=1)
    media_urls: Optional[List[MediaUrl]] = None

    class Config:
        extra = "forbid"

class BlogPost(BlogPostBase):
    """Schema for complete blog post representation"""
    id: int
    owner_id: int
    average_rating: float = 0.0
    created_at: datetime

    class Config:
        from_attributes = True
