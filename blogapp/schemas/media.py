# blogapp/schemas/media.py

from pydantic import BaseModel, Field
from typing import Optional
from blogapp.models.media import MediaKind

class MediaCreate(BaseModel):
    url: str = Field(..., min_length=1, max_length=512)
    media_kind: MediaKind

class MediaUpdate(BaseModel):
    url: Optional[str] = Field(None, min_length=1, max_length=512)
    media_kind: Optional[MediaKind] = None

class Media(MediaCreate):
    id: int
    post_id: int

    class Config:
        from_attributes = True
