# blogapp/schemas/comment.py

from pydantic import BaseModel, Field
from datetime import datetime

class CommentCreate(BaseModel):
    author_name: str = Field(..., min_length=1, max_length=100)
    content: str = Field(..., min_length=1)

class CommentUpdate(BaseModel):
    content: str = Field(..., min_length=1)

class Comment(BaseModel):
    id: int
    content: str
    author_email: str
    author_name: str
    post_id: int
    created_at: datetime

    class Config:
        from_attributes = True
