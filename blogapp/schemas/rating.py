# blogapp/schemas/rating.py

from pydantic import BaseModel, Field, StrictInt
from datetime import datetime
from typing import Optional

class RatingCreate(BaseModel):
    """Schema for rating a post; value must be an integer from 1 to 5"""
    value: StrictInt = Field(..., ge=1, le=5)
    comment: Optional[str] = None

class Rating(BaseModel):
    id: int
    value: int
    comment: Optional[str] = None
    post_id: int
    user_id: int
    author_email: str
    created_at: datetime

    class Config:
        from_attributes = True

class AverageRating(BaseModel):
    post_id: int
    average_rating: float
