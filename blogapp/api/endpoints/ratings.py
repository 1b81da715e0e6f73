# blogapp/api/endpoints/ratings.py

import logging
from typing import List
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session
from blogapp import crud, schemas
from blogapp.api import deps
from blogapp.core.security import CallerIdentity

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/{post_id}", response_model=schemas.Rating, status_code=status.HTTP_201_CREATED)
def rate_blog_post(
    rating: schemas.RatingCreate,
    post_id: int = Path(..., title="The ID of the post to rate"),
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    """
    Rate a blog post from 1 to 5. Each user may rate a post once;
    a second attempt returns 409.
    """
    return crud.create_rating(db, caller=caller, post_id=post_id, rating=rating)

@router.get("/{post_id}", response_model=List[schemas.Rating])
def read_post_ratings(
    post_id: int = Path(..., title="The ID of the post"),
    db: Session = Depends(deps.get_db)
):
    return crud.get_ratings_by_post(db, post_id=post_id)

@router.get("/{post_id}/average", response_model=schemas.AverageRating)
def read_average_rating(
    post_id: int = Path(..., title="The ID of the post"),
    db: Session = Depends(deps.get_db)
):
    return {"post_id": post_id, "average_rating": crud.get_average_rating(db, post_id=post_id)}
