# blogapp/api/endpoints/comments.py

import logging
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from blogapp import crud, schemas
from blogapp.api import deps
from blogapp.core.security import CallerIdentity

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/{post_id}", response_model=schemas.Comment, status_code=status.HTTP_201_CREATED)
def create_comment(
    post_id: int,
    comment: schemas.CommentCreate,
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    return crud.create_comment(db, comment=comment, post_id=post_id, author_email=caller.email)

@router.get("/post/{post_id}", response_model=List[schemas.Comment])
def read_post_comments(post_id: int, db: Session = Depends(deps.get_db)):
    """Get comments for a specific blog post"""
    return crud.get_comments_by_post(db, post_id=post_id)

@router.patch("/{comment_id}", response_model=schemas.Comment)
def update_comment(
    comment_id: int,
    comment_update: schemas.CommentUpdate,
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    return crud.update_comment(db, comment_id=comment_id, author_email=caller.email,
                               content=comment_update.content)

@router.delete("/post/{post_id}", response_model=schemas.Message)
def delete_my_post_comments(
    post_id: int,
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    """Delete all of the caller's comments on a post"""
    crud.delete_comments_by_author(db, post_id=post_id, author_email=caller.email)
    return {"message": "All comments for the post deleted successfully"}

@router.delete("/{comment_id}", response_model=schemas.Message)
def delete_comment(
    comment_id: int,
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    crud.delete_comment(db, comment_id=comment_id, author_email=caller.email)
    return {"message": "Comment deleted successfully"}
