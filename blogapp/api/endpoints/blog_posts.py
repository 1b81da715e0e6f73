# blogapp/api/endpoints/blog_posts.py

import logging
from typing import List
from fastapi import APIRouter, Depends, Query, Path, status
from sqlalchemy.orm import Session
from blogapp import crud, schemas
from blogapp.api import deps
from blogapp.core.security import CallerIdentity

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/", response_model=schemas.BlogPost, status_code=status.HTTP_201_CREATED)
def create_blog_post(
    post: schemas.BlogPostCreate,
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    return crud.create_blog_post(db, post=post, owner_id=caller.user_id)


@router.post("/multiple", response_model=List[schemas.BlogPost], status_code=status.HTTP_201_CREATED)
def create_blog_posts(
    posts: List[schemas.BlogPostCreate],
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    return crud.create_blog_posts(db, posts=posts, owner_id=caller.user_id)


@router.get("/", response_model=List[schemas.BlogPost])
def read_blog_posts(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    db: Session = Depends(deps.get_db)
):
    return crud.get_blog_posts(db, skip=skip, limit=limit)


@router.get("/user/{user_id}", response_model=List[schemas.BlogPost])
def read_blog_posts_by_user(
    user_id: int = Path(..., title="The ID of the user whose posts to list"),
    db: Session = Depends(deps.get_db)
):
    """Get all blog posts for a user; 404 when the user has none."""
    return crud.get_blog_posts_by_owner(db, owner_id=user_id)


@router.delete("/user/all", response_model=schemas.Message)
def delete_all_blog_posts(
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    """Delete every blog post of the logged-in user."""
    crud.delete_blog_posts_by_owner(db, requester_id=caller.user_id)
    return {"message": "All blog posts deleted successfully"}


@router.get("/{post_id}", response_model=schemas.BlogPost)
def read_blog_post(
    post_id: int = Path(..., title="The ID of the blog post to retrieve"),
    db: Session = Depends(deps.get_db)
):
    return crud.get_blog_post(db, post_id=post_id)


@router.patch("/{post_id}", response_model=schemas.BlogPost)
def update_blog_post(
    post_update: schemas.BlogPostUpdate,
    post_id: int = Path(..., title="The ID of the blog post to update"),
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    return crud.update_blog_post(db, post_id=post_id, post_update=post_update, requester_id=caller.user_id)


@router.delete("/{post_id}", response_model=schemas.Message)
def delete_blog_post(
    post_id: int = Path(..., title="The ID of the blog post to delete"),
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    crud.delete_blog_post(db, post_id=post_id, requester_id=caller.user_id)
    return {"message": "Blog post deleted successfully"}
