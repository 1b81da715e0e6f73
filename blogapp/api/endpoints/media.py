# blogapp/api/endpoints/media.py

import logging
from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from blogapp import crud, schemas
from blogapp.api import deps
from blogapp.core.security import CallerIdentity

logger = logging.getLogger(__name__)

router = APIRouter()

@router.post("/post/{post_id}", response_model=schemas.Media, status_code=status.HTTP_201_CREATED)
def create_media(
    post_id: int,
    item: schemas.MediaCreate,
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    return crud.create_media(db, post_id=post_id, item=item, requester_id=caller.user_id)

@router.post("/post/{post_id}/multiple", response_model=List[schemas.Media], status_code=status.HTTP_201_CREATED)
def create_media_batch(
    post_id: int,
    items: List[schemas.MediaCreate],
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    return crud.create_media_batch(db, post_id=post_id, items=items, requester_id=caller.user_id)

@router.get("/post/{post_id}", response_model=List[schemas.Media])
def read_post_media(post_id: int, db: Session = Depends(deps.get_db)):
    return crud.get_media_by_post(db, post_id=post_id)

@router.delete("/post/{post_id}", response_model=schemas.Message)
def delete_post_media(
    post_id: int,
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    crud.delete_media_by_post(db, post_id=post_id, requester_id=caller.user_id)
    return {"message": "All media for the post deleted successfully"}

@router.get("/{media_id}", response_model=schemas.Media)
def read_media(media_id: int, db: Session = Depends(deps.get_db)):
    return crud.get_media(db, media_id=media_id)

@router.patch("/{media_id}", response_model=schemas.Media)
def update_media(
    media_id: int,
    media_update: schemas.MediaUpdate,
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    return crud.update_media(db, media_id=media_id, media_update=media_update, requester_id=caller.user_id)

@router.delete("/{media_id}", response_model=schemas.Message)
def delete_media(
    media_id: int,
    caller: CallerIdentity = Depends(deps.get_current_identity),
    db: Session = Depends(deps.get_db)
):
    crud.delete_media(db, media_id=media_id, requester_id=caller.user_id)
    return {"message": "Media deleted successfully"}
