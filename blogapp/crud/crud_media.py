# blogapp/crud/crud_media.py

import logging
from typing import List
from sqlalchemy.orm import Session
from blogapp.models.media import Media
from blogapp.schemas.media import MediaCreate, MediaUpdate
from blogapp.core.exceptions import NotFoundError
from blogapp.crud.crud_blog_post import get_blog_post, get_owned_blog_post

logger = logging.getLogger(__name__)

def get_media(db: Session, media_id: int) -> Media:
    media = db.query(Media).filter(Media.id == media_id).first()
    if media is None:
        raise NotFoundError(f"Media with ID {media_id} not found")
    return media

def get_media_by_post(db: Session, post_id: int) -> List[Media]:
    get_blog_post(db, post_id)
    return db.query(Media).filter(Media.post_id == post_id).order_by(Media.id).all()

def create_media(db: Session, post_id: int, item: MediaCreate, requester_id: int) -> Media:
    return create_media_batch(db, post_id, [item], requester_id)[0]

def create_media_batch(db: Session, post_id: int, items: List[MediaCreate], requester_id: int) -> List[Media]:
    get_owned_blog_post(db, post_id, requester_id, "attach media to")
    db_items = [Media(url=item.url, media_kind=item.media_kind, post_id=post_id) for item in items]
    db.add_all(db_items)
    db.commit()
    for db_item in db_items:
        db.refresh(db_item)
    logger.info(f"Attached {len(db_items)} media items to post {post_id}")
    return db_items

def update_media(db: Session, media_id: int, media_update: MediaUpdate, requester_id: int) -> Media:
    media = get_media(db, media_id)
    get_owned_blog_post(db, media.post_id, requester_id, "modify media of")
    for field, value in media_update.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(media, field, value)
    db.commit()
    db.refresh(media)
    logger.info(f"Media {media_id} updated")
    return media

def delete_media(db: Session, media_id: int, requester_id: int) -> None:
    media = get_media(db, media_id)
    get_owned_blog_post(db, media.post_id, requester_id, "modify media of")
    affected = db.query(Media).filter(Media.id == media_id).delete(synchronize_session=False)
    if affected == 0:
        db.rollback()
        raise NotFoundError(f"Media with ID {media_id} not found")
    db.commit()
    db.expire_all()
    logger.info(f"Media {media_id} deleted")

def delete_media_by_post(db: Session, post_id: int, requester_id: int) -> int:
    get_owned_blog_post(db, post_id, requester_id, "modify media of")
    deleted = db.query(Media).filter(Media.post_id == post_id).delete(synchronize_session=False)
    db.commit()
    db.expire_all()
    logger.info(f"Deleted {deleted} media items of post {post_id}")
    return deleted
