# blogapp/crud/crud_blog_post.py

from typing import List
from sqlalchemy.orm import Session
from blogapp.models.blog_post import BlogPost
from blogapp.schemas.blog_post import BlogPostCreate, BlogPostUpdate
from blogapp.core.authorization import authorize_or_forbid
from blogapp.core.exceptions import NotFoundError, UnauthorizedError
from blogapp.crud.crud_user import get_user
import logging

logger = logging.getLogger(__name__)

def _new_post(post: BlogPostCreate, owner_id: int) -> BlogPost:
    data = post.model_dump(mode="json")
    return BlogPost(**data, owner_id=owner_id, average_rating=0.0)

def create_blog_post(db: Session, post: BlogPostCreate, owner_id: int) -> BlogPost:
    if get_user(db, owner_id) is None:
        logger.warning(f"Post creation rejected, unknown user {owner_id}")
        raise UnauthorizedError("User not found")
    db_post = _new_post(post, owner_id)
    db.add(db_post)
    db.commit()
    db.refresh(db_post)
    logger.info(f"Blog post created. ID: {db_post.id}, owner: {owner_id}")
    return db_post

def create_blog_posts(db: Session, posts: List[BlogPostCreate], owner_id: int) -> List[BlogPost]:
    """Create several posts; each is committed on its own so a failure never leaves a partial post."""
    created = []
    for post in posts:
        created.append(create_blog_post(db, post, owner_id))
    logger.info(f"Created {len(created)} blog posts for owner {owner_id}")
    return created

def get_blog_posts(db: Session, skip: int = 0, limit: int = 100) -> List[BlogPost]:
    return db.query(BlogPost)\
             .order_by(BlogPost.id)\
             .offset(skip)\
             .limit(limit)\
             .all()

def get_blog_post(db: Session, post_id: int) -> BlogPost:
    post = db.query(BlogPost).filter(BlogPost.id == post_id).first()
    if post is None:
        logger.warning(f"Blog post {post_id} not found")
        raise NotFoundError(f"Blog post with ID {post_id} not found")
    return post

def get_blog_posts_by_owner(db: Session, owner_id: int) -> List[BlogPost]:
    posts = db.query(BlogPost)\
              .filter(BlogPost.owner_id == owner_id)\
              .order_by(BlogPost.id)\
              .all()
    if not posts:
        raise NotFoundError(f"No blog posts found for user with ID {owner_id}")
    return posts

def get_owned_blog_post(db: Session, post_id: int, requester_id: int, action: str) -> BlogPost:
    post = get_blog_post(db, post_id)
    return authorize_or_forbid(
        post,
        requester_id,
        owner_key=lambda p: p.owner_id,
        message=f"You are not authorized to {action} this post",
    )

def update_blog_post(db: Session, post_id: int, post_update: BlogPostUpdate, requester_id: int) -> BlogPost:
    get_owned_blog_post(db, post_id, requester_id, "update")
    update_data = post_update.model_dump(mode="json", exclude_unset=True, exclude_none=True)
    if update_data:
        affected = db.query(BlogPost)\
                     .filter(BlogPost.id == post_id)\
                     .update(update_data, synchronize_session="fetch")
        if affected == 0:
            db.rollback()
            raise NotFoundError(f"Blog post with ID {post_id} not found")
        db.commit()
    logger.info(f"Blog post {post_id} updated fields: {sorted(update_data)}")
    return get_blog_post(db, post_id)

def delete_blog_post(db: Session, post_id: int, requester_id: int) -> None:
    get_owned_blog_post(db, post_id, requester_id, "delete")
    affected = db.query(BlogPost)\
                 .filter(BlogPost.id == post_id)\
                 .delete(synchronize_session=False)
    if affected == 0:
        db.rollback()
        raise NotFoundError(f"Blog post with ID {post_id} not found")
    db.commit()
    db.expire_all()
    logger.info(f"Blog post {post_id} deleted by owner {requester_id}")

def delete_blog_posts_by_owner(db: Session, requester_id: int) -> int:
    if get_user(db, requester_id) is None:
        raise NotFoundError("User not found")
    deleted = db.query(BlogPost)\
                .filter(BlogPost.owner_id == requester_id)\
                .delete(synchronize_session=False)
    db.commit()
    db.expire_all()
    logger.info(f"Deleted {deleted} blog posts of user {requester_id}")
    return deleted
