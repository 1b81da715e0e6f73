# blogapp/crud/crud_rating.py

"""
Ratings and the materialized ``average_rating`` on blog posts.

A user rates a post at most once. The ``(post_id, user_id)`` unique
constraint enforces that at the database, so there is no read-then-insert
window. The insert, the recomputation of the average from the post's
rating rows and the write-back to the post share one transaction, with the
post row locked so concurrent raters of the same post are serialised.
"""

from typing import List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from blogapp.models.blog_post import BlogPost
from blogapp.models.rating import Rating
from blogapp.schemas.rating import RatingCreate
from blogapp.core.exceptions import ConflictError, NotFoundError, UnauthorizedError
from blogapp.core.security import CallerIdentity
from blogapp.crud.crud_blog_post import get_blog_post
from blogapp.crud.crud_user import get_user
from blogapp.crud.rating_average import compute_average
import logging

logger = logging.getLogger(__name__)

def _already_rated(db: Session, post_id: int, user_id: int) -> bool:
    return db.query(Rating.id)\
             .filter(Rating.post_id == post_id, Rating.user_id == user_id)\
             .first() is not None

def create_rating(db: Session, caller: CallerIdentity, post_id: int, rating: RatingCreate) -> Rating:
    if get_user(db, caller.user_id) is None:
        raise UnauthorizedError("User not found")

    post = db.query(BlogPost)\
             .filter(BlogPost.id == post_id)\
             .with_for_update()\
             .first()
    if post is None:
        db.rollback()
        raise NotFoundError(f"Blog post with ID {post_id} not found")

    db_rating = Rating(
        value=rating.value,
        comment=rating.comment,
        post_id=post_id,
        user_id=caller.user_id,
        author_email=caller.email,
    )
    db.add(db_rating)
    try:
        db.flush()
    except IntegrityError:
        db.rollback()
        # Only a committed rating by this user makes the failure a duplicate
        if not _already_rated(db, post_id, caller.user_id):
            logger.error(f"Rating insert for post {post_id} by user {caller.user_id} violated a constraint")
            raise
        logger.warning(f"User {caller.user_id} tried to rate post {post_id} twice")
        raise ConflictError("User has already rated this blog post")

    post.average_rating = compute_average(db, post_id)
    db.commit()
    db.refresh(db_rating)
    logger.info(f"Rating {db_rating.id} ({db_rating.value}) stored for post {post_id}; average now {post.average_rating}")
    return db_rating

def get_ratings_by_post(db: Session, post_id: int) -> List[Rating]:
    get_blog_post(db, post_id)
    return db.query(Rating)\
             .filter(Rating.post_id == post_id)\
             .order_by(Rating.id)\
             .all()

def get_average_rating(db: Session, post_id: int) -> float:
    """Read path for the average, recomputed from the rows rather than read from the post."""
    get_blog_post(db, post_id)
    return compute_average(db, post_id)
