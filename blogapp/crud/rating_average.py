# blogapp/crud/rating_average.py

from typing import Optional
from sqlalchemy import func
from sqlalchemy.orm import Session
from blogapp.models.blog_post import BlogPost
from blogapp.models.rating import Rating

def compute_average(db: Session, post_id: int) -> float:
    """
    Recompute a post's average rating from its rating rows.

    Returns:
        float: sum(value) / count rounded to 2 places, or 0.0 with no ratings
    """
    total, count = db.query(
        func.coalesce(func.sum(Rating.value), 0),
        func.count(Rating.id),
    ).filter(Rating.post_id == post_id).one()
    if not count:
        return 0.0
    return round(int(total) / count, 2)

def store_average(db: Session, post_id: int) -> Optional[float]:
    """Write the recomputed average onto the post. Does not commit."""
    post = db.query(BlogPost)\
             .filter(BlogPost.id == post_id)\
             .with_for_update()\
             .first()
    if post is None:
        return None
    post.average_rating = compute_average(db, post_id)
    return post.average_rating
