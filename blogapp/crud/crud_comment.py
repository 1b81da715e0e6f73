# blogapp/crud/crud_comment.py

import logging
from typing import List
from sqlalchemy.orm import Session
from blogapp.models.comment import Comment
from blogapp.schemas.comment import CommentCreate
from blogapp.core.authorization import authorize_or_forbid
from blogapp.core.exceptions import NotFoundError, UnauthorizedError
from blogapp.crud.crud_blog_post import get_blog_post
from blogapp.crud.crud_user import get_user_by_email

logger = logging.getLogger(__name__)

def _authored_comment(db: Session, comment_id: int, author_email: str, action: str) -> Comment:
    comment = db.query(Comment).filter(Comment.id == comment_id).first()
    if comment is None:
        raise NotFoundError(f"Comment with ID {comment_id} not found")
    return authorize_or_forbid(
        comment,
        author_email,
        owner_key=lambda c: c.author_email,
        message=f"You can only {action} your own comments",
        error=UnauthorizedError,
    )

def create_comment(db: Session, comment: CommentCreate, post_id: int, author_email: str) -> Comment:
    get_blog_post(db, post_id)
    if get_user_by_email(db, author_email) is None:
        logger.warning(f"Comment rejected, unknown identity {author_email}")
        raise UnauthorizedError("User not found")
    db_comment = Comment(
        content=comment.content,
        author_name=comment.author_name,
        author_email=author_email,
        post_id=post_id,
    )
    db.add(db_comment)
    db.commit()
    db.refresh(db_comment)
    logger.info(f"Comment {db_comment.id} created on post {post_id}")
    return db_comment

def get_comments_by_post(db: Session, post_id: int) -> List[Comment]:
    get_blog_post(db, post_id)
    return db.query(Comment)\
             .filter(Comment.post_id == post_id)\
             .order_by(Comment.id)\
             .all()

def update_comment(db: Session, comment_id: int, author_email: str, content: str) -> Comment:
    comment = _authored_comment(db, comment_id, author_email, "update")
    comment.content = content
    db.commit()
    db.refresh(comment)
    logger.info(f"Comment {comment_id} updated")
    return comment

def delete_comment(db: Session, comment_id: int, author_email: str) -> None:
    comment = _authored_comment(db, comment_id, author_email, "delete")
    db.delete(comment)
    db.commit()
    logger.info(f"Comment {comment_id} deleted")

def delete_comments_by_author(db: Session, post_id: int, author_email: str) -> int:
    if get_user_by_email(db, author_email) is None:
        raise UnauthorizedError("User not found")
    deleted = db.query(Comment)\
                .filter(Comment.post_id == post_id, Comment.author_email == author_email)\
                .delete(synchronize_session=False)
    db.commit()
    db.expire_all()
    logger.info(f"Deleted {deleted} comments by {author_email} on post {post_id}")
    return deleted
