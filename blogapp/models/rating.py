# blogapp/models/rating.py

from sqlalchemy import Column, Integer, String, Text, DateTime, ForeignKey, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from blogapp.db.base_class import Base

class Rating(Base):
    """Model for post ratings, one per user per post"""
    __tablename__ = "ratings"

    id = Column(Integer, primary_key=True, index=True)
    value = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    post_id = Column(Integer, ForeignKey("blog_posts.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    author_email = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    post = relationship("BlogPost", back_populates="ratings")

    __table_args__ = (
        UniqueConstraint('post_id', 'user_id', name='ratings_post_user_unique'),
        CheckConstraint('value BETWEEN 1 AND 5', name='ratings_value_range'),
    )
