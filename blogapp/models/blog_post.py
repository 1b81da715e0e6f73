# blogapp/models/blog_post.py

from sqlalchemy import Column, Integer, String, Text, Float, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from blogapp.db.base_class import Base

class BlogPost(Base):
    """Model for blog posts"""
    __tablename__ = "blog_posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False, index=True)
    brief = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    # list of {"url": ..., "media_kind": ...}
    media_urls = Column(JSON, nullable=False, default=list)
    # Derived from the post's ratings; only crud_rating writes it
    average_rating = Column(Float, nullable=False, default=0.0)
    owner_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    owner = relationship("User", back_populates="posts")
    comments = relationship("Comment", back_populates="post", cascade="all, delete-orphan", passive_deletes=True)
    ratings = relationship("Rating", back_populates="post", cascade="all, delete-orphan", passive_deletes=True)
    media = relationship("Media", back_populates="post", cascade="all, delete-orphan", passive_deletes=True)
