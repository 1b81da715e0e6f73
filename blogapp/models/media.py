# blogapp/models/media.py

import enum

from sqlalchemy import Column, Integer, String, Enum, ForeignKey
from sqlalchemy.orm import relationship
from blogapp.db.base_class import Base

class MediaKind(str, enum.Enum):
    image = "image"
    audio = "audio"
    video = "video"

class Media(Base):
    __tablename__ = "media"

    id = Column(Integer, primary_key=True, index=True)
    url = Column(String(512), nullable=False)
    media_kind = Column(Enum(MediaKind, name="media_kind"), nullable=False)
    post_id = Column(Integer, ForeignKey("blog_posts.id", ondelete="CASCADE"), nullable=False, index=True)

    post = relationship("BlogPost", back_populates="media")
