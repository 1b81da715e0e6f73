from .user import User, UserCreate, UserUpdate
from .token import Token, LoginRequest
from .blog_post import BlogPost, BlogPostCreate, BlogPostUpdate, MediaUrl
from .comment import Comment, CommentCreate, CommentUpdate
from .rating import Rating, RatingCreate, AverageRating
from .media import Media, MediaCreate, MediaUpdate
from .message import Message

__all__ = [
    "User", "UserCreate", "UserUpdate",
    "Token", "LoginRequest",
    "BlogPost", "BlogPostCreate", "BlogPostUpdate", "MediaUrl",
    "Comment", "CommentCreate", "CommentUpdate",
    "Rating", "RatingCreate", "AverageRating",
    "Media", "MediaCreate", "MediaUpdate",
    "Message",
]
