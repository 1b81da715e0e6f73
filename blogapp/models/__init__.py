from blogapp.models.user import User
from blogapp.models.blog_post import BlogPost
from blogapp.models.comment import Comment
from blogapp.models.rating import Rating
from blogapp.models.media import Media, MediaKind

__all__ = [
    "User",
    "BlogPost",
    "Comment",
    "Rating",
    "Media",
    "MediaKind",
]
