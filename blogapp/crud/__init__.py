# blogapp/crud/__init__.py

from .crud_user import (
    get_user,
    get_user_by_email,
    create_user,
    authenticate,
    issue_token,
    update_user,
    delete_user,
)

from .crud_blog_post import (
    create_blog_post,
    create_blog_posts,
    get_blog_post,
    get_blog_posts,
    get_blog_posts_by_owner,
    update_blog_post,
    delete_blog_post,
    delete_blog_posts_by_owner,
)

from .crud_comment import (
    create_comment,
    get_comments_by_post,
    update_comment,
    delete_comment,
    delete_comments_by_author,
)

from .crud_rating import (
    create_rating,
    get_ratings_by_post,
    get_average_rating,
)

from .rating_average import compute_average, store_average

from .crud_media import (
    create_media,
    create_media_batch,
    get_media,
    get_media_by_post,
    update_media,
    delete_media,
    delete_media_by_post,
)

__all__ = [
    "get_user", "get_user_by_email", "create_user", "authenticate", "issue_token",
    "update_user", "delete_user",
    "create_blog_post", "create_blog_posts", "get_blog_post", "get_blog_posts",
    "get_blog_posts_by_owner", "update_blog_post", "delete_blog_post", "delete_blog_posts_by_owner",
    "create_comment", "get_comments_by_post", "update_comment", "delete_comment",
    "delete_comments_by_author",
    "create_rating", "get_ratings_by_post", "get_average_rating", "compute_average", "store_average",
    "create_media", "create_media_batch", "get_media", "get_media_by_post", "update_media", "delete_media",
    "delete_media_by_post",
]
