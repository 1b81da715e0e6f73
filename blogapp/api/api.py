# blogapp/api/api.py

import logging
from fastapi import APIRouter
from blogapp.api.endpoints import (
    users,
    blog_posts,
    comments,
    ratings,
    media,
)

# Set up logging
logger = logging.getLogger(__name__)

api_router = APIRouter()

api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(blog_posts.router, prefix="/blogs", tags=["blogs"])
api_router.include_router(comments.router, prefix="/comments", tags=["comments"])
api_router.include_router(ratings.router, prefix="/ratings", tags=["ratings"])
api_router.include_router(media.router, prefix="/media", tags=["media"])

logger.info(f"API routes configured: {[getattr(route, 'path', None) for route in api_router.routes]}")
