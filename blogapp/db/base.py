# Import all the models, so that Base has them before being
# imported by Alembic or used for create_all
from blogapp.db.base_class import Base
from blogapp.models.user import User
from blogapp.models.blog_post import BlogPost
from blogapp.models.comment import Comment
from blogapp.models.rating import Rating
from blogapp.models.media import Media
