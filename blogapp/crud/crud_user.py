# blogapp/crud/crud_user.py
import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from blogapp.models.user import User
from blogapp.models.rating import Rating
from blogapp.schemas.user import UserCreate, UserUpdate
from blogapp.core.config import Settings
from blogapp.core.exceptions import ConflictError, NotFoundError
from blogapp.core.security import get_password_hash, verify_password, create_access_token
from blogapp.crud.rating_average import store_average

logger = logging.getLogger(__name__)

def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == email).first()

def create_user(db: Session, user: UserCreate) -> User:
    logger.info(f"Registering user: {user.email}")
    if get_user_by_email(db, email=user.email):
        logger.warning(f"Registration rejected, email already in use: {user.email}")
        raise ConflictError("User with this email already exists")
    db_user = User(
        email=user.email,
        name=user.name,
        hashed_password=get_password_hash(user.password),
    )
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race against a concurrent registration of the same email
        db.rollback()
        logger.warning(f"Registration rejected by unique constraint: {user.email}")
        raise ConflictError("User with this email already exists")
    db.refresh(db_user)
    logger.info(f"User created successfully. ID: {db_user.id}")
    return db_user

def authenticate(db: Session, email: str, password: str) -> Optional[User]:
    """Return the user when the credentials match, otherwise None (no hint which part was wrong)."""
    user = get_user_by_email(db, email=email)
    if user is None or not verify_password(password, user.hashed_password):
        logger.warning(f"Failed login attempt for {email}")
        return None
    return user

def issue_token(user: User, settings: Settings) -> str:
    return create_access_token(user_id=user.id, email=user.email, settings=settings)

def update_user(db: Session, user_id: int, user_update: UserUpdate) -> User:
    db_user = get_user(db, user_id)
    if db_user is None:
        raise NotFoundError(f"User with ID {user_id} not found")
    update_data = user_update.model_dump(exclude_unset=True, exclude_none=True)
    if "name" in update_data:
        db_user.name = update_data["name"]
    if "password" in update_data:
        db_user.hashed_password = get_password_hash(update_data["password"])
    db.commit()
    db.refresh(db_user)
    logger.info(f"User {user_id} updated fields: {sorted(update_data)}")
    return db_user

def delete_user(db: Session, user_id: int) -> None:
    """
    Delete a user together with their posts.

    The database cascades posts, and through them comments, ratings and media.
    The user's ratings on other people's posts cascade too, so those posts'
    averages are recomputed in the same transaction.
    """
    db_user = get_user(db, user_id)
    if db_user is None:
        raise NotFoundError(f"User with ID {user_id} not found")

    rated_post_ids = [
        post_id for (post_id,) in
        db.query(Rating.post_id).filter(Rating.user_id == user_id).distinct().all()
    ]
    db.delete(db_user)
    db.flush()
    for post_id in rated_post_ids:
        store_average(db, post_id)
    db.commit()
    logger.info(f"User {user_id} deleted; recomputed averages for {len(rated_post_ids)} rated posts")
