# blogapp/core/authorization.py

from typing import Any, Callable, Type, TypeVar
import logging

from blogapp.core.exceptions import BlogAppError, ForbiddenError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def authorize_or_forbid(
    entity: T,
    caller_key: Any,
    owner_key: Callable[[T], Any],
    message: str = "You are not authorized to modify this resource",
    error: Type[BlogAppError] = ForbiddenError,
) -> T:
    """
    Compare the stored owner key of an already loaded entity with the caller's key.

    Posts are keyed by the owner's numeric id, comments by the author's email;
    ``owner_key`` extracts whichever applies.

    Returns:
        The entity, so callers can chain on it.

    Raises:
        ``error`` (ForbiddenError unless overridden) when the keys differ.
    """
    if owner_key(entity) != caller_key:
        logger.warning(f"Authorization denied for {type(entity).__name__} {getattr(entity, 'id', None)}")
        raise error(message)
    return entity
