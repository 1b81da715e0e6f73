# blogapp/api/deps.py

import logging
from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from blogapp.core.config import Settings, settings
from blogapp.core.exceptions import UnauthorizedError
from blogapp.core.security import CallerIdentity, decode_access_token
from blogapp.db.session import get_db  # noqa: F401  re-exported for endpoints

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings() -> Settings:
    return settings


def get_current_identity(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    app_settings: Settings = Depends(get_settings),
) -> CallerIdentity:
    if credentials is None:
        logger.warning("Rejected request without bearer token")
        raise UnauthorizedError("Not authenticated")
    return decode_access_token(credentials.credentials, app_settings)
