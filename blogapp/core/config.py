import logging
from typing import List, Union, Any, Optional, Dict
from pydantic import AnyHttpUrl, PostgresDsn, Field, field_validator, SecretStr
from pydantic_settings import BaseSettings
from google.cloud import secretmanager
from google.api_core.exceptions import NotFound
import os
import secrets

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

def get_secrets() -> Optional[dict[str, str]]:
    if os.getenv('GOOGLE_CLOUD_PROJECT'):
        client = secretmanager.SecretManagerServiceClient()
        project_id = os.getenv('GOOGLE_CLOUD_PROJECT')

        secret_values = {}
        secret_ids = ['DATABASE_URL', 'SECRET_KEY',
                      'POSTGRES_SERVER', 'POSTGRES_USER', 'POSTGRES_PASSWORD', 'POSTGRES_DB']

        for secret_id in secret_ids:
            try:
                name = f"projects/{project_id}/secrets/{secret_id}/versions/latest"
                response = client.access_secret_version(request={"name": name})
                secret_values[secret_id] = response.payload.data.decode("UTF-8")
            except NotFound:
                logger.warning(f"Secret {secret_id} not found in GCP Secret Manager.")

        return secret_values
    else:
        return None

class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "BlogApp"

    BACKEND_CORS_ORIGINS: List[AnyHttpUrl] = [
         "http://localhost",
         "http://localhost:3000",
         "http://localhost:8080",
     ]

    GOOGLE_CLOUD_PROJECT: Optional[str] = None
    ENVIRONMENT: str = Field(default="development")

    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "bloguser"
    POSTGRES_PASSWORD: str = ""
    POSTGRES_DB: str = "blog_application"
    POSTGRES_PORT: int = Field(default=5432)
    # Left unset in production so the DSN is assembled from the POSTGRES_* fields
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)

    SECRET_KEY: SecretStr = Field(default=SecretStr(""), validate_default=True)
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    @field_validator("DATABASE_URL", mode='before')
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: Any) -> Any:
        if isinstance(v, str):
            return v
        if info.data.get("ENVIRONMENT") == "development":
            return "sqlite:///./blog.db"
        return str(PostgresDsn.build(
            scheme="postgresql",
            username=info.data.get("POSTGRES_USER"),
            password=info.data.get("POSTGRES_PASSWORD"),
            host=info.data.get("POSTGRES_SERVER"),
            port=int(info.data.get("POSTGRES_PORT", 5432)),
            path=info.data.get('POSTGRES_DB') or '',
        ))

    @field_validator("SECRET_KEY")
    @classmethod
    def require_secret_key(cls, v: SecretStr, info: Any) -> SecretStr:
        if v.get_secret_value():
            return v
        if info.data.get("ENVIRONMENT") == "production":
            raise ValueError("SECRET_KEY must be set in production")
        # Tokens signed with this key do not survive a restart
        logger.warning("SECRET_KEY not set; using a random per-process key")
        return SecretStr(secrets.token_urlsafe(32))

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str):
            try:
                import json
                return json.loads(v)
            except json.JSONDecodeError:
                return [i.strip() for i in v.split(",") if i.strip()]
        return v

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"
        frozen = True

    @classmethod
    def from_gcp_secrets(cls) -> 'Settings':
        secret_values = get_secrets()
        if secret_values:
            return cls(**secret_values)
        return cls()

def get_settings() -> Settings:
    env = os.getenv("ENVIRONMENT", "development")
    if env == "production":
        return Settings.from_gcp_secrets()
    return Settings()

settings = get_settings()

logger.info("Settings loaded:")
for field, value in settings.model_dump().items():
    if isinstance(value, SecretStr) or field in ("DATABASE_URL", "POSTGRES_PASSWORD"):
        logger.info(f"{field}: [REDACTED]")
    else:
        logger.info(f"{field}: {value}")
