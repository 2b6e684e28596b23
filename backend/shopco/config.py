"""
shopco/config.py - Application configuration and Firestore client.

Settings are loaded from environment variables (and an optional `.env` file) with
pydantic-settings. The Firestore client is created lazily by `get_db()` so that the
app can be imported (and tested) without Firebase credentials; routers receive it
through `Depends(get_db)`.
"""
from functools import lru_cache
from typing import Literal, Optional

import firebase_admin
from firebase_admin import credentials, firestore
from pydantic_settings import BaseSettings, SettingsConfigDict

from shopco.core.errors import storage_errors


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""
    firebase_cred_file: Optional[str] = None       # None -> Application Default Credentials
    firebase_project_id: Optional[str] = None
    firebase_collection_prefix: str = ""

    allowed_origins: str = "*"  # Comma-separated list or '*' for all
    debug: bool = False
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000

    # plaintext keeps compatibility with accounts created by the legacy server
    password_scheme: Literal["plaintext", "hmac-sha256"] = "plaintext"
    password_secret: Optional[str] = None

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    def model_post_init(self, __context):
        if self.password_scheme == "hmac-sha256" and not self.password_secret:
            raise ValueError("PASSWORD_SECRET must be set when PASSWORD_SCHEME is 'hmac-sha256'")

    def collection(self, name: str) -> str:
        """Prefix-aware collection name (FIREBASE_COLLECTION_PREFIX)."""
        prefix = self.firebase_collection_prefix.strip()
        return f"{prefix}{name}" if prefix else name


# Load settings from environment (.env file, etc.)
settings = Settings()


def _init_firebase_app() -> firebase_admin.App:
    options = {"projectId": settings.firebase_project_id} if settings.firebase_project_id else None
    cred = credentials.Certificate(settings.firebase_cred_file) if settings.firebase_cred_file else None
    try:
        return firebase_admin.initialize_app(cred, options)
    except ValueError as e:
        if "already exists" in str(e):
            # Firebase app already initialized, get the default app
            return firebase_admin.get_app()
        raise


@lru_cache(maxsize=1)
def get_db():
    """Firestore client shared by all requests (honours FIRESTORE_EMULATOR_HOST)."""
    with storage_errors("Error connecting to the database"):
        app = _init_firebase_app()
        return firestore.client(app)
