#   _____  _____ _   _  ____  _    _ _    _ ____  
#  |  __ \|_   _| \ | |/ __ \| |  | | |  | |  _ \ 
#  | |  | | | | |  \| | |  | | |__| | |  | | |_) |
#  | |  | | | | | . ` | |  | |  __  | |  | |  _ < 
#  | |__| |_| |_| |\  | |__| | |  | | |__| | |_) |
#  |_____/|_____|_| \_|\____/|_|  |_|\____/|____/ 
#                                                  

# Configuration - Loads application settings from environment variables.

# --------------------------------------------------------------------------
#                                  Functions
# --------------------------------------------------------------------------
# Settings.cors_origins_list: Returns list of allowed CORS origins.
# Settings.firebase_credentials: Builds Firebase credentials dict.
# get_settings: Returns cached Settings instance.

# --------------------------------------------------------------------------
#                            Variables and others
# --------------------------------------------------------------------------
# StoreBackend: Enum of supported document store backends.
# Settings: Configuration model matching environment variables.

# --------------------------------------------------------------------------
#                                   imports
# --------------------------------------------------------------------------
# pydantic_settings: Settings management.
# functools.lru_cache: Caching.
# typing: Type hints.
# enum: Enumerations.
# json: Service account parsing.
# dinohub.constants: Leaderboard defaults.

from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import List
from enum import Enum
import json

from dinohub.constants import (
    DEFAULT_LEADERBOARD_LIMIT,
    DEFAULT_RANKING_FIELD,
    MAX_LEADERBOARD_LIMIT,
)


class StoreBackend(str, Enum):
    MEMORY = "memory"
    FIREBASE = "firebase"
    MONGO = "mongo"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Server
    backend_host: str = "0.0.0.0"
    backend_port: int = 3000
    log_level: str = "INFO"

    # Document store
    store_backend: StoreBackend = StoreBackend.MEMORY

    # Firebase Realtime Database
    firebase_database_url: str = "https://dino-meilleur-score-classement-default-rtdb.europe-west1.firebasedatabase.app"
    firebase_service_account_key: str = ""  # Full service account JSON (takes priority if set)
    firebase_project_id: str = ""
    firebase_service_account_client_email: str = ""
    firebase_service_account_private_key: str = ""
    firebase_service_account_private_key_id: str = ""

    # MongoDB
    mongodb_uri: str = "mongodb://localhost:27017"
    mongodb_database: str = "dinohub"

    # Leaderboard
    leaderboard_field: str = DEFAULT_RANKING_FIELD
    leaderboard_default_limit: int = DEFAULT_LEADERBOARD_LIMIT
    leaderboard_max_limit: int = MAX_LEADERBOARD_LIMIT

    # CORS
    cors_origins: str = "*"

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def firebase_credentials(self) -> dict:
        """Build Firebase credentials dict from env vars"""
        if self.firebase_service_account_key:
            return json.loads(self.firebase_service_account_key)
        return {
            "type": "service_account",
            "project_id": self.firebase_project_id,
            "private_key_id": self.firebase_service_account_private_key_id,
            "private_key": self.firebase_service_account_private_key.replace("\\n", "\n"),
            "client_email": self.firebase_service_account_client_email,
            "client_id": "",
            "auth_uri": "https://accounts.google.com/o/oauth2/auth",
            "token_uri": "https://oauth2.googleapis.com/token",
            "auth_provider_x509_cert_url": "https://www.googleapis.com/oauth2/v1/certs",
            "client_x509_cert_url": f"https://www.googleapis.com/robot/v1/metadata/x509/{self.firebase_service_account_client_email}"
        }


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
