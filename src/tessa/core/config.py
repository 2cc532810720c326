"""
Application configuration management using Pydantic Settings.

This module centralizes all environment-based configuration for the application,
providing type-safe access to configuration values with validation.
"""

import json
from typing import Optional, Dict, Any
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
import logging

from core.exceptions import ConfigurationException

logger = logging.getLogger('CORE_CONFIG')

# Individual service-account fields, in the order Firebase lists them
FIREBASE_CREDENTIAL_FIELDS = (
    "type",
    "project_id",
    "private_key_id",
    "private_key",
    "client_email",
    "client_id",
    "auth_uri",
    "token_uri",
    "auth_provider_x509_cert_url",
    "client_x509_cert_url",
    "universe_domain",
)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Name of the application
        environment: Operating mode (development, test, production)

        # Database Configuration
        database_url: Complete database URL (if provided directly)
        db_username / db_password / db_host / db_port / db_name: URL components

        # API Credentials
        auth_api_username: Basic auth user guarding every API route
        auth_api_password: Basic auth password guarding every API route

        # Firebase Configuration
        firebase_config: Full service-account JSON document
        fire_base_*: Individual service-account fields (used when firebase_config is empty)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow",
    )

    # Application Settings
    app_name: str = "Tessa API"
    app_version: str = "1.0.0"
    debug: bool = False
    environment: str = "development"
    port: int = 3000
    log_level: str = "INFO"

    # Database Configuration
    database_url: Optional[str] = None
    db_username: str = "postgres"
    db_password: Optional[str] = None
    db_host: Optional[str] = None
    db_port: str = "5432"
    db_name: Optional[str] = None

    # Connection Pool Settings
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 10
    db_pool_recycle: int = 1800
    db_pool_pre_ping: bool = True
    db_echo: bool = False

    # API Basic Authorization
    auth_api_username: str = ""
    auth_api_password: str = ""

    # Firebase Configuration
    firebase_config: Optional[str] = None
    fire_base_type: Optional[str] = None
    fire_base_project_id: Optional[str] = None
    fire_base_private_key_id: Optional[str] = None
    fire_base_private_key: Optional[str] = None
    fire_base_client_email: Optional[str] = None
    fire_base_client_id: Optional[str] = None
    fire_base_auth_uri: Optional[str] = None
    fire_base_token_uri: Optional[str] = None
    fire_base_auth_provider_x509_cert_url: Optional[str] = None
    fire_base_client_x509_cert_url: Optional[str] = None
    fire_base_universe_domain: Optional[str] = None

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    def get_database_url(self) -> str:
        """
        Construct the database URL from components or return direct URL.

        Returns:
            str: Database URL

        Raises:
            ConfigurationException: If required configuration is missing
        """
        if self.database_url:
            return self.database_url

        missing = []
        if not self.db_username:
            missing.append("DB_USERNAME")
        if not self.db_password:
            missing.append("DB_PASSWORD")
        if not self.db_host:
            missing.append("DB_HOST")
        if not self.db_name:
            missing.append("DB_NAME")

        if missing:
            raise ConfigurationException(
                f"Database configuration incomplete. Missing: {', '.join(missing)}",
                {"missing": missing},
            )

        return f"postgresql://{self.db_username}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    def get_firebase_credentials(self) -> Dict[str, Any]:
        """
        Build the Firebase service-account credential mapping.

        FIREBASE_CONFIG (a JSON document) takes precedence over the
        individual FIRE_BASE_* variables.

        Returns:
            dict: Service-account fields accepted by firebase_admin.credentials.Certificate

        Raises:
            ConfigurationException: If no credentials are configured or the JSON is malformed
        """
        if self.firebase_config:
            try:
                credentials = json.loads(self.firebase_config)
            except json.JSONDecodeError as e:
                raise ConfigurationException("FIREBASE_CONFIG is not valid JSON") from e
        else:
            logger.debug("FIREBASE_CONFIG not set, reading FIRE_BASE_* variables")
            credentials = {
                field: getattr(self, f"fire_base_{field}")
                for field in FIREBASE_CREDENTIAL_FIELDS
                if getattr(self, f"fire_base_{field}")
            }

        if not credentials:
            raise ConfigurationException(
                "Firebase credentials missing (FIREBASE_CONFIG or FIRE_BASE_* variables)"
            )

        # Private keys pasted into env files usually carry literal "\n"
        private_key = credentials.get("private_key")
        if isinstance(private_key, str):
            credentials["private_key"] = private_key.replace("\\n", "\n")

        return credentials


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings object
    """
    return Settings()
