from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    environment: str = Field(default="development", validation_alias="ENVIRONMENT")

    # Server
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=3000, validation_alias="PORT")

    # Logging
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: str = Field(default="json", validation_alias="LOG_FORMAT")

    # Firestore
    firebase_service_account_json: Optional[str] = Field(
        default=None, validation_alias="FIREBASE_SERVICE_ACCOUNT_JSON"
    )
    firebase_service_account_file: str = Field(
        default="serviceAccountKey.json", validation_alias="FIREBASE_SERVICE_ACCOUNT_FILE"
    )
    firebase_project_id: Optional[str] = Field(default=None, validation_alias="FIREBASE_PROJECT_ID")

    # Geocoding
    google_geocoding_api_key: Optional[str] = Field(default=None, validation_alias="GOOGLE_GEOCODING_API_KEY")
    geocoding_url: str = Field(
        default="https://maps.googleapis.com/maps/api/geocode/json",
        validation_alias="GEOCODING_URL",
    )
    geocoding_timeout_seconds: float = Field(default=10.0, validation_alias="GEOCODING_TIMEOUT_SECONDS")

    # Pages / static
    landing_path: str = Field(default="/homeowners", validation_alias="LANDING_PATH")
    public_dir: Optional[str] = Field(default=None, validation_alias="PUBLIC_DIR")
    static_max_age_seconds: int = Field(default=7 * 24 * 3600, validation_alias="STATIC_MAX_AGE_SECONDS")

    # App stores
    android_package: str = Field(default="com.hoyalist.hoyalist", validation_alias="ANDROID_PACKAGE")
    ios_app_id: str = Field(default="6740706168", validation_alias="IOS_APP_ID")
    ios_store_url: str = Field(
        default="https://apps.apple.com/us/app/hoyalist/id6740706168",
        validation_alias="IOS_STORE_URL",
    )

    # Monitoring
    sentry_dsn: Optional[str] = Field(default=None, validation_alias="SENTRY_DSN")

    @field_validator("environment")
    def validate_environment(cls, v):
        valid_envs = ["development", "testing", "staging", "production"]
        if v not in valid_envs:
            raise ValueError(f"environment must be one of {valid_envs}")
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        valid_formats = ["json", "console"]
        if v not in valid_formats:
            raise ValueError(f"log_format must be one of {valid_formats}")
        return v

    @field_validator("geocoding_timeout_seconds")
    def validate_geocoding_timeout(cls, v):
        if v <= 0:
            raise ValueError("geocoding_timeout_seconds must be positive")
        return v

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_testing(self) -> bool:
        return self.environment == "testing"

    def public_path(self) -> Path:
        if self.public_dir:
            return Path(self.public_dir)
        return Path(__file__).resolve().parent.parent / "public"

    def service_account_info(self) -> Union[Dict[str, Any], str]:
        """Inline service-account JSON when set, otherwise the key file path."""
        raw = (self.firebase_service_account_json or "").strip()
        if raw:
            return json.loads(raw)
        return self.firebase_service_account_file


settings = Settings()
