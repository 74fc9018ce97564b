"""Uploader configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Any

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MappingConfig(BaseModel):
    """Configuration of a single upload mapping."""

    upload_destination: str
    uri_prefix: str = "/uploads"
    namer: str | None = None  # Namer id ("uniqid") or "package.module:attr"
    directory_namer: str | None = None  # e.g. "property:owner_id"
    delete_on_remove: bool = True
    delete_on_update: bool = True
    inject_on_load: bool = False

    @field_validator("uri_prefix")
    @classmethod
    def normalize_uri_prefix(cls, v: str) -> str:
        v = v.strip().strip("/")
        return f"/{v}" if v else ""


class Settings(BaseSettings):
    """Uploader settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="UPLOADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "uploadkit"
    app_env: str = "development"

    # Logging
    log_level: str = "INFO"
    log_format: str = "auto"  # auto (based on app_env), console, or json

    # Storage
    storage: str = "file_system"

    # Mappings: {mapping_name: MappingConfig}
    mappings: dict[str, MappingConfig] = {}

    @field_validator("mappings", mode="before")
    @classmethod
    def parse_mappings(cls, v: Any) -> Any:
        if isinstance(v, str):
            import json
            return json.loads(v) if v.strip() else {}
        return v

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
