from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
import os
from pathlib import Path


class Settings(BaseSettings):
    """Application settings - reads from environment variables"""

    # Supabase
    supabase_url: str = ""
    supabase_key: str = ""
    supabase_service_key: str = ""
    db_schema: str = "public"

    # SteamGridDB
    steamgriddb_api_base: str = "https://www.steamgriddb.com/api/v2"
    steamgriddb_api_key: str = ""
    steamgriddb_timeout: float = 10.0

    # Site
    site_url: str = "https://apoxer.com"
    site_name: str = "Apoxer.com"
    twitter_handle: str = ""

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8080
    # Only enable behind a proxy that overwrites X-Forwarded-For
    trust_forwarded_for: bool = False

    # Environment
    env: str = "development"

    @field_validator('site_url', 'steamgriddb_api_base', mode='before')
    @classmethod
    def strip_trailing_slash(cls, v):
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env" if Path(".env").exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,  # SUPABASE_URL == supabase_url
    )


# Create settings instance
settings = Settings()

# Debug: print what we got (remove in production)
if os.getenv("DEBUG", "").lower() == "true":
    print(f"Settings loaded:")
    print(f"  SUPABASE_URL: {'set' if settings.supabase_url else 'MISSING'}")
    print(f"  SUPABASE_KEY: {'set' if settings.supabase_key else 'MISSING'}")
    print(f"  STEAMGRIDDB_API_KEY: {'set' if settings.steamgriddb_api_key else 'MISSING'}")
