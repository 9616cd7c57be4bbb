from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="APP_",
        extra="ignore",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # API
    api_prefix: str = "/api"
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    cors_origin_regex: str | None = None
    trusted_hosts: list[str] = ["*"]
    root_path: str = ""

    # Supabase
    supabase_url: str
    supabase_anon_key: str
    supabase_service_role_key: str = ""

    notes_table: str = "history"
    settings_table: str = "user_settings"
    inventory_table: str = "features"

    # OpenAI
    openai_api_key: str = ""
    summary_model: str = "gpt-4o-mini"
    summary_max_output_tokens: int = 500
    summary_timeout_seconds: float = 30.0
    architecture_max_output_tokens: int = 1500

    # News feed
    news_rss_base_url: str = "https://news.google.com/rss"
    news_cache_ttl_seconds: int = 3600
    news_max_items: int = 5
    news_timeout_seconds: float = 10.0


settings = Settings()
