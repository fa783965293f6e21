"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

SUPABASE_POOLER_HOST = "pooler.supabase.com"


class Settings(BaseSettings):
    """Service settings, read from the environment and an optional ``.env`` file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Service identity
    app_name: str = Field(default="Marketplace Profiles API")
    app_version: str = Field(default="1.0.0")
    app_env: str = Field(default="development")
    debug: bool = Field(default=False)
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Logging
    log_level: str = Field(default="INFO")
    log_json: bool | None = Field(
        default=None,
        description="Force JSON log lines on or off; defaults to on in production",
    )

    # Profile store
    database_url: str = Field(
        default="postgresql+asyncpg://localhost:5432/marketplace",
        description="PostgreSQL URL holding the profiles and listings tables",
    )
    db_pool_size: int = Field(default=5, ge=1)
    db_max_overflow: int = Field(default=10, ge=0)

    # Identity (tokens are issued by Supabase Auth; this service only verifies)
    supabase_url: str = Field(
        default="",
        description="Supabase project URL, used to locate the JWKS for ES256 tokens",
    )
    supabase_anon_key: str = Field(default="")
    jwt_secret_key: str = Field(
        default="CHANGE-ME-IN-PRODUCTION",
        description="Shared secret for HS256 tokens (internal tooling and tests)",
    )
    jwt_algorithm: str = Field(default="HS256")
    jwt_expire_minutes: int = Field(default=30)

    # Rate limiting (slowapi limit strings)
    rate_limit_enabled: bool = Field(default=True)
    read_rate_limit: str = Field(default="60/minute")
    write_rate_limit: str = Field(default="10/minute")

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173",
        description="Comma-separated list of allowed origins",
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def use_json_logs(self) -> bool:
        return self.is_production if self.log_json is None else self.log_json

    @computed_field  # type: ignore[prop-decorator]
    @property
    def async_database_url(self) -> str:
        """The database URL with the asyncpg driver scheme.

        Hosted Postgres providers hand out ``postgresql://`` URLs, while
        SQLAlchemy's async engine needs ``postgresql+asyncpg://``.
        """
        if self.database_url.startswith("postgresql://"):
            return "postgresql+asyncpg://" + self.database_url[len("postgresql://"):]
        return self.database_url

    @computed_field  # type: ignore[prop-decorator]
    @property
    def uses_transaction_pooler(self) -> bool:
        """Supabase's transaction pooler cannot use asyncpg's statement cache."""
        return SUPABASE_POOLER_HOST in self.database_url

    @computed_field  # type: ignore[prop-decorator]
    @property
    def supabase_jwks_url(self) -> str:
        if not self.supabase_url:
            return ""
        return f"{self.supabase_url.rstrip('/')}/auth/v1/.well-known/jwks.json"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
