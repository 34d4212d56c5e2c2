"""Library configuration."""
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Library settings."""

    # Base URI for generated problem "type" members, e.g.
    # "https://example.com/problems". Left unset, problems use "about:blank".
    TYPE_BASE_URI: str | None = None

    # Log adapted foreign errors at DEBUG.
    LOG_ADAPTED: bool = True

    model_config = SettingsConfigDict(
        env_prefix="HTTP_PROBLEMS_",
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def type_base_uri(self) -> str | None:
        """Get the base URI without a trailing slash."""
        if not self.TYPE_BASE_URI:
            return None
        return self.TYPE_BASE_URI.strip().rstrip("/") or None


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
