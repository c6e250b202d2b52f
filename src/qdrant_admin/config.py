"""Application configuration and settings."""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Application
    app_name: str = "Qdrant Admin"
    app_version: str = "0.1.0"
    environment: Literal["development", "staging", "production"] = "development"

    # Logging
    log_level: str = "INFO"

    # Qdrant clusters (one endpoint per cluster identity)
    qdrant_cluster_0_url: str | None = None
    qdrant_cluster_0_api_key: str | None = None
    qdrant_dedicated_0_url: str | None = None
    qdrant_dedicated_0_api_key: str | None = None
    qdrant_dedicated_1_url: str | None = None
    qdrant_dedicated_1_api_key: str | None = None
    qdrant_dedicated_2_url: str | None = None
    qdrant_dedicated_2_api_key: str | None = None

    # Qdrant client options shared by every cluster
    qdrant_prefer_grpc: bool = False
    qdrant_timeout: int = 30  # Timeout in seconds

    def qdrant_endpoint(self, cluster_key: str) -> tuple[str | None, str | None]:
        """Return the (url, api_key) pair configured for a cluster.

        Args:
            cluster_key: Settings key of the cluster, e.g. ``cluster_0``.

        Returns:
            tuple: Configured URL and API key, either may be None.
        """
        url = getattr(self, f"qdrant_{cluster_key}_url")
        api_key = getattr(self, f"qdrant_{cluster_key}_api_key")
        return url, api_key


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: Application settings instance.
    """
    return Settings()
