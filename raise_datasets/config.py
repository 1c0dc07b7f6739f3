"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from raise_datasets import __version__

# Hard ceiling on page size; DatasetQuery enforces the same bound.
MAX_PER_PAGE = 50


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RAISE_DATASETS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Marketplace API Configuration
    marketplace_endpoint: str = Field(
        default="https://api.portal.raise-science.eu/dataset/marketplace",
        description="Marketplace listing endpoint",
    )
    dataset_base_url: str = Field(
        default="https://portal.raise-science.eu/dataset-marketplace/",
        description="Base URL for public dataset pages; the dataset id is appended",
    )
    request_timeout: float = Field(default=15.0, description="HTTP request timeout in seconds")
    user_agent: str = Field(
        default=f"Raise-Datasets-Proxy/{__version__}",
        description="User-Agent sent to the marketplace",
    )

    # Listing Configuration
    cache_ttl_seconds: int = Field(default=300, description="Lifetime of a cached result page")
    default_per_page: int = Field(default=10, description="Page size used for invalid input")
    max_per_page: int = Field(default=MAX_PER_PAGE, description="Largest page size a client may request")

    # Application Configuration
    app_title: str = Field(default="RAISE Datasets", description="Application title")
    app_version: str = Field(default=__version__, description="Application version")
    allowed_origins: str = Field(default="*", description="Comma-separated CORS origins")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    log_json: bool = Field(default=True, description="Use JSON log format")
    log_file: str | None = Field(default=None, description="Optional log file path")

    @field_validator("request_timeout", "cache_ttl_seconds")
    @classmethod
    def _positive(cls, value):
        if value <= 0:
            raise ValueError("must be greater than zero")
        return value

    @model_validator(mode="after")
    def _check_page_sizes(self) -> "Settings":
        if not 1 <= self.max_per_page <= MAX_PER_PAGE:
            raise ValueError(f"max_per_page must be between 1 and {MAX_PER_PAGE}")
        if not 1 <= self.default_per_page <= self.max_per_page:
            raise ValueError("default_per_page must be between 1 and max_per_page")
        return self

    @property
    def origins(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
