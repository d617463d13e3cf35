"""Configuration management using pydantic-settings."""

from pathlib import Path
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="KEYWORD_EXPLORER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Input
    data_dir: Path = Field(default=Path("./data"), description="Data directory path")
    default_csv: Path | None = Field(
        default=None, description="CSV export used when no file argument is given (relative to data_dir)"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Console log level")
    log_file: Path | None = Field(default=None, description="Optional log file path")

    # Display
    table_row_limit: int = Field(default=50, ge=1, description="Maximum rows shown in the table view")
    currency_symbol: str = Field(default="$", description="Currency symbol for CPC values")

    def resolve_csv(self, path: Path | None) -> Path | None:
        """Pick the explicit path, else the configured default."""
        if path is not None:
            return path
        if self.default_csv is None:
            return None
        if self.default_csv.is_absolute():
            return self.default_csv
        return self.data_dir / self.default_csv


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
