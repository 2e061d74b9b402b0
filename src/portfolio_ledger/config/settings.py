"""Engine settings and configuration."""

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from portfolio_ledger.domain.models.enums import Currency, ReplayOrder


def get_default_data_dir() -> Path:
    """Return the default data directory based on platform."""
    return Path.home() / "Documents" / "Portfolio Ledger"


class Settings(BaseSettings):
    """Configuration loaded from LEDGER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Portfolio Ledger"
    app_version: str = "0.1.0"

    # Backups are written under data_dir/exports
    data_dir: Optional[Path] = None

    log_level: str = "INFO"

    # Ledger behavior
    enforce_cash_balance: bool = False
    replay_order: ReplayOrder = ReplayOrder.INSERTION
    default_currency: Currency = Currency.USD

    # Dashboard allocation: top N symbols, remainder shown as cash bucket
    allocation_top_n: int = 5

    # Market data settings
    market_data_cache_ttl_seconds: int = 60

    def get_data_dir(self) -> Path:
        """Get the data directory, creating it if needed."""
        data_dir = self.data_dir or get_default_data_dir()
        data_dir.mkdir(parents=True, exist_ok=True)
        return data_dir

    def get_export_dir(self) -> Path:
        """Get the export directory for backup snapshots."""
        export_dir = self.get_data_dir() / "exports"
        export_dir.mkdir(parents=True, exist_ok=True)
        return export_dir


# Global settings instance (can be replaced at runtime)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the current settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    _settings = settings


def reset_settings() -> None:
    """Reset settings to force reload."""
    global _settings
    _settings = None
