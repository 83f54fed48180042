"""
Configuration management for the MLB reference data package.

Uses pydantic-settings for type-safe configuration with .env file support.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class AppConfig(BaseSettings):
    """Application-wide configuration."""

    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    debug: bool = False
    log_level: str = 'INFO'
    log_file: Optional[str] = None


class ReportConfig(BaseSettings):
    """League report settings."""

    model_config = SettingsConfigDict(
        env_prefix='REPORT_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    # A full league has 2 leagues x 3 divisions x 5 teams
    expected_team_count: int = 30
    validate_data: bool = False


class Settings:
    """
    Centralized settings management.

    Usage:
        from config.settings import get_settings

        settings = get_settings()
        level = settings.app.log_level
    """

    def __init__(self):
        self.app = AppConfig()
        self.report = ReportConfig()


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the singleton settings instance.

    Returns:
        Settings: The application settings
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
