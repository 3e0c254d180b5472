"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from finanzen_core.domain.expenses import SortOrder


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FINANZEN_",
        extra="ignore",
    )

    # Service
    service_name: str = "finanzen-core"
    log_level: str = "INFO"

    # Projections
    max_projection_years: int = 100  # Caller-side bound on simulation length

    # Expenses
    default_expense_sort: SortOrder = SortOrder.DUE_DATE_DESC  # Also used for unknown sort keys


settings = Settings()
