"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "FitTrack personal fitness tracker."
    VERSION: str = "0.1.0"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "fittrack"
    DATABASE_URI: Optional[str] = None

    # Owner identity (single-user deployment)
    DEFAULT_USER_EMAIL: str = "owner@fittrack.app"
    DEFAULT_USER_NAME: str = "FitTrack owner"

    # Cloudflare Workers AI (food text parsing)
    CLOUDFLARE_ACCOUNT_ID: str = ""
    CLOUDFLARE_API_TOKEN: str = ""
    CLOUDFLARE_AI_MODEL: str = "@cf/meta/llama-3.1-8b-instruct"
    CLOUDFLARE_AI_TIMEOUT: float = 15.0
    CLOUDFLARE_AI_MAX_TOKENS: int = 1000
    CLOUDFLARE_AI_TEMPERATURE: float = 0.3

    # Nutrition goal defaults (used until the user stores their own)
    DEFAULT_DAILY_CALORIES: int = 1900
    DEFAULT_PROTEIN_G: int = 110
    DEFAULT_CARBS_G: int = 230
    DEFAULT_FATS_G: int = 60
    DEFAULT_WATER_ML: int = 3000

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URI:
            return self.DATABASE_URI
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
