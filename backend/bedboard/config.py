"""
Centralised application configuration.
Every setting lives here so it can be overridden from the environment or `.env`.
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Main system configuration."""

    # ============================================
    # APPLICATION
    # ============================================
    APP_TITLE: str = "Hospital Bed Board"
    APP_DESCRIPTION: str = "Bed occupancy map, selection and transfer workflow"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # ============================================
    # DATABASE
    # ============================================
    DATABASE_URL: str = "sqlite:///./bed_board.db"
    SEED_ON_STARTUP: bool = True

    # ============================================
    # CORS
    # ============================================
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["*"]
    CORS_ALLOW_HEADERS: List[str] = ["*"]

    # ============================================
    # BED MAP
    # ============================================
    SUMMARY_MAX_CHIPS: int = 3
    CURRENCY_SYMBOL: str = "₹"
    FILTER_CACHE_SIZE: int = 16  # memoized filter results per catalog

    # ============================================
    # SESSIONS
    # ============================================
    SESSION_IDLE_MINUTES: int = 120

    # ============================================
    # TRANSFERS
    # ============================================
    TRANSFER_CONFIRM_DELAY_SECONDS: float = 0.8  # simulated network call
    ORDERING_CLINICIAN: str = "Dr. Meera Nair"
    ORDERING_CLINICIAN_DEPARTMENT: str = "Internal Medicine"

    # ============================================
    # LOGGING
    # ============================================
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
