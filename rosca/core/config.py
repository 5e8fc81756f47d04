# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration: all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "rosca-service")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8005"))

    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./rosca.db")

    CONTRIBUTION_AMOUNT: int = int(os.getenv("CONTRIBUTION_AMOUNT", "50000"))
    PAYOUT_AMOUNT: int = int(os.getenv("PAYOUT_AMOUNT", "500000"))
    DEFAULT_HORIZON_CYCLES: int = int(os.getenv("DEFAULT_HORIZON_CYCLES", "3"))
    MAX_HORIZON_CYCLES: int = int(os.getenv("MAX_HORIZON_CYCLES", "52"))

    # Empty URL disables outbound notifications entirely.
    NOTIFICATION_SERVICE_URL: str = os.getenv("NOTIFICATION_SERVICE_URL", "")
    NOTIFICATION_TIMEOUT: float = float(os.getenv("NOTIFICATION_TIMEOUT", "3.0"))

    DEFAULT_HISTORY_LIMIT: int = int(os.getenv("DEFAULT_HISTORY_LIMIT", "100"))
    MAX_HISTORY_SIZE: int = int(os.getenv("MAX_HISTORY_SIZE", "10000"))

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    SEED_DEFAULT_MEMBERS: bool = (
        os.getenv("SEED_DEFAULT_MEMBERS", "true").lower() == "true"
    )


settings = Settings()
