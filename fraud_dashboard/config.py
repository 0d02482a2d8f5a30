from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==============================
    # Application
    # ==============================
    APP_NAME: str = "Electricity Fraud Detection Dashboard"
    ENVIRONMENT: str = "local"
    API_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # ==============================
    # Database
    # ==============================
    DATABASE_URL: str = "sqlite:///./electricity_fraud.db"

    # ==============================
    # Logging
    # ==============================
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    LOG_SQL: bool = False

    # ==============================
    # CORS
    # ==============================
    CORS_ORIGINS: str = "http://localhost:3000"
    CORS_ALLOW_CREDENTIALS: bool = True

    # ==============================
    # Readings
    # ==============================
    BILLING_RATE_PER_UNIT: float = 6.0
    CUSTOMER_ID_RANGE_HINT: str = "1-20"
    CRITICAL_CASES_LIMIT: int = 20
    RECENT_READINGS_LIMIT: int = 10
    METER_READING_MIN: int = 10000
    METER_READING_MAX: int = 99999

    # ==============================
    # Dashboard client
    # ==============================
    DASHBOARD_API_BASE: str = "http://localhost:8080/api"
    DASHBOARD_REQUEST_TIMEOUT: float = 10.0
    DASHBOARD_MAX_RETRIES: int = 3
    DASHBOARD_RETRY_DELAY_SECONDS: float = 2.0

    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Cached settings loader (once per process)."""
    return Settings()


__all__ = ["Settings", "get_settings"]
