"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client configuration loaded from MODULBANK_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="MODULBANK_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Bank API
    api_base: str = "https://api.modulbank.ru"
    token: str = ""
    sandbox: bool = False

    # Dates on the wire carry no offset and are bank local time
    timezone: str = "Europe/Moscow"

    # Service
    service_name: str = "modulbank"
    log_level: str = "INFO"

    # HTTP Client, used only when the caller does not pass its own
    http_timeout_seconds: float = 30.0


settings = Settings()
