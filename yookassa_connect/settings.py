from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    APP_NAME: str = "YooKassaConnect"
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    # Default provider selection
    DEFAULT_PROVIDER: str = "YooKassa"

    # Provider: YooKassa
    YOOKASSA_BASE_URL: str = "https://api.yookassa.ru/v3"
    YOOKASSA_SHOP_ID: Optional[str] = None
    YOOKASSA_SECRET_KEY: Optional[str] = None
    YOOKASSA_TIMEOUT_SEC: float = 15

settings = Settings()
