from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "sidebar-nav"
    LOG_LEVEL: str = "INFO"
    SIDEBAR_PERMISSION_CACHE_MAX_ENTRIES: int = Field(default=512, ge=0)
    SIDEBAR_LOG_DECISIONS: bool = False

settings = Settings()
