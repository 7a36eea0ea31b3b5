from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
    )

    PROJECT_NAME: str = "City Catalog"

    # Connection identifier for the city store. There is no default: the
    # process refuses to start without it.
    DATABASE_URL: str = Field(min_length=1)

    HOST: str = "0.0.0.0"
    PORT: int = 8000

    DEBUG: bool = False
    LOG_DIR: str = "logs"
    TEMPLATES_DIR: str = str(PACKAGE_DIR / "templates")


settings = Settings()  # type: ignore[call-arg]
