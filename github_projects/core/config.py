from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# GitHub REST API constants (read-only for the process lifetime)
GITHUB_API_BASE_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"
GITHUB_ACCEPT = "application/vnd.github+json"

# HTTP 请求超时配置（秒）
HTTP_TIMEOUT = 30.0


class Settings(BaseSettings):
    # Static fallback token, read from the environment or a .env file
    GITHUB_TOKEN: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )


settings = Settings()
