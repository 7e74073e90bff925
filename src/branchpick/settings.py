from pydantic_settings import BaseSettings, SettingsConfigDict

from branchpick._messages import Language

# github REST API constants
GITHUB_API_URL = "https://api.github.com"
GITHUB_ACCEPT = "application/vnd.github.v3+json"
REQUEST_TIMEOUT = 30.0


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=[".env"], env_prefix="BRANCHPICK_", extra="ignore"
    )

    github_api_url: str = GITHUB_API_URL

    # leave empty to pick from LANG / LC_ALL
    language: Language | None = None

    log_level: str = "WARNING"


settings = Settings()
