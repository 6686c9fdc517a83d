from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # --- Financial Modeling Prep ---
    fmp_api_key: str = ""
    fmp_base_url: str = "https://financialmodelingprep.com/api/v3"
    fmp_request_timeout: float = 20.0
    fmp_user_agent: str = "fmp-client/0.1"

    # 250/day on the free tier; 0 disables the budget
    fmp_daily_limit: int = 0

    @property
    def base_url(self) -> str:
        return self.fmp_base_url.rstrip("/")

@lru_cache
def get_settings() -> Settings:
    return Settings()
