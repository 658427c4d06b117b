from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    MAIN_TOKEN: str
    FETCH_TIMEOUT: float = 5.0
    LOG_LEVEL: str = "INFO"


settings = Settings()
