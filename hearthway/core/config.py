from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "Hearthway Balances"
    API_PREFIX: str = "/api/v1"
    DEFAULT_CURRENCY: str = "USD"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_prefix="HEARTHWAY_", extra="ignore")


settings = Settings()
