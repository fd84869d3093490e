from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Beer Count API"
    database_url: str = "sqlite:///./beerCount.db"

    host: str = "0.0.0.0"
    port: int = 8080
    max_body_bytes: int = 1048576
    log_level: str = "info"

    model_config = SettingsConfigDict(env_prefix="BEERCOUNT_", env_file=".env", env_file_encoding="utf-8")


settings = Settings()
