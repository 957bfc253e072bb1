from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="DICEROLLER_", extra="ignore"
    )

    environment: str = "local"

    # Bind address for the uvicorn server started by `diceroller`.
    host: str = "0.0.0.0"
    port: int = 8080

    # Root log level; also passed to uvicorn.
    log_level: str = "info"
    # One nginx-style line per request on the "diceroller.access" logger.
    access_log: bool = True


settings = Settings()
