"""Configuration for resulttype, loaded from the environment."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from RESULTTYPE_* environment variables."""

    # Logging Configuration
    log_level: str = "INFO"
    json_logs: bool = False
    rich_tracebacks: bool = False

    model_config = {
        "env_prefix": "RESULTTYPE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
