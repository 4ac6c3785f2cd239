"""Configuration settings for the task manager."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    database_url: str = "sqlite:///data/taskmanager.db"
    database_echo: bool = False

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_reload: bool = False
    api_prefix: str = ""  # The original deployment served everything under "/api"

    # Front-end origins allowed by CORS
    cors_origins: list = ["http://localhost:3000"]

    # Zone used to derive local time when a request carries no timezone hint
    default_timezone: str = "UTC"

    # Logging
    log_level: str = "INFO"
    log_file: str = "data/taskmanager.log"

    class Config:
        env_prefix = "TASKMANAGER_"
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
