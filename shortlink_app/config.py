from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    
    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """
    
    # Environment: controls log format and level
    env: Literal["local", "dev", "prod"] = "local"
    
    # Application
    app_name: str = "URL Shortener"
    app_version: str = "1.0.0"
    
    # Server
    host: str = "127.0.0.1"
    port: int = 8080
    idle_timeout: int = 60  # Keep-alive timeout in seconds
    
    # Storage: SQLite file path or SQLAlchemy database URL
    storage_path: str = "./url_shortener.db"
    
    # Aliases
    base_url: str = "http://127.0.0.1:8080"
    alias_length: int = 6
    max_retries: int = 5
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Default settings instance
settings = Settings()
