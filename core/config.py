"""
Application configuration using Pydantic Settings
"""

from typing import Optional

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings with environment variable support.
    
    Deployments of the earlier service set ``API_URL``, ``SERVER_ADDR`` and
    ``IMPORT_INTERVAL_SECS``; those names are still honoured.
    """
    
    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/lightning_nodes.db"
    DB_POOL_SIZE: int = Field(5, ge=1)
    
    # Upstream node rankings feed
    SOURCE_API_URL: str = Field(
        "https://mempool.space/api/v1/lightning/nodes/rankings/connectivity",
        validation_alias=AliasChoices("SOURCE_API_URL", "API_URL")
    )
    SOURCE_TIMEOUT_SECONDS: float = Field(30.0, gt=0)
    
    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8080
    SERVER_ADDR: Optional[str] = None  # "host:port", overrides API_HOST/API_PORT
    
    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    
    # Import scheduling
    IMPORT_INTERVAL_SECONDS: int = Field(
        600,
        ge=1,
        validation_alias=AliasChoices("IMPORT_INTERVAL_SECONDS", "IMPORT_INTERVAL_SECS")
    )
    SCHEDULER_ENABLED: bool = True
    
    @model_validator(mode="after")
    def apply_server_addr(self):
        if self.SERVER_ADDR:
            host, sep, port = self.SERVER_ADDR.rpartition(":")
            if not sep or not host or not port.isdigit():
                raise ValueError(f"SERVER_ADDR must be host:port, got {self.SERVER_ADDR!r}")
            self.API_HOST = host
            self.API_PORT = int(port)
        return self
    
    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
