"""Configuration for metrics-sla"""
from pathlib import Path
from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Environment-based settings, mostly controlling structured logging"""

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

    # Service identification
    service_name: str = Field(default="metrics-sla", description="Service name bound into log events")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file path")
    environment: Literal["development", "production"] = Field(default="production", description="Selects console or JSON log rendering")

    @field_validator('log_level', 'environment', mode='before')
    @classmethod
    def normalize_case(cls, v, info):
        """Accept log levels and environments in any case"""
        if isinstance(v, str):
            v = v.strip()
            return v.upper() if info.field_name == 'log_level' else v.lower()
        return v

    @field_validator('log_file')
    @classmethod
    def ensure_parent_directory(cls, v):
        """Ensure the log file's parent directory exists"""
        if isinstance(v, Path):
            v.parent.mkdir(parents=True, exist_ok=True)
        return v

    def is_development(self) -> bool:
        """Check if console rendering is selected"""
        return self.environment == "development"
