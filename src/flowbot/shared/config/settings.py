"""
Centralized configuration management for FlowBot.

All environment variables and settings are managed here so the provider
chain, the API and the CLI share one source of configuration.
"""

from functools import lru_cache
from typing import Optional, Dict, Any, List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Centralized settings for FlowBot.

    All configuration is loaded from environment variables (or a .env file)
    with sensible defaults. Provider credentials are optional: a missing key
    simply disables the matching provider.
    """

    # === Application Settings ===
    app_name: str = Field(default="FlowBot", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    # === API Settings ===
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://127.0.0.1:3000"],
        description="Origins allowed to call the API"
    )

    # === NVIDIA NIM (primary provider, two model variants) ===
    nvidia_nim_api_key: Optional[str] = Field(default=None, description="NVIDIA NIM API key", validation_alias="NVIDIA_NIM_API_KEY")
    nvidia_nim_base_url: str = Field(default="https://integrate.api.nvidia.com/v1", description="NVIDIA NIM base URL")
    nvidia_nim_primary_model: str = Field(default="z-ai/glm4.7", description="First model tried on NVIDIA NIM")
    nvidia_nim_secondary_model: str = Field(default="moonshotai/kimi-k2-instruct", description="Second model tried on NVIDIA NIM")
    nvidia_nim_max_tokens: int = Field(default=8000, description="Max completion tokens for NVIDIA NIM")

    # === Kimi / Moonshot (direct API) ===
    kimi_api_key: Optional[str] = Field(default=None, description="Moonshot API key", validation_alias="KIMI_API_KEY")
    kimi_base_url: str = Field(default="https://api.moonshot.ai/v1", description="Moonshot base URL")
    kimi_model: str = Field(default="moonshot-v1-8k", description="Moonshot model name")

    # === Generation Settings ===
    provider_timeout_seconds: float = Field(default=30.0, gt=0, description="Timeout for a single provider call")
    provider_temperature: float = Field(default=0.3, ge=0.0, le=2.0, description="Sampling temperature sent to providers")

    # === Monitoring Settings ===
    enable_metrics: bool = Field(default=True, description="Enable metrics collection")

    # === Logging Configuration ===
    @property
    def logging_config(self) -> Dict[str, Any]:
        """Get logging configuration."""
        return {
            'level': self.log_level,
            'file': self.log_file,
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        }

    # === Monitoring Configuration ===
    @property
    def monitoring_config(self) -> Dict[str, Any]:
        """Get monitoring configuration."""
        return {
            'enabled': self.enable_metrics,
            'max_history': 1000
        }

    @property
    def provider_status(self) -> Dict[str, str]:
        """Report which providers have credentials."""
        return {
            'nvidia_nim': 'configured' if self.nvidia_nim_api_key else 'not configured',
            'kimi': 'configured' if self.kimi_api_key else 'not configured',
        }

    @field_validator('nvidia_nim_api_key', 'kimi_api_key', mode='before')
    @classmethod
    def blank_key_is_missing(cls, v):
        # An empty KEY= line in .env disables the provider
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return v.upper()

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "populate_by_name": True,
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses LRU cache to ensure settings are only loaded once per process.
    """
    return Settings()
