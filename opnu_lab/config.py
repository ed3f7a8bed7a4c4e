"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class LabConfig(BaseSettings):
    """opnu-lab configuration"""
    
    # Account defaults
    default_transaction_fee: float = 0.0  # Fee applied to new accounts
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    log_file: Optional[str] = None  # If None, logs to stdout
    
    class Config:
        env_prefix = "OPNU_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = LabConfig()


def get_config() -> LabConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> LabConfig:
    """Reload configuration from environment"""
    global config
    config = LabConfig()
    return config
