"""
Configuration management for pulsegate.

Loads configuration from:
1. Environment variables prefixed with PULSEGATE_ (highest priority)
2. Configuration file (pulsegate.yaml)
3. Defaults (lowest priority)
"""

from typing import Optional, Dict, Any
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from functools import lru_cache
import logging
import yaml

from pulsegate.core.exceptions import (
    ConfigNotFoundError,
    ConfigurationError,
    ConfigValidationError,
)

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "pulsegate.yaml"


class PulseGateConfig(BaseSettings):
    """Main pulsegate configuration."""
    
    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_format: str = Field("json", description="Log format (json/text)")
    
    # Metrics
    metrics_enabled: bool = Field(True, description="Record gate metrics in Prometheus")
    
    model_config = SettingsConfigDict(
        env_prefix="PULSEGATE_",
        case_sensitive=False
    )
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v.upper()
    
    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        allowed = ["json", "text"]
        if v.lower() not in allowed:
            raise ValueError(f"Log format must be one of {allowed}")
        return v.lower()
    
    @classmethod
    def load_from_file(cls, config_path: Path) -> "PulseGateConfig":
        """
        Load configuration from YAML file.
        
        Args:
            config_path: Path to configuration file
        
        Returns:
            PulseGateConfig instance
        
        Raises:
            ConfigNotFoundError: If the file does not exist
            ConfigValidationError: If a value is rejected
            ConfigurationError: If the file cannot be parsed
        """
        if not config_path.exists():
            raise ConfigNotFoundError(str(config_path))
        
        try:
            with open(config_path, "r") as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {e}",
                {"path": str(config_path)},
                cause=e
            )
        
        if not config_data:
            config_data = {}
        
        if not isinstance(config_data, dict):
            raise ConfigurationError(
                "Configuration file must contain a mapping",
                {"path": str(config_path)}
            )
        
        try:
            return cls(**config_data)
        except ValueError as e:
            raise ConfigValidationError(
                f"Invalid configuration values: {e}",
                {"path": str(config_path)},
                cause=e
            )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()


# Global configuration instance
_global_config: Optional[PulseGateConfig] = None


@lru_cache(maxsize=1)
def get_config() -> PulseGateConfig:
    """
    Get global configuration instance (singleton).
    
    Returns:
        PulseGateConfig instance
    """
    global _global_config
    
    if _global_config is None:
        config_path = Path(DEFAULT_CONFIG_FILE)
        
        if config_path.exists():
            _global_config = PulseGateConfig.load_from_file(config_path)
        else:
            _global_config = PulseGateConfig()
        
        logger.debug(
            "Configuration loaded",
            extra={"log_level": _global_config.log_level}
        )
    
    return _global_config


def reset_config() -> None:
    """Reset global configuration (for testing)."""
    global _global_config
    _global_config = None
    get_config.cache_clear()
