"""Configuration management"""
import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from dotenv import load_dotenv

from ..matching.models import MatchingConfig

load_dotenv()

DEFAULT_CONFIG_PATH = "config/config.yaml"


class Config:
    """Application configuration manager"""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = Path(config_path or os.getenv("LINKUP_MATCHING_CONFIG", DEFAULT_CONFIG_PATH))
        self._config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file"""
        if self.config_path.exists():
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = yaml.safe_load(f) or {}
            if not isinstance(loaded, dict):
                raise ValueError(f"{self.config_path} must contain a mapping at the top level")
            return loaded
        return {}

    @property
    def log_level(self) -> str:
        return os.getenv("LOG_LEVEL") or self.get("logging.level", "INFO")

    @property
    def matching_config(self) -> MatchingConfig:
        return MatchingConfig.from_settings(self._config.get("matching"))

    @property
    def max_workers(self) -> int:
        return int(self.get("ranking.max_workers", 8))

    @property
    def job_limit(self) -> int:
        return int(self.get("ranking.job_limit", 50))

    @property
    def candidate_limit(self) -> int:
        return int(self.get("ranking.candidate_limit", 100))

    @property
    def application_default_score(self) -> int:
        return int(self.get("ranking.application_default_score", 50))

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value by dot notation"""
        keys = key.split('.')
        value = self._config
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
            else:
                return default
        return value if value is not None else default


# Global config instance
config = Config()
