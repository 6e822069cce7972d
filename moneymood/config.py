"""Configuration management for MoneyMood."""
import os
from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml
from dotenv import load_dotenv
from moneymood.utils.errors import ConfigurationError
from moneymood.utils.logging import setup_logging
from moneymood.utils.paths import resolve_project_path
import logging

logger = logging.getLogger(__name__)


class Config:
    """Application configuration."""
    
    def __init__(self, config_path: str = "config.yaml"):
        """
        Initialize configuration.
        
        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = Path(config_path)
        self._config: Dict[str, Any] = {}
        self._load()
    
    def _load(self) -> None:
        """Load configuration from YAML and environment."""
        load_dotenv()
        
        if not self.config_path.exists():
            raise ConfigurationError(f"Config file not found: {self.config_path}")
        
        with open(self.config_path, 'r') as f:
            self._config = yaml.safe_load(f)
        
        if not self._config:
            raise ConfigurationError(f"Empty configuration file: {self.config_path}")
        
        self._validate()
        
        log_config = self._config.get('logging', {})
        setup_logging(
            level=os.getenv('LOG_LEVEL', log_config.get('level', 'INFO')),
            log_file=log_config.get('file'),
            format_type=log_config.get('format', 'json'),
            enabled=log_config.get('enabled', True)
        )
        
        logger.info("Configuration loaded successfully")
    
    def _validate(self) -> None:
        """Validate required configuration sections."""
        if not isinstance(self._config, dict):
            raise ConfigurationError("Configuration root must be a mapping")

        required_sections = ['app', 'currency']
        
        for section in required_sections:
            if section not in self._config:
                raise ConfigurationError(f"Missing required config section: {section}")
        
        home = self._config['currency'].get('home')
        supported = self._config['currency'].get('supported')
        if supported and home and home not in supported:
            raise ConfigurationError(
                f"currency.home ({home}) must be listed in currency.supported"
            )
        
        ttl = self._config['currency'].get('cache_ttl', 300)
        if not isinstance(ttl, (int, float)) or ttl < 0:
            raise ConfigurationError(f"Invalid currency.cache_ttl: {ttl}")
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by dot-separated key.
        
        Args:
            key: Dot-separated key (e.g., "currency.rates_url")
            default: Default value if key not found
        
        Returns:
            Configuration value
        """
        keys = key.split('.')
        value = self._config
        
        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default
        
        return value
    
    def get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get environment variable."""
        return os.getenv(key, default)
    
    @property
    def app_name(self) -> str:
        return self.get('app.name', 'MoneyMood')
    
    @property
    def app_version(self) -> str:
        return self.get('app.version', '1.0.0')
    
    @property
    def debug(self) -> bool:
        return self.get('app.debug', False)
    
    @property
    def home_currency(self) -> str:
        return self.get('currency.home', 'JPY')
    
    @property
    def supported_currencies(self) -> Optional[List[str]]:
        """Configured currency list, or None to use the built-in set."""
        return self.get('currency.supported')
    
    @property
    def rates_url(self) -> str:
        """Rate source endpoint; MONEYMOOD_RATES_URL overrides the file."""
        return os.getenv(
            'MONEYMOOD_RATES_URL',
            self.get('currency.rates_url', 'https://api.exchangerate-api.com/v4/latest/JPY'),
        )
    
    @property
    def request_timeout(self) -> float:
        return float(self.get('currency.timeout', 10))
    
    @property
    def cache_ttl(self) -> int:
        """Rate cache freshness window in seconds."""
        return int(self.get('currency.cache_ttl', 300))
    
    @property
    def max_amount(self) -> float:
        return float(self.get('validation.max_amount', 1e8))
    
    @property
    def export_version(self) -> str:
        return str(self.get('export.version', '1.0'))


# Global config instance
_config: Optional[Config] = None


def load_config(config_path: str = "config.yaml") -> Config:
    """Load and return global configuration instance."""
    global _config
    if _config is None:
        _config = Config(str(resolve_project_path(config_path)))
    return _config


def get_config() -> Config:
    """Get global configuration instance."""
    if _config is None:
        raise ConfigurationError("Configuration not loaded. Call load_config() first.")
    return _config


def reset_config() -> None:
    """Drop the global instance (used by tests and the CLI --config flag)."""
    global _config
    _config = None
