"""Configuration loader for lookup settings from YAML file."""

import yaml
from pathlib import Path
from typing import Dict, Any

from javadoc_paranamer.config.constants import DEFAULTS
from javadoc_paranamer.data_models import ParanamerConfig


class ConfigLoader:
    """Load and manage configuration from YAML file."""

    def __init__(self, config_path: str = DEFAULTS.CONFIG_FILE):
        """Initialize config loader.

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = Path(config_path)
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from YAML file.

        Returns:
            Configuration dictionary

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If config file is invalid
        """
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        with open(self.config_path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f)

        return config or {}

    def get_javadoc_config(self) -> Dict[str, Any]:
        """Get Javadoc layout configuration.

        Returns:
            Dictionary with sentinel, suffix, marker and encoding settings
        """
        return self.config.get('javadoc', {})

    def get_http_config(self) -> Dict[str, Any]:
        """Get HTTP configuration for URL roots.

        Returns:
            Dictionary with timeout and header settings
        """
        return self.config.get('http', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration.

        Returns:
            Dictionary with logging settings
        """
        return self.config.get('logging', {})

    def get_paranamer_config(self) -> ParanamerConfig:
        """Get lookup settings as a ParanamerConfig object.

        Returns:
            ParanamerConfig instance with loaded parameters
        """
        defaults = ParanamerConfig()
        javadoc = self.get_javadoc_config()
        http = self.get_http_config()

        return ParanamerConfig(
            sentinel_filename=javadoc.get('sentinel_filename', defaults.sentinel_filename),
            page_suffix=javadoc.get('page_suffix', defaults.page_suffix),
            array_marker=javadoc.get('array_marker', defaults.array_marker),
            encoding=javadoc.get('encoding', defaults.encoding),
            http_timeout=http.get('timeout', defaults.http_timeout),
            http_headers=dict(http.get('headers') or {}),
        )
