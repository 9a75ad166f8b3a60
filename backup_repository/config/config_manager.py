"""Configuration management for the backup repository."""

import os
import yaml
from typing import Dict, Any, Optional
from .config_validator import ConfigValidator
from ..core.repository import BackupsRepository


class ConfigManager:
    """Manages configuration loading and validation for the backup repository."""

    DEFAULT_CONFIG_LOCATIONS = [
        "config.yaml",
        "config.yml",
        os.path.expanduser("~/.backup-repository/config.yaml"),
        os.path.expanduser("~/.backup-repository/config.yml"),
        "/etc/backup-repository/config.yaml",
        "/etc/backup-repository/config.yml"
    ]

    DEFAULT_BACKUP_DIRECTORY = "/var/lib/xroad/backup/"

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to config file. If not provided,
                        will search in default locations.
        """
        self.config_path = config_path
        self.config_data: Dict[str, Any] = {}
        self.validator = ConfigValidator()

    def load_config(self) -> Dict[str, Any]:
        """Load configuration from file.

        Returns:
            Dictionary containing configuration data.

        Raises:
            FileNotFoundError: If config file cannot be found.
            ValueError: If config file is invalid.
        """
        config_file = self._find_config_file()

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                self.config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {config_file}: {e}")
        except OSError as e:
            raise ValueError(f"Error reading config file {config_file}: {e}")

        self.validator.validate(self.config_data)
        self._set_defaults()

        return self.config_data

    def _find_config_file(self) -> str:
        """Find configuration file in default locations.

        Raises:
            FileNotFoundError: If no config file is found.
        """
        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            else:
                raise FileNotFoundError(f"Config file not found: {self.config_path}")

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if os.path.exists(location):
                return location

        raise FileNotFoundError(
            f"Configuration file not found in any of these locations:\n" +
            "\n".join(f"  - {loc}" for loc in self.DEFAULT_CONFIG_LOCATIONS)
        )

    def _set_defaults(self):
        """Set default values for optional configuration parameters."""
        defaults = {
            'backups': {
                'directory': self.DEFAULT_BACKUP_DIRECTORY,
                'validate_filenames': True
            },
            'logging': {
                'level': 'INFO',
                'file': None
            }
        }

        for section, section_defaults in defaults.items():
            if not self.config_data.get(section):
                self.config_data[section] = {}
            for key, value in section_defaults.items():
                if key not in self.config_data[section]:
                    self.config_data[section][key] = value

    def get_backups_config(self) -> Dict[str, Any]:
        """Get backups configuration.

        Returns:
            Backups configuration dictionary.
        """
        return self.config_data.get('backups', {})

    def get_logging_config(self) -> Dict[str, Any]:
        """Get logging configuration.

        Returns:
            Logging configuration dictionary.
        """
        return self.config_data.get('logging', {})

    def create_repository(self) -> BackupsRepository:
        """Build a repository for the configured backup directory.

        Loads the configuration first if that has not happened yet.
        """
        if not self.config_data:
            self.load_config()

        backups_config = self.get_backups_config()
        return BackupsRepository(
            backups_config['directory'],
            validate_filenames=backups_config.get('validate_filenames', True)
        )
