"""Configuration validation for the backup repository."""

from typing import Dict, Any


class ConfigValidator:
    """Validates backup repository configuration."""

    REQUIRED_SECTIONS = ['backups']
    LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

    def validate(self, config: Dict[str, Any]) -> None:
        """Validate configuration data.

        Args:
            config: Configuration dictionary to validate.

        Raises:
            ValueError: If configuration is invalid.
        """
        if not isinstance(config, dict):
            raise ValueError("Configuration must be a mapping")

        self._validate_structure(config)
        self._validate_backups_config(config['backups'])

        if 'logging' in config:
            self._validate_logging_config(config['logging'])

    def _validate_structure(self, config: Dict[str, Any]) -> None:
        """Validate basic configuration structure.

        Raises:
            ValueError: If required sections are missing.
        """
        missing_sections = [section for section in self.REQUIRED_SECTIONS if section not in config]
        if missing_sections:
            raise ValueError(f"Missing required configuration sections: {missing_sections}")

    def _validate_backups_config(self, backups: Any) -> None:
        """Validate the backups section.

        Args:
            backups: Backups configuration.

        Raises:
            ValueError: If the backups section is invalid.
        """
        if backups is None:
            return
        if not isinstance(backups, dict):
            raise ValueError("Backups configuration must be a dictionary")

        if 'directory' in backups:
            directory = backups['directory']
            if not isinstance(directory, str) or not directory.strip():
                raise ValueError("Backup directory must be a non-empty string")

        if 'validate_filenames' in backups and not isinstance(backups['validate_filenames'], bool):
            raise ValueError(
                f"Backups validate_filenames must be true or false: {backups['validate_filenames']!r}"
            )

    def _validate_logging_config(self, logging_config: Any) -> None:
        if logging_config is None:
            return
        if not isinstance(logging_config, dict):
            raise ValueError("Logging configuration must be a dictionary")

        level = logging_config.get('level')
        if level is not None and str(level).upper() not in self.LOG_LEVELS:
            raise ValueError(f"Logging configuration has invalid level: {level}")
