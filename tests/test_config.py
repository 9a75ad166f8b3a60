"""Tests for configuration loading and validation."""

import os

import pytest
import yaml

from backup_repository.config import ConfigManager, ConfigValidator


def write_config(tmp_path, data):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return str(path)


class TestConfigManager:
    def test_load_config(self, tmp_path, backup_dir):
        config_path = write_config(tmp_path, {
            'backups': {'directory': str(backup_dir), 'validate_filenames': False},
            'logging': {'level': 'DEBUG'},
        })

        config = ConfigManager(config_path).load_config()

        assert config['backups'] == {'directory': str(backup_dir), 'validate_filenames': False}
        assert config['logging'] == {'level': 'DEBUG', 'file': None}

    def test_defaults(self, tmp_path):
        config_path = write_config(tmp_path, {'backups': None})

        manager = ConfigManager(config_path)
        manager.load_config()

        assert manager.get_backups_config() == {
            'directory': ConfigManager.DEFAULT_BACKUP_DIRECTORY,
            'validate_filenames': True,
        }
        assert manager.get_logging_config()['level'] == 'INFO'

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigManager(str(tmp_path / "missing.yaml")).load_config()

    def test_default_location_in_working_directory(self, tmp_path, backup_dir, monkeypatch):
        write_config(tmp_path, {'backups': {'directory': str(backup_dir)}})
        monkeypatch.chdir(tmp_path)

        config = ConfigManager().load_config()

        assert config['backups']['directory'] == str(backup_dir)

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("backups: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            ConfigManager(str(path)).load_config()

    def test_create_repository(self, tmp_path, backup_dir):
        config_path = write_config(tmp_path, {
            'backups': {'directory': str(backup_dir), 'validate_filenames': False},
        })

        repository = ConfigManager(config_path).create_repository()

        assert repository.configuration_backup_path() == str(backup_dir) + os.sep
        assert repository.validate_filenames is False


class TestConfigValidator:
    @pytest.fixture
    def validator(self):
        return ConfigValidator()

    def test_valid(self, validator):
        validator.validate({'backups': {'directory': '/var/backups', 'validate_filenames': True}})

    def test_missing_backups_section(self, validator):
        with pytest.raises(ValueError, match="Missing required configuration sections"):
            validator.validate({'logging': {'level': 'INFO'}})

    def test_not_a_mapping(self, validator):
        with pytest.raises(ValueError):
            validator.validate(['backups'])

    @pytest.mark.parametrize("directory", ["", "   ", 42, None])
    def test_invalid_directory(self, validator, directory):
        with pytest.raises(ValueError, match="Backup directory"):
            validator.validate({'backups': {'directory': directory}})

    def test_invalid_validate_filenames(self, validator):
        with pytest.raises(ValueError, match="validate_filenames"):
            validator.validate({'backups': {'validate_filenames': 'yes'}})

    def test_invalid_log_level(self, validator):
        with pytest.raises(ValueError, match="invalid level"):
            validator.validate({'backups': {}, 'logging': {'level': 'LOUD'}})

    def test_lowercase_log_level(self, validator):
        validator.validate({'backups': {}, 'logging': {'level': 'debug'}})
