"""Tests for the Config class."""

# pylint: disable=redefined-outer-name

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from bank_simulator.infrastructure.config import BackupConfig, Config


@pytest.fixture
def full_config_yaml(tmp_path: Path) -> Path:
    """Create a YAML config file with all optional fields."""
    config = {
        "account_path": str(tmp_path / "login.json"),
        "save_directory": str(tmp_path / "saves"),
        "save_to_login_file": True,
        "logout_pause": 0,
        "language": "fr",
        "backup": {
            "enabled": False,
            "max_backups": 10,
            "directory": str(tmp_path / "backups"),
        },
        "logging": {
            "version": 1,
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": "DEBUG",
                }
            },
            "root": {"level": "DEBUG", "handlers": ["console"]},
        },
    }
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump(config), encoding="utf-8")
    return config_path


class TestConfigDefaults:
    """Tests for Config default values."""

    def test_default_storage(self) -> None:
        """Login reads UserAccount.json and saves go to the working directory."""
        config = Config()
        assert config.account_path == Path("UserAccount.json")
        assert config.save_directory == Path(".")
        assert config.save_to_login_file is False

    def test_default_session(self) -> None:
        """Logout pauses one second and messages are in English."""
        config = Config()
        assert config.logout_pause == 1.0
        assert config.language == "en"

    def test_default_backup(self) -> None:
        """Backups are enabled and keep five files."""
        assert Config().backup == BackupConfig(
            enabled=True, max_backups=5, directory=None
        )

    def test_default_logging_config(self) -> None:
        """Test that default logging config is None."""
        assert Config().logging_config is None


class TestConfigParseYaml:
    """Tests for YAML config file parsing."""

    def test_parse_full_config(self, full_config_yaml: Path, tmp_path: Path) -> None:
        """Every field is read from the file."""
        config = Config()
        config.parse(full_config_yaml)

        assert config.account_path == tmp_path / "login.json"
        assert config.save_directory == tmp_path / "saves"
        assert config.save_to_login_file is True
        assert config.logout_pause == 0.0
        assert config.language == "fr"
        assert config.backup == BackupConfig(
            enabled=False, max_backups=10, directory=tmp_path / "backups"
        )
        assert config.logging_config is not None
        assert config.logging_config["version"] == 1

    def test_parse_preserves_defaults_for_missing_fields(self, tmp_path: Path) -> None:
        """Fields absent from the file keep their defaults."""
        config_path = tmp_path / "config.yml"
        config_path.write_text(yaml.dump({"logout_pause": 0.5}), encoding="utf-8")

        config = Config()
        config.parse(config_path)

        assert config.logout_pause == 0.5
        assert config.account_path == Path("UserAccount.json")
        assert config.backup == BackupConfig()
        assert config.logging_config is None

    def test_parse_empty_file(self, tmp_path: Path) -> None:
        """An empty YAML file yields the defaults."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("", encoding="utf-8")

        config = Config()
        config.parse(config_path)

        assert config.account_path == Path("UserAccount.json")

    def test_parse_backup_partial_config(self, tmp_path: Path) -> None:
        """Test parsing backup config with only some fields set."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text(
            yaml.dump({"backup": {"enabled": False}}), encoding="utf-8"
        )

        config = Config()
        config.parse(config_path)

        assert config.backup.enabled is False
        assert config.backup.max_backups == 5
        assert config.backup.directory is None

    def test_parse_unsupported_format_raises(self, tmp_path: Path) -> None:
        """Test that parsing a non-YAML file raises ValueError."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{}")

        with pytest.raises(ValueError, match="Unsupported file format: '.json'"):
            Config().parse(config_path)


class TestSavePath:
    """Tests for Config.save_path."""

    def test_save_path_is_derived_from_account_name(self) -> None:
        """By default the account is saved to <name>.json."""
        config = Config()
        config.save_directory = Path("/data")
        assert config.save_path("Main") == Path("/data/Main.json")

    def test_save_to_login_file(self) -> None:
        """With save_to_login_file the login path is reused."""
        config = Config()
        config.save_to_login_file = True
        assert config.save_path("Main") == Path("UserAccount.json")


class TestConfigSetupLogging:
    """Tests for the setup_logging method."""

    def test_setup_logging_default(self, tmp_path: Path) -> None:
        """Test that default logging writes to a file in .local/share."""
        config = Config()

        with patch(
            "bank_simulator.infrastructure.config.Path.home"
        ) as mock_home, patch(
            "bank_simulator.infrastructure.config.logging.basicConfig"
        ) as mock_basic_config:
            mock_home.return_value = tmp_path
            config.setup_logging()

        log_dir = tmp_path / ".local" / "share" / "bank-simulator"
        assert log_dir.exists()
        assert mock_basic_config.call_args.kwargs["filename"] == (
            log_dir / "bank-simulator.log"
        )

    def test_setup_logging_with_valid_dictconfig(self, full_config_yaml: Path) -> None:
        """Test that valid logging dictConfig is applied."""
        config = Config()
        config.parse(full_config_yaml)

        with patch(
            "bank_simulator.infrastructure.config.logging.config.dictConfig"
        ) as mock_dict_config:
            config.setup_logging()

        mock_dict_config.assert_called_once_with(config.logging_config)

    def test_setup_logging_with_invalid_dictconfig(self) -> None:
        """Test that invalid logging config falls back to basic config."""
        config = Config()
        config.logging_config = {"invalid": "config"}

        with patch(
            "bank_simulator.infrastructure.config.logging.basicConfig"
        ) as mock_basic_config:
            config.setup_logging()

        mock_basic_config.assert_called_once_with(level=logging.INFO)
