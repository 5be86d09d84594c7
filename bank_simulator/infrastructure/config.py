"""Module for the Config class."""
import logging
import logging.config
from pathlib import Path
from typing import Any, NamedTuple

import yaml

logger = logging.getLogger(__name__)


class BackupConfig(NamedTuple):
    """Backup settings for saved account files."""

    enabled: bool = True
    max_backups: int = 5
    directory: Path | None = None


class Config:  # pylint: disable=too-few-public-methods,too-many-instance-attributes
    """A class to store the configuration."""

    SUPPORTED_SUFFIXES = (".yaml", ".yml")

    def __init__(self) -> None:
        # Storage config
        self.account_path = Path("UserAccount.json")
        self.save_directory = Path(".")
        self.save_to_login_file = False
        self.backup = BackupConfig()
        # Session config
        self.logout_pause = 1.0
        self.language = "en"
        # Logging config (dictConfig format)
        self.logging_config: dict[str, Any] | None = None

    def __parse_yaml(self, yaml_path: Path) -> None:
        """Parse a YAML configuration file."""
        with open(yaml_path, encoding="utf-8") as file:
            config = yaml.safe_load(file) or {}

        if "account_path" in config:
            self.account_path = Path(config["account_path"])
        if "save_directory" in config:
            self.save_directory = Path(config["save_directory"])
        if "save_to_login_file" in config:
            self.save_to_login_file = bool(config["save_to_login_file"])
        if "logout_pause" in config:
            self.logout_pause = float(config["logout_pause"])
        if "language" in config:
            self.language = str(config["language"])

        if backup := config.get("backup"):
            directory = backup.get("directory")
            self.backup = BackupConfig(
                enabled=backup.get("enabled", self.backup.enabled),
                max_backups=backup.get("max_backups", self.backup.max_backups),
                directory=Path(directory) if directory else None,
            )

        self.logging_config = config.get("logging")

    def parse(self, config_path: Path) -> None:
        """Parse a configuration file."""
        if config_path.suffix in self.SUPPORTED_SUFFIXES:
            self.__parse_yaml(config_path)
        else:
            raise ValueError(f"Unsupported file format: '{config_path.suffix}'")

    def save_path(self, account_name: str) -> Path:
        """Return the file an account named *account_name* is saved to."""
        if self.save_to_login_file:
            return self.account_path
        return self.save_directory / f"{account_name}.json"

    def setup_logging(self) -> None:
        """Configure logging from the YAML dictConfig or write to a log file.

        The session owns the terminal, so by default log records go to
        ``~/.local/share/bank-simulator/bank-simulator.log``.
        """
        if self.logging_config is not None:
            try:
                logging.config.dictConfig(self.logging_config)
                return
            except (ValueError, TypeError, AttributeError, ImportError) as e:
                logging.basicConfig(level=logging.INFO)
                logger.warning("Invalid logging configuration, using defaults: %s", e)
                return

        log_dir = Path.home() / ".local" / "share" / "bank-simulator"
        log_dir.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            filename=log_dir / "bank-simulator.log",
            level=logging.INFO,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

