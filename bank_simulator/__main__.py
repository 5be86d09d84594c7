"""Entry point for the bank simulator.

Usage:
    python -m bank_simulator [-c config.yaml]
"""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from bank_simulator.cli.session import SessionController
from bank_simulator.i18n import setup_i18n
from bank_simulator.infrastructure.backup import BackupService
from bank_simulator.infrastructure.config import Config
from bank_simulator.infrastructure.persistence.account_store import JsonAccountStore
from bank_simulator.services.auth_service import AuthService

logger = logging.getLogger("bank_simulator")


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.
    """
    parser = argparse.ArgumentParser(description="Bank account simulator")
    parser.add_argument(
        "-c",
        "--config",
        help="Path to an optional YAML configuration file",
        type=Path,
    )
    return parser


def load_config(config_path: Path | None) -> Config:
    """Build the configuration, reading *config_path* when one is given."""
    config = Config()
    if config_path is None:
        return config
    if not config_path.exists():
        print(f"Error: Config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)
    try:
        config.parse(config_path)
    except (ValueError, TypeError, AttributeError, yaml.YAMLError) as e:
        print(f"Error: Invalid config file {config_path}: {e}", file=sys.stderr)
        sys.exit(1)
    return config


def create_session(config: Config) -> SessionController:
    """Wire the services of a terminal session from the configuration."""
    backup_service = None
    if config.backup.enabled:
        backup_service = BackupService(
            backup_directory=config.backup.directory,
            max_backups=config.backup.max_backups,
        )
    account_store = JsonAccountStore(backup_service)
    auth_service = AuthService(account_store, config.account_path)
    return SessionController(auth_service, account_store, config)


def main() -> None:
    """Run an interactive bank session in the terminal."""
    args = create_parser().parse_args()
    config = load_config(args.config)
    config.setup_logging()
    setup_i18n(config.language)

    logger.info("Starting session, account file %s", config.account_path)
    create_session(config).run()


if __name__ == "__main__":
    main()
