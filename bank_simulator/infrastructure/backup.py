"""Backup service for saved account files."""

import logging
import re
import shutil
from datetime import datetime
from pathlib import Path

from bank_simulator.exceptions import BackupError

logger = logging.getLogger(__name__)

# Timestamp written by BackupService.TIMESTAMP_FORMAT, then the extension
BACKUP_SUFFIX_PATTERN = r"_\d{4}-\d{2}-\d{2}_\d{6}_\d{6}\.back"


class BackupService:
    """Copy an account file aside before it is overwritten, keeping a few."""

    TIMESTAMP_FORMAT = "%Y-%m-%d_%H%M%S_%f"

    def __init__(
        self,
        backup_directory: Path | None = None,
        max_backups: int = 5,
    ) -> None:
        """Initialize the backup service.

        Args:
            backup_directory: Directory for backups (default: next to each file).
            max_backups: Maximum number of backups to keep per account file.
        """
        self._backup_directory = backup_directory
        self._max_backups = max_backups

    @property
    def max_backups(self) -> int:
        """Return the maximum number of backups to keep."""
        return self._max_backups

    def backup_directory_for(self, account_path: Path) -> Path:
        """Return the directory holding backups of *account_path*."""
        return self._backup_directory or account_path.parent

    def create_backup(self, account_path: Path) -> Path:
        """Create a timestamped copy of an account file.

        Returns:
            Path to the created backup file.

        Raises:
            BackupError: If the file doesn't exist or the copy fails.
        """
        if not account_path.exists():
            raise BackupError(f"Account file does not exist: {account_path}")

        try:
            backup_directory = self.backup_directory_for(account_path)
            backup_directory.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime(self.TIMESTAMP_FORMAT)
            backup_path = backup_directory / f"{account_path.stem}_{timestamp}.back"

            shutil.copy2(account_path, backup_path)
            logger.info("Account backup created: %s", backup_path)

            return backup_path

        except OSError as e:
            raise BackupError(f"Failed to create backup: {e}") from e

    def rotate_backups(self, account_path: Path) -> list[Path]:
        """Delete the oldest backups of *account_path* beyond max_backups.

        Returns:
            List of deleted backup file paths.
        """
        deleted: list[Path] = []

        try:
            backups = self.get_existing_backups(account_path)

            if len(backups) <= self._max_backups:
                return deleted

            # List is sorted oldest first
            for backup in backups[: len(backups) - self._max_backups]:
                try:
                    backup.unlink()
                    deleted.append(backup)
                    logger.info("Deleted old backup: %s", backup)
                except OSError as e:
                    logger.error("Failed to delete backup %s: %s", backup, e)

        except OSError as e:
            logger.error("Failed to rotate backups: %s", e)

        return deleted

    def get_existing_backups(self, account_path: Path) -> list[Path]:
        """Get backups of *account_path*, sorted oldest first."""
        name_pattern = re.compile(re.escape(account_path.stem) + BACKUP_SUFFIX_PATTERN)
        backups = [
            path
            for path in self.backup_directory_for(account_path).glob("*.back")
            if name_pattern.fullmatch(path.name)
        ]
        return sorted(backups, key=lambda p: p.name)
