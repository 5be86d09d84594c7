"""Module for reading and writing account storage files."""
import json
import logging
import uuid
from decimal import Decimal
from pathlib import Path
from typing import Any

from bank_simulator.core.amount import format_amount, to_decimal
from bank_simulator.domain.account.account import BankAccount
from bank_simulator.exceptions import (
    AccountFileNotFoundError,
    AccountSaveError,
    AccountStorageError,
    AmountConversionError,
    BackupError,
    InvalidAccountFormatError,
)
from bank_simulator.infrastructure.backup import BackupService

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("Username", "Password", "AccountName", "Balance")
DEFAULT_ACCOUNT_NAME = "DefaultAccount"


class AccountRecordConverter:
    """A class to serialize and deserialize an account to a json record."""

    @staticmethod
    def to_json(account: BankAccount) -> str:
        """Convert an account to a json string.

        The json module writes no Decimal, so the balance is encoded as a
        unique placeholder string that is then swapped for its exact digits.
        """
        placeholder = uuid.uuid4().hex

        def encode_decimal(value: object) -> str:
            if isinstance(value, Decimal):
                return placeholder
            raise TypeError(f"Cannot serialize {type(value).__name__}")

        record = json.dumps(
            {
                "Username": account.username,
                "Password": account.password,
                "AccountName": account.account_name,
                "Balance": account.balance,
            },
            default=encode_decimal,
        )
        return record.replace(f'"{placeholder}"', format_amount(account.balance))

    @staticmethod
    def from_json(json_record: str, path: Path) -> BankAccount:
        """Convert a json string to an account.

        Raises:
            InvalidAccountFormatError: If the record is not a json object
                holding the four account keys with usable values.
        """
        try:
            record = json.loads(json_record, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise InvalidAccountFormatError(path, str(e)) from e

        if not isinstance(record, dict):
            raise InvalidAccountFormatError(path, "record is not a json object")
        missing = [key for key in REQUIRED_KEYS if key not in record]
        if missing:
            raise InvalidAccountFormatError(path, f"missing keys: {missing}")

        balance = record["Balance"]
        if isinstance(balance, bool) or not isinstance(balance, (int, Decimal)):
            raise InvalidAccountFormatError(path, "Balance is not a number")
        try:
            balance = to_decimal(balance)
        except AmountConversionError as e:
            raise InvalidAccountFormatError(path, str(e)) from e

        return BankAccount(
            account_name=_string_field(record, "AccountName", path)
            or DEFAULT_ACCOUNT_NAME,
            username=_string_field(record, "Username", path),
            password=_string_field(record, "Password", path),
            balance=balance,
        )


def _string_field(record: dict[str, Any], key: str, path: Path) -> str:
    value = record[key]
    if value is None:
        return ""
    if not isinstance(value, str):
        raise InvalidAccountFormatError(path, f"{key} is not a string")
    return value


class JsonAccountStore:
    """Load account records from, and save them to, json files."""

    def __init__(self, backup_service: BackupService | None = None) -> None:
        self.__backup_service = backup_service

    @property
    def backup_service(self) -> BackupService | None:
        """Return the backup service used before overwriting, if any."""
        return self.__backup_service

    def load(self, path: Path) -> BankAccount:
        """Load the account stored at *path*.

        Raises:
            AccountFileNotFoundError: If there is no file at *path*.
            InvalidAccountFormatError: If the file is not an account record.
            AccountStorageError: If the file cannot be read.
        """
        if not path.exists():
            raise AccountFileNotFoundError(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise AccountStorageError(
                f"Could not read account data: {e}", path=path
            ) from e
        return AccountRecordConverter.from_json(content, path)

    def save(self, account: BankAccount, path: Path) -> Path:
        """Save the account to *path*, backing up any previous file first.

        Raises:
            AccountSaveError: If the file cannot be written.
        """
        if path.exists() and self.__backup_service is not None:
            try:
                self.__backup_service.create_backup(path)
                self.__backup_service.rotate_backups(path)
            except BackupError as e:
                logger.warning("Saving %s without backup: %s", path, e)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(AccountRecordConverter.to_json(account), encoding="utf-8")
        except OSError as e:
            raise AccountSaveError(
                f"Could not save account data to {path}: {e}", path=path
            ) from e
        logger.info("Account %r saved to %s", account.account_name, path)
        return path
