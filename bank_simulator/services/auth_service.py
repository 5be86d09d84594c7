"""Authentication of the single stored account."""

import logging
from pathlib import Path

from bank_simulator.domain.account.account import BankAccount
from bank_simulator.exceptions import InvalidCredentialsError
from bank_simulator.infrastructure.persistence.account_store import JsonAccountStore

logger = logging.getLogger(__name__)


class AuthService:
    """Check credentials against the account file at a fixed path.

    Passwords are stored and compared in plain text. This mirrors the
    simulator's storage format and is not meant for real credentials.
    """

    def __init__(self, account_store: JsonAccountStore, account_path: Path) -> None:
        """Initialize the authentication service.

        Args:
            account_store: Store used to read the account file.
            account_path: Path of the account file looked up at every login.
        """
        self._account_store = account_store
        self._account_path = account_path

    @property
    def account_path(self) -> Path:
        """Return the path of the account file used for login."""
        return self._account_path

    def login(self, username: str, password: str) -> BankAccount:
        """Return the stored account if the credentials match it exactly.

        Raises:
            AccountFileNotFoundError: If the account file does not exist.
            InvalidAccountFormatError: If the account file is malformed.
            AccountStorageError: If the account file cannot be read.
            InvalidCredentialsError: If username or password differ.
        """
        stored = self._account_store.load(self._account_path)
        if stored.username != username or stored.password != password:
            logger.info("Login refused for username %r", username)
            raise InvalidCredentialsError()
        logger.info("User %r logged in to account %r", username, stored.account_name)
        return stored

    def logout(self, account: BankAccount) -> None:
        """Record the end of the session of *account*."""
        logger.info(
            "User %r logged out of account %r", account.username, account.account_name
        )
