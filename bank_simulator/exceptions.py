"""Custom exception hierarchy for the bank simulator."""

from decimal import Decimal
from pathlib import Path


class BankSimulatorError(Exception):
    """Base exception for all bank simulator errors."""


class AmountValidationError(BankSimulatorError):
    """An amount was rejected by an account operation."""


class NonPositiveAmountError(AmountValidationError):
    """Deposit or withdrawal amount is zero or negative."""

    def __init__(self, operation: str, amount: Decimal) -> None:
        super().__init__(f"{operation} amount must be positive.")
        self.operation = operation
        self.amount = amount


class InsufficientFundsError(AmountValidationError):
    """Withdrawal amount exceeds the current balance."""

    def __init__(self, amount: Decimal, balance: Decimal) -> None:
        super().__init__("Insufficient funds.")
        self.amount = amount
        self.balance = balance


class InexactAmountError(AmountValidationError):
    """The amount cannot be applied to the balance without rounding."""

    def __init__(self, operation: str, amount: Decimal) -> None:
        super().__init__(
            f"{operation} amount cannot be applied exactly to the balance."
        )
        self.operation = operation
        self.amount = amount


class AmountConversionError(BankSimulatorError):
    """Text entered as an amount is not a decimal number."""

    def __init__(self, raw_value: object) -> None:
        super().__init__(
            f"Input string {str(raw_value)!r} was not in a correct format."
        )
        self.raw_value = raw_value


class AccountStorageError(BankSimulatorError):
    """The storage file could not be read or written."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class AccountFileNotFoundError(AccountStorageError):
    """The storage file used for login does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__("Account data file not found.", path=path)


class InvalidAccountFormatError(AccountStorageError):
    """The storage file is not a well-formed account record."""

    def __init__(self, path: Path, detail: str | None = None) -> None:
        super().__init__("Invalid account data format.", path=path)
        self.detail = detail


class AccountSaveError(AccountStorageError):
    """Writing the account to its storage file failed."""


class InvalidCredentialsError(BankSimulatorError):
    """Username or password does not match the stored record."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password.")


class BackupError(BankSimulatorError):
    """A backup operation failed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
