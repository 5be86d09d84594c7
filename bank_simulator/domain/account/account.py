"""This module contains the BankAccount class."""
import logging
from dataclasses import dataclass, field
from decimal import Decimal, Inexact, localcontext

from bank_simulator.core.amount import AmountInput, to_decimal
from bank_simulator.exceptions import (
    InexactAmountError,
    InsufficientFundsError,
    NonPositiveAmountError,
)

logger = logging.getLogger(__name__)


@dataclass
class BankAccount:
    """The account record of the logged-in user.

    The balance is taken as-is at construction time. Afterwards it only
    changes through deposit and withdraw, which never apply a non-positive
    amount and never take the balance below zero.
    """

    account_name: str
    username: str
    password: str = field(repr=False)
    balance: Decimal = Decimal("0")

    def __post_init__(self) -> None:
        self.balance = to_decimal(self.balance)

    def deposit(self, amount: AmountInput) -> Decimal:
        """Add a positive amount to the balance and return the new balance.

        Raises:
            AmountConversionError: If the amount is not a decimal number.
            NonPositiveAmountError: If the amount is zero or negative.
            InexactAmountError: If the new balance would need rounding.
        """
        value = to_decimal(amount)
        if value <= 0:
            raise NonPositiveAmountError("Deposit", value)
        self.balance = _exact_sum(self.balance, value, "Deposit")
        logger.info(
            "Deposited %s on account %r, new balance %s",
            value,
            self.account_name,
            self.balance,
        )
        return self.balance

    def withdraw(self, amount: AmountInput) -> Decimal:
        """Remove a positive amount from the balance and return the new balance.

        Raises:
            AmountConversionError: If the amount is not a decimal number.
            NonPositiveAmountError: If the amount is zero or negative.
            InsufficientFundsError: If the amount exceeds the balance.
            InexactAmountError: If the new balance would need rounding.
        """
        value = to_decimal(amount)
        if value <= 0:
            raise NonPositiveAmountError("Withdrawal", value)
        if value > self.balance:
            raise InsufficientFundsError(value, self.balance)
        self.balance = _exact_sum(self.balance, value.copy_negate(), "Withdrawal")
        logger.info(
            "Withdrew %s from account %r, new balance %s",
            value,
            self.account_name,
            self.balance,
        )
        return self.balance

    def check_balance(self) -> Decimal:
        """Return the current balance."""
        return self.balance


def _exact_sum(balance: Decimal, delta: Decimal, operation: str) -> Decimal:
    """Return ``balance + delta``, refusing any rounded or overflowing result."""
    with localcontext() as context:
        context.traps[Inexact] = True
        try:
            return balance + delta
        except Inexact as e:
            raise InexactAmountError(operation, delta.copy_abs()) from e
