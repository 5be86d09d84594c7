"""Account module exports."""
from bank_simulator.domain.account.account import BankAccount

__all__ = ["BankAccount"]
