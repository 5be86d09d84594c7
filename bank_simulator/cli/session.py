"""Interactive terminal session: login loop and account menu."""

import logging
import time
from collections.abc import Callable
from decimal import Decimal

from rich.console import Console
from rich.markup import escape

from bank_simulator.core.amount import format_amount, to_decimal
from bank_simulator.domain.account.account import BankAccount
from bank_simulator.exceptions import (
    AccountStorageError,
    BankSimulatorError,
    InvalidCredentialsError,
)
from bank_simulator.i18n import _
from bank_simulator.infrastructure.config import Config
from bank_simulator.infrastructure.persistence.account_store import JsonAccountStore
from bank_simulator.services.auth_service import AuthService

logger = logging.getLogger(__name__)

MENU_ENTRIES = (
    ("1", "Deposit"),
    ("2", "Withdraw"),
    ("3", "Check Balance"),
    ("4", "Save Account to JSON"),
    ("5", "Logout"),
    ("6", "Exit"),
)


class SessionController:  # pylint: disable=too-many-instance-attributes
    """Drive one terminal session over the single stored account.

    The controller owns the live account: it logs in until the stored
    credentials match, then dispatches menu choices until the user exits.
    Nothing is saved unless the user picks the save entry.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        auth_service: AuthService,
        account_store: JsonAccountStore,
        config: Config,
        *,
        console: Console | None = None,
        read_line: Callable[[str], str] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._auth_service = auth_service
        self._account_store = account_store
        self._config = config
        self._console = console or Console()
        self._read_line = read_line or self._console.input
        self._sleep = sleep
        self._account: BankAccount | None = None
        self._exit_requested = False

    @property
    def account(self) -> BankAccount | None:
        """Return the account of the current session, if logged in."""
        return self._account

    def run(self) -> None:
        """Run the session until the user exits or input ends."""
        self._print_banner(_("Bank System"))
        try:
            self._account = self._login_until_success()
            while not self._exit_requested:
                self._show_menu()
                self._dispatch(self._read_line(""))
        except EOFError:
            logger.info("Input closed, ending session")
            self._console.print()
            self._exit()

    def login(self) -> BankAccount | None:
        """Prompt for credentials once; return the account or None on failure."""
        self._console.clear()
        self._print_banner(_("Bank System Login"))
        username = self._read_line(_("Enter username: "))
        password = self._read_line(_("Enter password: "))
        try:
            account = self._auth_service.login(username, password)
        except BankSimulatorError as e:
            logger.warning("Login failed: %s", e)
            self._error(str(e), prefix=not isinstance(e, InvalidCredentialsError))
            return None
        self._console.print(f"[green]{_('Login successful!')}[/]")
        return account

    def _login_until_success(self) -> BankAccount:
        account = None
        while account is None:
            account = self.login()
        return account

    def _dispatch(self, choice: str) -> None:
        match choice:
            case "1":
                self._deposit()
            case "2":
                self._withdraw()
            case "3":
                self._check_balance()
            case "4":
                self._save()
            case "5":
                self._logout()
            case "6":
                self._exit()
            case _:
                self._error(
                    _("Invalid choice. Please select an option from 1 to 6."),
                    prefix=False,
                )

    def _current_account(self) -> BankAccount:
        if self._account is None:
            raise RuntimeError("No account logged in")
        return self._account

    def _read_amount(self, prompt: str) -> Decimal | None:
        self._console.print(f"[yellow]{prompt}[/]")
        raw_amount = self._read_line("")
        try:
            return to_decimal(raw_amount)
        except BankSimulatorError as e:
            self._console.print(escape(_("Error: {message}").format(message=e)))
            return None

    def _deposit(self) -> None:
        amount = self._read_amount(_("Enter amount to deposit:"))
        if amount is None:
            return
        try:
            balance = self._current_account().deposit(amount)
        except BankSimulatorError as e:
            self._error(str(e))
            return
        self._console.print(
            "[green]"
            + escape(
                _("Deposited {amount}. New balance: {balance}").format(
                    amount=format_amount(amount), balance=format_amount(balance)
                )
            )
            + "[/]"
        )

    def _withdraw(self) -> None:
        amount = self._read_amount(_("Enter amount to withdraw:"))
        if amount is None:
            return
        try:
            balance = self._current_account().withdraw(amount)
        except BankSimulatorError as e:
            self._error(str(e))
            return
        self._console.print(
            "[green]"
            + escape(
                _("Withdrew {amount}. New balance: {balance}").format(
                    amount=format_amount(amount), balance=format_amount(balance)
                )
            )
            + "[/]"
        )

    def _check_balance(self) -> None:
        balance = self._current_account().check_balance()
        self._console.print(
            "[blue]"
            + escape(
                _("Your current balance is: {balance}").format(
                    balance=format_amount(balance)
                )
            )
            + "[/]"
        )

    def _save(self) -> None:
        account = self._current_account()
        path = self._config.save_path(account.account_name)
        if path != self._auth_service.account_path:
            logger.warning(
                "Saving to %s, but login reads %s",
                path,
                self._auth_service.account_path,
            )
        try:
            self._account_store.save(account, path)
        except AccountStorageError as e:
            self._error(str(e))
            return
        self._console.print(
            "[green]"
            + escape(_("Account data saved to {path}").format(path=path))
            + "[/]"
        )

    def _logout(self) -> None:
        self._console.print(f"[yellow]{_('Logging out...')}[/]")
        self._sleep(self._config.logout_pause)
        self._console.clear()
        self._auth_service.logout(self._current_account())
        self._account = None
        self._account = self._login_until_success()

    def _exit(self) -> None:
        self._exit_requested = True
        self._console.print(f"[green]{_('Exiting program.')}[/]")

    def _show_menu(self) -> None:
        self._console.print(f"[blue]{_('Choose an option:')}[/]")
        for key, label in MENU_ENTRIES:
            self._console.print(f"[yellow]{key}. {_(label)}[/]")

    def _print_banner(self, title: str) -> None:
        self._console.rule(f"[bold cyan]{escape(title)}[/]")

    def _error(self, message: str, *, prefix: bool = True) -> None:
        text = _("Error: {message}").format(message=message) if prefix else message
        self._console.print(f"[red]{escape(text)}[/]")
