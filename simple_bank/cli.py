"""
CLI interface for the simple bank ledger.

This module provides the interactive, menu-driven shell and its click
entry point.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Optional

import click

from . import __version__
from .ledger import Ledger
from .models import Account, TransactionType, format_currency
from .validation import (
    ParseResult,
    parse_initial_deposit,
    parse_menu_choice,
    parse_transaction_amount,
)

EXIT_CHOICE = 6

BANNER = (
    "=========================================\n"
    "|| Welcome to the Simple Banking System ||\n"
    "========================================="
)

MENU = (
    "\n--- MAIN MENU ---\n"
    "1. Create New Account\n"
    "2. Deposit Funds\n"
    "3. Withdraw Funds\n"
    "4. Check Balance\n"
    "5. View All Accounts\n"
    f"{EXIT_CHOICE}. Exit"
)

FAREWELL = "\nThank you for using the Banking System. Goodbye!"


class ShellState(Enum):
    """Lifecycle of the menu loop."""
    RUNNING = "running"
    TERMINATED = "terminated"


class BankShell:
    """Menu-driven front end over a Ledger."""

    def __init__(self, ledger: Ledger):
        """Initialize shell with the ledger it operates on."""
        self.ledger = ledger
        self.logger = logging.getLogger(__name__)
        self.state = ShellState.RUNNING
        self.actions: Dict[int, Callable[[], None]] = {
            1: self.create_account,
            2: lambda: self.do_transaction(TransactionType.DEPOSIT),
            3: lambda: self.do_transaction(TransactionType.WITHDRAWAL),
            4: self.check_balance,
            5: self.list_accounts,
        }

    def read_line(self, prompt: str) -> str:
        """Read one raw line; an empty line is returned as ''."""
        return click.prompt(prompt, default="", show_default=False, prompt_suffix="")

    def prompt_until_valid(self, prompt: str,
                           parser: Callable[[str], ParseResult]):
        """Re-prompt until parser accepts the line, echoing each error."""
        while True:
            result = parser(self.read_line(prompt))
            if result.ok:
                return result.value
            click.echo(result.error)

    def run(self) -> None:
        """Show the banner and loop over the menu until exit."""
        click.echo(BANNER)
        while self.state is ShellState.RUNNING:
            click.echo(MENU)
            try:
                line = self.read_line("Enter your choice: ")
                choice = parse_menu_choice(line)
                if not choice.ok:
                    click.echo(f"\n{choice.error}")
                    continue
                self.state = self.handle_choice(choice.value)
            except click.Abort:
                self.logger.debug("Input closed, leaving menu loop")
                self.state = ShellState.TERMINATED
        click.echo(FAREWELL)

    def handle_choice(self, choice: int) -> ShellState:
        """Dispatch one menu selection and return the next state."""
        if choice == EXIT_CHOICE:
            return ShellState.TERMINATED

        action = self.actions.get(choice)
        if action is None:
            click.echo(f"\nInvalid choice. Please select a number between 1 and {EXIT_CHOICE}.")
        else:
            action()
        return ShellState.RUNNING

    def create_account(self) -> Account:
        """Prompt for holder and opening deposit, then open the account."""
        name = self.read_line("Enter Account Holder Name: ")
        initial_deposit = self.prompt_until_valid(
            "Enter Initial Deposit Amount (minimum $0.00): $",
            parse_initial_deposit
        )

        account = self.ledger.open_account(name, initial_deposit)
        click.echo(f"\nSUCCESS: Account created for {name}.")
        click.echo(f"Account No: {account.account_number}")
        return account

    def find_account(self) -> Optional[Account]:
        """Prompt for an account number once and look it up."""
        account_number = self.read_line("Enter Account Number: ")
        account = self.ledger.find_by_id(account_number)

        if account is None:
            self.logger.info(f"Lookup failed for account number {account_number!r}")
            click.echo(f"\nERROR: Account not found with number {account_number}")
        return account

    def do_transaction(self, transaction_type: TransactionType) -> bool:
        """Run a deposit or withdrawal against a prompted account."""
        account = self.find_account()
        if account is None:
            return False

        amount = self.prompt_until_valid(transaction_type.prompt, parse_transaction_amount)

        if transaction_type.apply(account, amount):
            click.echo(
                f"\nSUCCESS: {transaction_type.verb} {format_currency(amount)}. "
                f"New balance: {format_currency(account.balance)}"
            )
            return True

        self.logger.info(
            f"{transaction_type.value} of {amount} rejected for {account.account_number}"
        )
        click.echo("\nTRANSACTION FAILED: Insufficient funds or invalid amount.")
        click.echo(f"Current balance: {format_currency(account.balance)}")
        return False

    def check_balance(self) -> None:
        """Show holder and balance for a prompted account."""
        account = self.find_account()
        if account is not None:
            click.echo("\n*** Balance Check ***")
            click.echo(f"Account Holder: {account.holder_name}")
            click.echo(f"Current Balance: {format_currency(account.balance)}")

    def list_accounts(self) -> None:
        """Print every account with a leading count."""
        accounts = self.ledger.list_all()
        if not accounts:
            click.echo("The bank currently has no registered accounts.")
            return

        click.echo(f"\n--- All Bank Accounts Summary ({len(accounts)}) ---")
        for account in accounts:
            click.echo(account.describe())
        click.echo(f"{'-'*41}\n")


@click.command()
@click.option('--log-level', default='WARNING',
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging verbosity (logs go to stderr)')
@click.version_option(__version__)
def cli(log_level):
    """Simple Banking System interactive shell"""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    BankShell(Ledger()).run()


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == '__main__':
    main()
