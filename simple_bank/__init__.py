"""
Simple Bank

A minimal in-memory account ledger driven by an interactive text menu.
Supports account creation, deposits, withdrawals, balance checks and
account listing.
"""

__version__ = "0.1.0"
__author__ = "Developer"
__email__ = "dev@example.com"

from .models import Account, TransactionType, format_currency, generate_account_number
from .ledger import Ledger
from .validation import ParseResult
from .cli import BankShell, ShellState, main


def create_shell(ledger: Ledger = None) -> BankShell:
    """
    Create a BankShell instance bound to a ledger.

    Args:
        ledger: Ledger to operate on; a fresh empty one when omitted

    Returns:
        BankShell instance
    """
    return BankShell(ledger if ledger is not None else Ledger())


__all__ = [
    "Account",
    "TransactionType",
    "Ledger",
    "ParseResult",
    "BankShell",
    "ShellState",
    "format_currency",
    "generate_account_number",
    "create_shell",
    "main"
]
