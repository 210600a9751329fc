"""
Ledger for the simple bank.

This module holds the in-memory collection of accounts and the lookup
logic used by the shell.
"""

import logging
from decimal import Decimal
from typing import Iterator, List, Optional

from .models import Account, generate_account_number


class Ledger:
    """Ordered, in-memory collection of accounts."""

    def __init__(self, accounts: Optional[List[Account]] = None):
        """Initialize ledger, optionally seeded with accounts."""
        self._accounts: List[Account] = list(accounts or [])
        self.logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts))

    def __contains__(self, account_number) -> bool:
        return self.find_by_id(account_number) is not None

    def add(self, account: Account) -> None:
        """Append an account. Duplicate numbers are not checked here."""
        self._accounts.append(account)

    def find_by_id(self, account_number: str) -> Optional[Account]:
        """Get account by account number, or None when absent."""
        for account in self._accounts:
            if account.account_number == account_number:
                return account
        return None

    def list_all(self) -> List[Account]:
        """All accounts in insertion order. Empty means no accounts."""
        return list(self._accounts)

    def generate_unique_account_number(self) -> str:
        """Draw account numbers until one is not already issued."""
        account_number = generate_account_number()
        while account_number in self:
            self.logger.warning(f"Account number collision on {account_number}, redrawing")
            account_number = generate_account_number()
        return account_number

    def open_account(self, holder_name: str,
                     initial_deposit: Decimal = Decimal('0.00')) -> Account:
        """Create a new account with a unique number and store it."""
        account = Account.create(
            holder_name,
            initial_deposit,
            account_number=self.generate_unique_account_number()
        )
        self.add(account)
        self.logger.info(f"Opened account {account.account_number} for {holder_name!r}")
        return account
