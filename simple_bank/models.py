"""
Data models for the simple bank ledger.

This module contains the account value type and the transaction variants
used by the interactive shell.
"""

import random
from dataclasses import dataclass, field
from decimal import (
    ROUND_HALF_UP,
    Decimal,
    Inexact,
    InvalidOperation,
    Overflow,
    localcontext,
)
from enum import Enum
from typing import Callable, Optional

ACCOUNT_NUMBER_SPACE = 10 ** 9
CURRENCY_SYMBOL = "$"
CENT = Decimal('0.01')
# digits kept exactly in balance arithmetic
MONEY_PRECISION = 50
# bounds on a single amount typed at the shell
MAX_AMOUNT = Decimal('1e15')
MAX_DECIMAL_PLACES = 8


def to_decimal(amount) -> Decimal:
    """Coerce a money amount to Decimal."""
    if isinstance(amount, Decimal):
        return amount
    try:
        return Decimal(str(amount))
    except (InvalidOperation, ValueError):
        raise ValueError(f"Invalid amount: {amount!r}")


def format_currency(amount: Decimal) -> str:
    """Format currency for display, rounding half up to cents."""
    with localcontext() as ctx:
        ctx.prec = MONEY_PRECISION + 2
        cents = to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    return f"{CURRENCY_SYMBOL}{cents}"


def exact_sum(a: Decimal, b: Decimal) -> Optional[Decimal]:
    """Return a + b, or None when the result cannot be held exactly."""
    with localcontext() as ctx:
        ctx.prec = MONEY_PRECISION
        ctx.traps[Inexact] = True
        try:
            return a + b
        except (Inexact, Overflow):
            return None


def generate_account_number(rng: Optional[random.Random] = None) -> str:
    """Generate a random 9-digit, zero-padded account number."""
    rng = rng or random
    return f"{rng.randrange(ACCOUNT_NUMBER_SPACE):09d}"


@dataclass
class Account:
    """Represents a bank account."""

    account_number: str
    holder_name: str = ""
    balance: Decimal = field(default_factory=lambda: Decimal('0.00'))

    def __post_init__(self):
        """Ensure balance is a Decimal."""
        self.balance = to_decimal(self.balance)

    def __setattr__(self, name, value):
        # identifier and holder are fixed once set
        if name in ("account_number", "holder_name") and name in self.__dict__:
            raise AttributeError(f"{name} cannot be changed")
        super().__setattr__(name, value)

    @classmethod
    def create(cls, holder_name: str, initial_deposit=Decimal('0.00'),
               account_number: Optional[str] = None) -> "Account":
        """
        Create a new account.

        A negative initial deposit is clamped to zero rather than rejected.

        Args:
            holder_name: Display name, stored verbatim
            initial_deposit: Opening balance
            account_number: Identifier to use; generated when omitted

        Returns:
            The new Account
        """
        if account_number is None:
            account_number = generate_account_number()
        opening = max(Decimal('0.00'), to_decimal(initial_deposit))
        return cls(account_number=account_number, holder_name=holder_name,
                   balance=opening)

    def deposit(self, amount) -> bool:
        """Deposit money to account."""
        amount = to_decimal(amount)

        if amount <= 0:
            return False

        new_balance = exact_sum(self.balance, amount)
        if new_balance is None:
            return False

        self.balance = new_balance
        return True

    def withdraw(self, amount) -> bool:
        """Withdraw money from account."""
        amount = to_decimal(amount)

        if amount <= 0:
            return False

        if amount > self.balance:
            return False

        new_balance = exact_sum(self.balance, amount.copy_negate())
        if new_balance is None:
            return False

        self.balance = new_balance
        return True

    def describe(self) -> str:
        """One-line summary used by the account listing."""
        return (f"Account No: {self.account_number} | Holder: {self.holder_name} "
                f"| Balance: {format_currency(self.balance)}")


class TransactionType(Enum):
    """Balance-changing operations offered by the shell."""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"

    @property
    def prompt(self) -> str:
        """Text shown when asking for the amount."""
        if self is TransactionType.DEPOSIT:
            return f"Enter Deposit Amount: {CURRENCY_SYMBOL}"
        return f"Enter Withdrawal Amount: {CURRENCY_SYMBOL}"

    @property
    def verb(self) -> str:
        """Past tense used in success messages."""
        if self is TransactionType.DEPOSIT:
            return "Deposited"
        return "Withdrew"

    @property
    def operation(self) -> Callable[[Account, Decimal], bool]:
        """Account method this variant runs."""
        if self is TransactionType.DEPOSIT:
            return Account.deposit
        return Account.withdraw

    def apply(self, account: Account, amount: Decimal) -> bool:
        """Run the bound operation against an account."""
        return self.operation(account, amount)
