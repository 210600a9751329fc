"""
Input parsing for the interactive shell.

Every function here takes the raw line typed by the user and returns a
ParseResult; none of them read input or raise on bad text.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from .models import CURRENCY_SYMBOL, MAX_AMOUNT, MAX_DECIMAL_PLACES

INVALID_AMOUNT = "Invalid amount entered."
NEGATIVE_DEPOSIT = "Deposit must be non-negative."
NON_POSITIVE_AMOUNT = "Amount must be positive."
INVALID_CHOICE = "ERROR: Invalid input. Please enter a number."


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing one line of input."""

    value: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value) -> "ParseResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: str) -> "ParseResult":
        return cls(error=error)


def parse_amount(text: str) -> ParseResult:
    """Parse a money amount, tolerating a currency symbol and commas."""
    clean_str = text.replace(CURRENCY_SYMBOL, '').replace(',', '').strip()
    try:
        amount = Decimal(clean_str)
    except (InvalidOperation, ValueError):
        return ParseResult.failure(INVALID_AMOUNT)

    if not amount.is_finite():
        return ParseResult.failure(INVALID_AMOUNT)

    if amount.copy_abs() >= MAX_AMOUNT:
        return ParseResult.failure(INVALID_AMOUNT)

    if amount.normalize().as_tuple().exponent < -MAX_DECIMAL_PLACES:
        return ParseResult.failure(INVALID_AMOUNT)

    return ParseResult.success(amount)


def parse_initial_deposit(text: str) -> ParseResult:
    """Parse an opening deposit; zero is allowed, negatives are not."""
    result = parse_amount(text)
    if result.ok and result.value < 0:
        return ParseResult.failure(NEGATIVE_DEPOSIT)
    return result


def parse_transaction_amount(text: str) -> ParseResult:
    """Parse a deposit or withdrawal amount, which must be positive."""
    result = parse_amount(text)
    if result.ok and result.value <= 0:
        return ParseResult.failure(NON_POSITIVE_AMOUNT)
    return result


def parse_menu_choice(text: str) -> ParseResult:
    """Parse a menu selection as an integer. Range is not checked."""
    try:
        return ParseResult.success(int(text.strip()))
    except ValueError:
        return ParseResult.failure(INVALID_CHOICE)
