"""
Database models package.
"""

from moza_backend.models.user import User
from moza_backend.models.account import BankAccount, AccountType, Currency
from moza_backend.models.card import Card
from moza_backend.models.transaction import Transaction, TransactionType, TransactionStatus

__all__ = [
    "User",
    "BankAccount",
    "AccountType",
    "Currency",
    "Card",
    "Transaction",
    "TransactionType",
    "TransactionStatus"
]
