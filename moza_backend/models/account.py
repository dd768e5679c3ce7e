"""
Bank account database model.
Represents bank accounts owned by users.
"""

from sqlalchemy import Column, String, Numeric, DateTime, Integer, Boolean, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from datetime import datetime
from decimal import Decimal
from moza_backend.database import Base
import enum


class AccountType(enum.Enum):
    """Kinds of bank account."""
    CHECKING = "CHECKING"
    SAVINGS = "SAVINGS"
    BUSINESS = "BUSINESS"


class Currency(enum.Enum):
    """Supported account currencies."""
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"


class BankAccount(Base):
    """
    Bank accounts table - one row per account, owned by exactly one user.
    """
    __tablename__ = "bank_accounts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    account_type = Column(SQLEnum(AccountType), nullable=False)
    currency = Column(SQLEnum(Currency), nullable=False)
    balance = Column(Numeric(precision=20, scale=2), nullable=False, default=Decimal("0.00"))
    account_number = Column(String(9), unique=True, index=True, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    last_activity = Column(DateTime, default=datetime.utcnow, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    owner = relationship("User", back_populates="accounts")
    cards = relationship("Card", back_populates="bank_account")

    # Relationship to transactions
    sent_transactions = relationship(
        "Transaction",
        foreign_keys="Transaction.from_account_id",
        back_populates="from_account"
    )
    received_transactions = relationship(
        "Transaction",
        foreign_keys="Transaction.to_account_id",
        back_populates="to_account"
    )

    def __repr__(self):
        return f"<BankAccount(id={self.id}, number={self.account_number}, owner={self.user_id}, balance={self.balance})>"
