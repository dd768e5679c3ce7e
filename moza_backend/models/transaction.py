"""
Transaction database model.
Represents money movements between bank accounts.
"""

from sqlalchemy import Column, String, Numeric, DateTime, Integer, ForeignKey, Enum as SQLEnum
from sqlalchemy.orm import relationship
from datetime import datetime
from moza_backend.database import Base
from moza_backend.models.account import Currency
import enum


class TransactionType(enum.Enum):
    """Kinds of money movement."""
    TRANSFER = "TRANSFER"
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"


class TransactionStatus(enum.Enum):
    """Transaction status states."""
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class Transaction(Base):
    """
    Transactions table - immutable transfer records.
    """
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    from_account_id = Column(Integer, ForeignKey("bank_accounts.id"), index=True, nullable=False)
    to_account_id = Column(Integer, ForeignKey("bank_accounts.id"), index=True, nullable=False)
    amount = Column(Numeric(precision=20, scale=2), nullable=False)
    currency = Column(SQLEnum(Currency), nullable=False)
    description = Column(String(500), nullable=True)
    type = Column(SQLEnum(TransactionType), nullable=False, default=TransactionType.TRANSFER)
    status = Column(SQLEnum(TransactionStatus), nullable=False, default=TransactionStatus.PENDING)
    reference = Column(String(64), unique=True, index=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    # Relationships
    from_account = relationship(
        "BankAccount",
        foreign_keys=[from_account_id],
        back_populates="sent_transactions"
    )
    to_account = relationship(
        "BankAccount",
        foreign_keys=[to_account_id],
        back_populates="received_transactions"
    )

    def __repr__(self):
        return f"<Transaction(ref={self.reference}, from={self.from_account_id}, to={self.to_account_id}, amount={self.amount})>"
