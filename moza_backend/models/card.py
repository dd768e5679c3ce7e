"""
Card database model.
Represents payment cards bound to a bank account.
"""

from sqlalchemy import Column, String, Numeric, DateTime, Integer, Boolean, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from moza_backend.database import Base


class Card(Base):
    """
    Cards table - the bound account always belongs to the card's user.
    """
    __tablename__ = "cards"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    bank_account_id = Column(Integer, ForeignKey("bank_accounts.id"), index=True, nullable=False)
    card_number = Column(String(16), unique=True, index=True, nullable=False)
    expiry_date = Column(DateTime, nullable=False)
    cvv = Column(String(3), nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
    daily_limit = Column(Numeric(precision=20, scale=2), nullable=False)
    card_type = Column(String(30), nullable=False)  # VISA, MASTERCARD, etc.
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)

    bank_account = relationship("BankAccount", back_populates="cards")

    def __repr__(self):
        # cvv stays out of logs
        return f"<Card(id={self.id}, account={self.bank_account_id}, type={self.card_type})>"
