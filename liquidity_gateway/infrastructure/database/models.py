"""SQLAlchemy ORM models for the ledger read model"""

import uuid
from sqlalchemy import Column, String, Numeric, DateTime, Integer, Boolean, Text, Index
from sqlalchemy.orm import declarative_base
from sqlalchemy.sql import func

Base = declarative_base()


def _new_id() -> str:
    return str(uuid.uuid4())


class AccountRecord(Base):
    """Bank, cash or credit account owned by a user"""

    __tablename__ = "accounts"

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(Text, nullable=False, index=True)
    name = Column(Text, nullable=False, default="")
    type = Column(Text, nullable=False, default="bank")  # checking, savings, credit_card, cash
    balance = Column(Numeric(18, 2), nullable=False, default=0)
    currency = Column(String(3), nullable=False, default="TRY")
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


class TransactionRecord(Base):
    """Ledger transaction; expenses are stored with a negative amount"""

    __tablename__ = "transactions"
    __table_args__ = (Index("ix_transactions_user_occurred", "user_id", "occurred_at"),)

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(Text, nullable=False)
    account_id = Column(String(36), nullable=True)
    amount = Column(Numeric(18, 2), nullable=False)
    type = Column(Text, nullable=False, default="expense")  # income or expense
    category = Column(Text, nullable=True)
    description = Column(Text, nullable=True)
    occurred_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


class ARAPItemRecord(Base):
    """Receivable or payable invoice with aging"""

    __tablename__ = "ar_ap_items"
    __table_args__ = (Index("ix_ar_ap_items_user_type", "user_id", "type"),)

    id = Column(String(36), primary_key=True, default=_new_id)
    user_id = Column(Text, nullable=False)
    type = Column(Text, nullable=False)  # receivable or payable
    invoice_number = Column(Text, nullable=True)
    counterparty = Column(Text, nullable=False, default="")
    amount = Column(Numeric(18, 2), nullable=False)
    age_days = Column(Integer, nullable=True, default=0)
    status = Column(Text, nullable=False, default="pending")  # pending, paid, overdue
    currency = Column(String(3), nullable=False, default="TRY")
    created_at = Column(DateTime, nullable=False, server_default=func.now())
