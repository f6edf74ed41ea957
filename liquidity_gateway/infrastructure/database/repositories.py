"""Data access layer: ledger snapshots read through SQLAlchemy"""

from datetime import datetime
from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from liquidity_gateway.infrastructure.database.models import AccountRecord, TransactionRecord, ARAPItemRecord
from liquidity_gateway.domain.models import Account, ExpenseTransaction, ARAPItem
from liquidity_gateway.domain.exceptions import DataGatewayError


class SqlDataGateway:
    """DataGateway backed by the local ledger tables"""

    def __init__(self, db: Session):
        self.db = db

    async def list_accounts(self, user_id: str) -> List[Account]:
        """All accounts for the user, regardless of currency"""
        try:
            rows = (
                self.db.query(AccountRecord)
                .filter(AccountRecord.user_id == user_id)
                .all()
            )
        except SQLAlchemyError as e:
            raise DataGatewayError(f"Failed to load accounts: {e}") from e

        return [Account(balance=row.balance, currency=row.currency, type=row.type) for row in rows]

    async def list_expense_transactions(self, user_id: str, since: datetime) -> List[ExpenseTransaction]:
        """Outflows (amount <= 0) dated on or after `since`"""
        try:
            rows = (
                self.db.query(TransactionRecord)
                .filter(
                    TransactionRecord.user_id == user_id,
                    TransactionRecord.occurred_at >= since,
                    TransactionRecord.amount <= 0,
                )
                .all()
            )
        except SQLAlchemyError as e:
            raise DataGatewayError(f"Failed to load transactions: {e}") from e

        return [ExpenseTransaction(amount=row.amount, occurred_at=row.occurred_at) for row in rows]

    async def list_arap_items(self, user_id: str, kind: str) -> List[ARAPItem]:
        """Receivables or payables for the user"""
        try:
            rows = (
                self.db.query(ARAPItemRecord)
                .filter(ARAPItemRecord.user_id == user_id, ARAPItemRecord.type == kind)
                .all()
            )
        except SQLAlchemyError as e:
            raise DataGatewayError(f"Failed to load {kind} items: {e}") from e

        return [
            ARAPItem(kind=row.type, amount=row.amount, age_days=row.age_days, status=row.status)
            for row in rows
        ]
